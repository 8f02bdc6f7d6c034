from enum import Enum
from typing import Any, Optional

from app.constants import ErrorMessages
from app.exception import VideoPromptException


class PromptErrorCode(Enum):
    PROMPT_BAD_REQUEST = ("PROMPT_001", ErrorMessages.BAD_REQUEST)
    PROMPT_METHOD_NOT_ALLOWED = ("PROMPT_002", ErrorMessages.METHOD_NOT_ALLOWED)
    PROMPT_CONFIG_MISSING = ("PROMPT_003", "Missing server configuration.")
    PROMPT_UPSTREAM_EMPTY = ("PROMPT_004", ErrorMessages.UPSTREAM_EMPTY)
    PROMPT_UPSTREAM_FAILED = ("PROMPT_005", ErrorMessages.SERVER_ERROR)

    def __init__(self, code: str, message: str):
        self._code = code
        self._message = message

    @property
    def code(self) -> str:
        return self._code

    @property
    def message(self) -> str:
        return self._message


class PromptException(VideoPromptException):
    def __init__(
        self,
        code: Enum,
        *,
        status_code: int = 400,
        message: Optional[str] = None,
        detail: Optional[Any] = None,
    ):
        super().__init__(code, status_code=status_code, message=message, detail=detail)
        self.code = code


class BadRequestError(PromptException):
    def __init__(self, detail: Optional[Any] = None):
        super().__init__(PromptErrorCode.PROMPT_BAD_REQUEST, status_code=400, detail=detail)


class MethodNotAllowedError(PromptException):
    def __init__(self, method: str):
        super().__init__(PromptErrorCode.PROMPT_METHOD_NOT_ALLOWED, status_code=405, detail=method)


class ConfigurationError(PromptException):
    def __init__(self, env_names: str):
        super().__init__(
            PromptErrorCode.PROMPT_CONFIG_MISSING,
            status_code=500,
            message=f"Missing server env var {env_names}. Set it on your hosting platform.",
        )


class UpstreamEmptyError(PromptException):
    def __init__(self):
        super().__init__(PromptErrorCode.PROMPT_UPSTREAM_EMPTY, status_code=502)


class UpstreamCallError(PromptException):
    def __init__(self, message: Optional[str] = None, status_code: int = 500):
        super().__init__(PromptErrorCode.PROMPT_UPSTREAM_FAILED, status_code=status_code, message=message)
