from enum import Enum
from typing import Optional

from app.constants import ErrorMessages


class ClientErrorCode(Enum):
    CLIENT_INVALID_TYPE = ("CLIENT_001", ErrorMessages.INVALID_VIDEO_TYPE)
    CLIENT_FILE_TOO_LARGE = ("CLIENT_002", ErrorMessages.VIDEO_TOO_LARGE)
    CLIENT_ENCODING_FAILED = ("CLIENT_003", ErrorMessages.VIDEO_READ_FAILED)
    CLIENT_UPSTREAM_FAILED = ("CLIENT_004", "Request failed.")
    CLIENT_EMPTY_RESULT = ("CLIENT_005", ErrorMessages.NO_RESPONSE_TEXT)
    CLIENT_VIDEO_UNSUITABLE = ("CLIENT_006", ErrorMessages.VIDEO_UNSUITABLE)
    CLIENT_GENERATION_FAILED = ("CLIENT_007", ErrorMessages.ANALYSIS_FAILED)

    def __init__(self, code: str, message: str):
        self._code = code
        self._message = message

    @property
    def code(self) -> str:
        return self._code

    @property
    def message(self) -> str:
        return self._message


class VideoPromptClientException(Exception):
    """클라이언트 측 오류의 공통 부모. message는 사용자에게 그대로 보여줄 수 있다."""

    def __init__(self, code: ClientErrorCode, message: Optional[str] = None):
        self.code = code
        self.message = message or code.message
        super().__init__(self.message)

    @property
    def error_code(self) -> str:
        return self.code.code


class ValidationError(VideoPromptClientException):
    pass


class EncodingError(VideoPromptClientException):
    def __init__(self, message: Optional[str] = None):
        super().__init__(ClientErrorCode.CLIENT_ENCODING_FAILED, message)


class UpstreamError(VideoPromptClientException):
    def __init__(self, message: str, status_code: int):
        super().__init__(ClientErrorCode.CLIENT_UPSTREAM_FAILED, message)
        self.status_code = status_code


class EmptyResultError(VideoPromptClientException):
    def __init__(self):
        super().__init__(ClientErrorCode.CLIENT_EMPTY_RESULT)


class PromptGenerationError(VideoPromptClientException):
    """generate_prompt_from_video 가 밖으로 내보내는 유일한 오류"""
    pass
