import asyncio
import base64
import binascii
import json
import logging
from typing import Callable, Tuple

from pydantic import ValidationError

from app.config import CredentialResolver
from app.constants import PromptConfig
from app.prompt.exception import (
    BadRequestError,
    ConfigurationError,
    MethodNotAllowedError,
    PromptException,
    UpstreamCallError,
    UpstreamEmptyError,
)
from app.prompt.generator import PromptGenerator
from app.prompt.instruction import DEFAULT_INSTRUCTION
from app.prompt.schema import InlineVideo, PromptRequest, PromptResponse


class PromptService:
    """
    영상 → 프롬프트 프록시 엔드포인트의 처리 로직.

    요청 한 건은 메서드 확인 → 인증 키 확인 → 본문 검증 → 업스트림 호출 → 응답 변환 순서로
    진행되며 어느 단계에서든 PromptException으로 종료될 수 있습니다.
    업스트림 호출은 요청당 최대 한 번이며 재시도하지 않습니다.
    """

    ALLOWED_METHOD = "POST"

    def __init__(
        self,
        credential_resolver: CredentialResolver,
        generator_factory: Callable[..., PromptGenerator],
        temperature: float = PromptConfig.TEMPERATURE,
    ):
        self.logger = logging.getLogger(__name__)
        self.credential_resolver = credential_resolver
        self.generator_factory = generator_factory
        self.temperature = temperature

    async def generate(self, method: str, raw_body: bytes) -> PromptResponse:
        try:
            self._check_method(method)
            api_key = self._resolve_credential()
            request, video = self._parse_body(raw_body)

            instruction = self._select_instruction(request.prompt_text)
            generator = self.generator_factory(api_key=api_key)

            self.logger.info(
                f"[PromptService] ▶ 프롬프트 생성 시작 | mime_type={request.video.mime_type} | custom_instruction={instruction is not DEFAULT_INSTRUCTION}"
            )
            text = await asyncio.to_thread(generator.generate, video, instruction, self.temperature)

        except PromptException:
            raise
        except Exception as e:
            self.logger.exception(f"[PromptService] ▶ 프롬프트 생성 중 예상치 못한 오류 | error={e}")
            raise UpstreamCallError(str(e) or None) from e

        prompt = (text or "").strip()
        if not prompt:
            self.logger.error("[PromptService] ▶ 업스트림 응답이 비어있습니다.")
            raise UpstreamEmptyError()

        self.logger.info(f"[PromptService] ▶ 프롬프트 생성 완료 | length={len(prompt)}")
        return PromptResponse(prompt=prompt)

    def _check_method(self, method: str) -> None:
        if (method or "").upper() != self.ALLOWED_METHOD:
            raise MethodNotAllowedError(method)

    def _resolve_credential(self) -> str:
        api_key = self.credential_resolver.resolve()
        if not api_key:
            self.logger.error(f"[PromptService] ▶ 인증 키 환경변수가 없습니다 | env={self.credential_resolver.describe()}")
            raise ConfigurationError(self.credential_resolver.describe())
        return api_key

    def _parse_body(self, raw_body: bytes) -> Tuple[PromptRequest, InlineVideo]:
        try:
            body = json.loads(raw_body or b"null")
        except (UnicodeDecodeError, ValueError) as e:
            raise BadRequestError(detail=str(e)) from e

        if not isinstance(body, dict):
            raise BadRequestError(detail="body must be a JSON object")

        try:
            request = PromptRequest.model_validate(body)
        except ValidationError as e:
            raise BadRequestError(detail=e.errors(include_url=False)) from e

        # 영상은 여기서 한 번만 디코딩해 업스트림에 넘긴다
        try:
            data = base64.b64decode(request.video.data, validate=True)
        except (binascii.Error, ValueError) as e:
            raise BadRequestError(detail="video.data is not valid base64") from e

        return request, InlineVideo(data=data, mime_type=request.video.mime_type)

    @staticmethod
    def _select_instruction(prompt_text: str | None) -> str:
        if prompt_text and prompt_text.strip():
            return prompt_text
        return DEFAULT_INSTRUCTION
