import logging
from typing import Optional, Protocol

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from app.prompt.exception import UpstreamCallError
from app.prompt.schema import InlineVideo


class PromptGenerator(Protocol):
    """업스트림 생성 모델 호출 인터페이스. 테스트에서는 stub으로 대체한다."""

    def generate(self, media: InlineVideo, instruction_text: str, temperature: float) -> Optional[str]:
        ...


class GeminiPromptGenerator:
    def __init__(self, *, api_key: str, model: str):
        self.logger = logging.getLogger(__name__)
        self.client = genai.Client(api_key=api_key)
        self.model = model

    def generate(self, media: InlineVideo, instruction_text: str, temperature: float) -> Optional[str]:
        part_video = types.Part.from_bytes(
            data=media.data,
            mime_type=media.mime_type,
        )
        part_text = types.Part.from_text(text=instruction_text)

        self.logger.info(
            f"[GeminiPromptGenerator] ▶ Gemini API 호출 | model={self.model} | mime_type={media.mime_type} | temperature={temperature}"
        )
        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=[types.Content(role="user", parts=[part_video, part_text])],
                config=types.GenerateContentConfig(temperature=temperature),
            )
        except genai_errors.APIError as e:
            self.logger.error(f"[GeminiPromptGenerator] ▶ Gemini API 호출 실패 | code={e.code} | error={e}")
            raise UpstreamCallError(str(e)) from e

        return response.text
