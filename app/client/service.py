import logging
from typing import Optional

from app.client import encoder
from app.client.client import PromptClient
from app.client.encoder import SelectedFile
from app.client.exception import ClientErrorCode, PromptGenerationError


class VideoPromptService:
    def __init__(self, client: PromptClient):
        self.logger = logging.getLogger(__name__)
        self.client = client

    async def generate_prompt_from_video(self, file: SelectedFile, override_text: Optional[str] = None) -> str:
        """
        영상을 검증·인코딩해 프록시로 보내고 생성된 프롬프트를 돌려줍니다.
        실패는 모두 사용자에게 보여줄 메시지를 가진 PromptGenerationError 하나로 정규화됩니다.
        """
        try:
            encoder.validate(file)
            payload = await encoder.encode(file)
            return await self.client.request_prompt(payload, override_text)

        except Exception as e:
            self.logger.error(f"[VideoPromptService] ▶ 프롬프트 생성 실패 | file={file.name} | error={e}")
            message = getattr(e, "message", None) or str(e)

            # 업스트림 400은 대부분 파일 크기/포맷 문제
            if "400" in message:
                raise PromptGenerationError(ClientErrorCode.CLIENT_VIDEO_UNSUITABLE) from e
            raise PromptGenerationError(ClientErrorCode.CLIENT_GENERATION_FAILED, message or None) from e
