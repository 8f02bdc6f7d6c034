import logging
from typing import Callable, Optional

from app.client import encoder
from app.client.encoder import SelectedFile
from app.client.exception import PromptGenerationError, ValidationError
from app.client.preview import PreviewRegistry
from app.client.service import VideoPromptService
from app.constants import ErrorMessages


class VideoPromptSession:
    """
    업로드 화면 한 개의 상태(선택 파일, 미리보기, 진행 여부, 결과, 에러).

    - 파일을 선택하면 미리보기를 발급하고, 교체하거나 clear 하면 이전 미리보기를 해제한다.
    - 요청이 진행 중이면 generate 는 아무것도 하지 않는다.
    """

    def __init__(self, service: VideoPromptService, previews: Optional[PreviewRegistry] = None):
        self.logger = logging.getLogger(__name__)
        self.service = service
        self.previews = previews or PreviewRegistry()

        self.file: Optional[SelectedFile] = None
        self.preview_url: Optional[str] = None
        self.is_analyzing = False
        self.result = ""
        self.error: Optional[str] = None

    @property
    def can_generate(self) -> bool:
        return self.file is not None and not self.is_analyzing

    def select(self, file: Optional[SelectedFile]) -> bool:
        self.error = None
        self.result = ""

        if file is None:
            return False

        try:
            encoder.validate(file)
        except ValidationError as e:
            self.logger.info(f"[VideoPromptSession] ▶ 파일 거부 | file={file.name} | error_code={e.error_code}")
            self.error = e.message
            return False

        self._release_preview()
        self.file = file
        self.preview_url = self.previews.create_url(file)
        self.logger.info(f"[VideoPromptSession] ▶ 파일 선택 | file={file.name} | size_mb={file.size_mb:.1f}")
        return True

    async def generate(self, override_text: Optional[str] = None) -> Optional[str]:
        if not self.can_generate:
            return None

        sent_file = self.file
        self.is_analyzing = True
        self.error = None
        self.result = ""
        try:
            result = await self.service.generate_prompt_from_video(sent_file, override_text)
        except PromptGenerationError as e:
            if self.file is sent_file:
                self.error = e.message or ErrorMessages.ANALYSIS_RETRY
            return None
        finally:
            self.is_analyzing = False

        # 요청 중에 파일이 지워지거나 바뀌었으면 결과를 버린다
        if self.file is not sent_file:
            self.logger.info(f"[VideoPromptSession] ▶ 선택이 바뀌어 결과를 버립니다 | file={sent_file.name}")
            return None

        self.result = result
        return result

    def copy_result(self, clipboard: Callable[[str], None]) -> bool:
        if not self.result:
            return False
        clipboard(self.result)
        return True

    def clear(self) -> None:
        if self.file is not None:
            self.logger.info(f"[VideoPromptSession] ▶ 파일 선택 해제 | file={self.file.name}")
        self._release_preview()
        self.file = None
        self.result = ""
        self.error = None

    def _release_preview(self) -> None:
        if self.preview_url is not None:
            self.previews.revoke_url(self.preview_url)
            self.preview_url = None
