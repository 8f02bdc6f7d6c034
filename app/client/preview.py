import logging
import uuid
from pathlib import Path
from typing import Dict

from app.client.encoder import SelectedFile


class PreviewRegistry:
    """
    선택된 영상을 재생할 수 있는 로컬 참조(preview://...)를 발급하고 회수합니다.
    발급한 URL은 파일을 지우거나 교체할 때 정확히 한 번 revoke 해야 합니다.
    """

    SCHEME = "preview://"

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self._entries: Dict[str, Path] = {}

    def create_url(self, file: SelectedFile) -> str:
        url = f"{self.SCHEME}{uuid.uuid4().hex}"
        self._entries[url] = file.path
        self.logger.debug(f"[PreviewRegistry] ▶ 미리보기 생성 | url={url} | file={file.name}")
        return url

    def revoke_url(self, url: str) -> bool:
        if self._entries.pop(url, None) is None:
            self.logger.warning(f"[PreviewRegistry] ▶ 이미 해제되었거나 알 수 없는 미리보기 | url={url}")
            return False
        self.logger.debug(f"[PreviewRegistry] ▶ 미리보기 해제 | url={url}")
        return True

    @property
    def active_count(self) -> int:
        return len(self._entries)
