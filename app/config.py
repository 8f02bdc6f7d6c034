import logging
import os
from typing import Mapping, Optional, Sequence

from app.constants import CredentialConfig


class CredentialResolver:
    """
    업스트림 인증 키를 프로세스 환경에서 찾습니다.

    후보 이름을 순서대로 조회하고 비어있지 않은 첫 번째 값을 사용합니다.
    기본 순서는 GEMINI_API_KEY → API_KEY 입니다. 두 값이 모두 설정되어 있으면
    GEMINI_API_KEY가 이기므로 배포 환경에서는 둘 중 하나만 설정하는 것을 권장합니다.

    환경은 요청마다 읽습니다. 값 자체는 읽기 전용으로만 다룹니다.
    """

    def __init__(
        self,
        names: Sequence[str] = CredentialConfig.ENV_NAMES,
        environ: Optional[Mapping[str, str]] = None,
    ):
        if not names:
            raise ValueError("at least one credential env name is required")
        self.logger = logging.getLogger(__name__)
        self.names = tuple(names)
        self.environ = environ

    def resolve(self) -> Optional[str]:
        env = self.environ if self.environ is not None else os.environ
        for name in self.names:
            value = (env.get(name) or "").strip()
            if value:
                self.logger.debug(f"[CredentialResolver] ▶ 인증 키 사용 | env={name}")
                return value
        return None

    def describe(self) -> str:
        """에러 메시지용 이름 표기. 예: GEMINI_API_KEY (or API_KEY)"""
        primary, *alternates = self.names
        if not alternates:
            return primary
        return f"{primary} (or {', '.join(alternates)})"
