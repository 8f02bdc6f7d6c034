import asyncio
import base64
import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from app.client.exception import ClientErrorCode, EncodingError, ValidationError
from app.constants import VideoConfig
from app.prompt.schema import VideoPayload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectedFile:
    """사용자가 선택한 로컬 영상 파일"""
    path: Path
    mime_type: str
    size: int

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def size_mb(self) -> float:
        return self.size / (1024 * 1024)

    @classmethod
    def from_path(cls, path: Union[str, Path], mime_type: Optional[str] = None) -> "SelectedFile":
        path = Path(path)
        try:
            size = path.stat().st_size
        except OSError as e:
            logger.error(f"[Encoder] ▶ 파일 정보를 읽을 수 없습니다 | path={path} | error={e}")
            raise EncodingError() from e

        if mime_type is None:
            mime_type, _ = mimetypes.guess_type(path.name)
        return cls(path=path, mime_type=mime_type or "", size=size)


def validate(file: SelectedFile) -> None:
    """영상 타입과 크기를 확인합니다. 네트워크 호출 전에 반드시 통과해야 합니다."""
    if not file.mime_type.startswith(VideoConfig.MIME_PREFIX):
        raise ValidationError(ClientErrorCode.CLIENT_INVALID_TYPE)

    if file.size > VideoConfig.MAX_FILE_SIZE_BYTES:
        raise ValidationError(ClientErrorCode.CLIENT_FILE_TOO_LARGE)


async def encode(file: SelectedFile) -> VideoPayload:
    try:
        raw = await asyncio.to_thread(file.path.read_bytes)
    except OSError as e:
        logger.error(f"[Encoder] ▶ 영상 파일 읽기 실패 | path={file.path} | error={e}")
        raise EncodingError() from e

    return VideoPayload(
        data=base64.b64encode(raw).decode("ascii"),
        mimeType=file.mime_type,
    )


def decode(payload: VideoPayload) -> bytes:
    return base64.b64decode(payload.data, validate=True)
