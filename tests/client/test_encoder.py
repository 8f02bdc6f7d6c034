from pathlib import Path

import pytest

from app.client.encoder import SelectedFile, decode, encode, validate
from app.client.exception import EncodingError, ValidationError
from app.constants import VideoConfig


@pytest.mark.parametrize("mime_type", ["image/png", "application/pdf", "text/plain", "audio/mpeg", ""])
def test_validate_rejects_non_video_type(mime_type):
    file = SelectedFile(path=Path("clip.bin"), mime_type=mime_type, size=1024)

    with pytest.raises(ValidationError) as exc_info:
        validate(file)

    assert exc_info.value.message == "Please upload a valid video file."


def test_validate_rejects_oversized_file():
    file = SelectedFile(path=Path("clip.mp4"), mime_type="video/mp4", size=VideoConfig.MAX_FILE_SIZE_BYTES + 1)

    with pytest.raises(ValidationError) as exc_info:
        validate(file)

    assert "18MB" in exc_info.value.message


@pytest.mark.parametrize("mime_type", ["video/mp4", "video/quicktime", "video/webm"])
def test_validate_accepts_video_at_size_limit(mime_type):
    """최대 크기와 정확히 같은 파일은 허용되어야 한다."""
    file = SelectedFile(path=Path("clip"), mime_type=mime_type, size=VideoConfig.MAX_FILE_SIZE_BYTES)

    validate(file)


def test_from_path_guesses_video_mime_type(tmp_path):
    path = tmp_path / "clip.mp4"
    path.write_bytes(b"\x00" * 32)

    file = SelectedFile.from_path(path)

    assert file.mime_type == "video/mp4"
    assert file.size == 32
    assert file.name == "clip.mp4"


def test_from_path_unknown_extension_has_empty_type(tmp_path):
    path = tmp_path / "clip.unknownext"
    path.write_bytes(b"\x00")

    file = SelectedFile.from_path(path)

    assert file.mime_type == ""
    with pytest.raises(ValidationError):
        validate(file)


def test_from_path_missing_file_fails(tmp_path):
    with pytest.raises(EncodingError):
        SelectedFile.from_path(tmp_path / "missing.mp4")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "raw",
    [b"", bytes(range(10)), bytes(range(256)) * 40, b"\xff\xd8\x00\x01" * 1001],
)
async def test_encode_round_trips_bytes(tmp_path, raw):
    # Given
    path = tmp_path / "clip.mp4"
    path.write_bytes(raw)
    file = SelectedFile.from_path(path)

    # When
    payload = await encode(file)

    # Then
    assert payload.mime_type == "video/mp4"
    assert decode(payload) == raw


@pytest.mark.asyncio
async def test_encode_read_failure_raises_encoding_error(tmp_path):
    file = SelectedFile(path=tmp_path / "gone.mp4", mime_type="video/mp4", size=10)

    with pytest.raises(EncodingError) as exc_info:
        await encode(file)

    assert exc_info.value.message == "Failed to read the video file."
