import mimetypes
from dataclasses import dataclass
from pathlib import Path

from client.errors import ClientValidationError
from core.constants import ALLOWED_MIME_TYPES, MAX_FILE_SIZE_BYTES


@dataclass(frozen=True)
class LocalFile:
    """사용자가 고른 파일 한 개."""

    name: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    @classmethod
    def from_path(cls, path: str | Path) -> "LocalFile":
        path = Path(path)
        content_type, _ = mimetypes.guess_type(path.name)
        return cls(
            name=path.name,
            content_type=content_type or "application/octet-stream",
            data=path.read_bytes(),
        )


def validate_file(file: LocalFile | None) -> LocalFile:
    """업로드 전에 파일을 검사한다. 실패하면 ClientValidationError."""
    if file is None:
        raise ClientValidationError("Please pick an image to upload.")
    if file.content_type not in ALLOWED_MIME_TYPES:
        raise ClientValidationError("Only JPEG and PNG files are supported.")
    if file.size > MAX_FILE_SIZE_BYTES:
        raise ClientValidationError("Image must be 3 MB or smaller.")
    return file
