from dataclasses import dataclass, field
from datetime import datetime

from model.image import ImageRecord

_UNITS = ("B", "KB", "MB")


def format_bytes(num_bytes: int | None) -> str:
    """사람이 읽기 쉬운 크기 문자열. MB보다 큰 단위는 쓰지 않는다."""
    if not num_bytes:
        return "0 B"
    value, index = float(num_bytes), 0
    while value >= 1024 and index < len(_UNITS) - 1:
        value /= 1024
        index += 1
    return f"{value:.1f} {_UNITS[index]}"


@dataclass
class GalleryView:
    """서버 목록의 로컬 사본 + 화면 전용 상태 (서버에 대응하는 값 없음)."""

    images: list[ImageRecord] = field(default_factory=list)
    is_uploading: bool = False
    upload_progress: int = 0
    is_loading: bool = False

    @property
    def count(self) -> int:
        return len(self.images)

    @property
    def total_bytes(self) -> int:
        return sum(image.size for image in self.images)

    @property
    def last_uploaded_at(self) -> datetime | None:
        return self.images[0].uploaded_at if self.images else None

    def prepend(self, record: ImageRecord) -> None:
        self.images = [record, *self.images]

    def remove(self, image_id: str) -> None:
        self.images = [image for image in self.images if image.id != image_id]

    def replace(self, records: list[ImageRecord]) -> None:
        self.images = list(records)
