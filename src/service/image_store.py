"""프로세스 로컬 in-memory 이미지 저장소."""

import threading

from core.exceptions import ImageNotFound
from model.image import ImageRecord


class ImageStore:
    """업로드 순서를 유지하는 이미지 목록 (최신이 맨 앞).

    FastAPI의 sync 엔드포인트는 스레드풀에서 실행되므로
    list / insert_front / remove_by_id 모두 하나의 Lock으로 보호한다.
    용량 제한은 없다.
    """

    def __init__(self):
        self._records: list[ImageRecord] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def list(self) -> list[ImageRecord]:
        """현재 목록의 복사본을 반환한다. 호출자가 바꿔도 저장소에는 영향이 없다."""
        with self._lock:
            return list(self._records)

    def insert_front(self, record: ImageRecord) -> ImageRecord:
        with self._lock:
            self._records.insert(0, record)
        return record

    def remove_by_id(self, image_id: str) -> str:
        """id가 일치하는 레코드를 제거하고 그 id를 반환한다.

        - 없으면 ImageNotFound를 발생시킨다.
        """
        with self._lock:
            for index, record in enumerate(self._records):
                if record.id == image_id:
                    del self._records[index]
                    return record.id
        raise ImageNotFound
