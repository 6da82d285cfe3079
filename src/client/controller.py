"""갤러리 클라이언트 컨트롤러.

업로드 상태 머신:
    IDLE -> VALIDATING -> UPLOADING -> (SUCCESS | FAILURE) -> IDLE
검증에서 거절되면 네트워크 호출 없이 VALIDATING -> IDLE.
"""

import threading
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from loguru import logger

from client.api import GalleryApi
from client.errors import ClientValidationError, GalleryClientError, UploadInProgress
from client.files import LocalFile, validate_file
from client.notifier import TransientNotifier
from client.view import GalleryView
from model.image import ImageRecord


class UploadState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    UPLOADING = "uploading"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class UploadOutcome:
    """업로드 한 번의 최종 결과. record와 error 중 하나만 채워진다."""

    record: ImageRecord | None = None
    error: GalleryClientError | None = None

    @property
    def ok(self) -> bool:
        return self.record is not None


class GalleryController:
    def __init__(self, api: GalleryApi, notifier: TransientNotifier, view: GalleryView | None = None):
        self.api = api
        self.notifier = notifier
        self.view = view or GalleryView()
        self.state = UploadState.IDLE
        self.selected_file: LocalFile | None = None
        self._state_listeners: list[Callable[[UploadState], None]] = []
        self._progress_listeners: list[Callable[[int], None]] = []
        self._upload_lock = threading.Lock()

    def on_state_change(self, listener: Callable[[UploadState], None]) -> None:
        self._state_listeners.append(listener)

    def on_progress(self, listener: Callable[[int], None]) -> None:
        self._progress_listeners.append(listener)

    def _transition(self, state: UploadState) -> None:
        self.state = state
        for listener in self._state_listeners:
            listener(state)

    def _report_progress(self, percent: int) -> None:
        # 진행률 콜백은 상태만 갱신한다
        self.view.upload_progress = max(0, min(100, percent))
        for listener in self._progress_listeners:
            listener(self.view.upload_progress)

    def select_file(self, file: LocalFile | None) -> UploadOutcome:
        """파일 선택 = 곧바로 업로드 시도."""
        self.selected_file = file
        return self.upload(file)

    def upload(self, file: LocalFile | None) -> UploadOutcome:
        if not self._upload_lock.acquire(blocking=False):
            return UploadOutcome(error=UploadInProgress())
        try:
            return self._upload(file)
        finally:
            self._upload_lock.release()

    def _upload(self, file: LocalFile | None) -> UploadOutcome:
        self._transition(UploadState.VALIDATING)
        try:
            validate_file(file)
        except ClientValidationError as exc:
            self.notifier.show_persistent("error", exc.message)
            self.selected_file = None
            self._transition(UploadState.IDLE)
            return UploadOutcome(error=exc)

        self.notifier.clear()
        self.view.is_uploading = True
        self.view.upload_progress = 0
        self._transition(UploadState.UPLOADING)
        try:
            record = self.api.upload_image(file, on_progress=self._report_progress)
        except GalleryClientError as exc:
            self._transition(UploadState.FAILURE)
            self.notifier.show("error", exc.message or "Upload failed.")
            outcome = UploadOutcome(error=exc)
        else:
            self.view.prepend(record)
            self._transition(UploadState.SUCCESS)
            self.notifier.show("success", f"Uploaded {record.filename}")
            outcome = UploadOutcome(record=record)
        finally:
            # 같은 파일을 다시 고를 수 있도록 선택 상태까지 초기화
            self.view.is_uploading = False
            self.view.upload_progress = 0
            self.selected_file = None

        self._transition(UploadState.IDLE)
        return outcome

    def delete(self, image_id: str) -> bool:
        """서버에서 삭제가 확인된 뒤에만 로컬 목록에서 뺀다."""
        self.notifier.clear()
        try:
            self.api.delete_image(image_id)
        except GalleryClientError as exc:
            logger.warning(f"Delete {image_id} failed: {exc.message}")
            self.notifier.show("error", exc.message)
            return False

        self.view.remove(image_id)
        self.notifier.show("success", "Image deleted.")
        return True

    def refresh(self) -> bool:
        """서버 목록으로 로컬 목록을 통째로 교체한다.

        실패하면 자동으로 사라지지 않는 에러를 띄우고 기존 목록은 그대로 둔다.
        """
        self.view.is_loading = True
        self.notifier.clear()
        try:
            records = self.api.fetch_images()
        except GalleryClientError as exc:
            logger.warning(f"Refresh failed: {exc.message}")
            self.notifier.show_persistent("error", exc.message)
            return False
        finally:
            self.view.is_loading = False

        self.view.replace(records)
        return True

    def close(self) -> None:
        self.notifier.close()
