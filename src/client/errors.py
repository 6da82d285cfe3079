"""클라이언트에서 관찰되는 에러 분류.

모든 에러는 message를 가지며, 컨트롤러는 이 message를 그대로 알림으로 보여준다.
"""


class GalleryClientError(Exception):
    message: str = "Something went wrong."

    def __init__(self, message: str | None = None):
        if message:
            self.message = message
        super().__init__(self.message)


class ClientValidationError(GalleryClientError):
    """네트워크 호출 전에 거절된 파일."""

    message = "Please pick an image to upload."


class UploadInProgress(GalleryClientError):
    message = "An upload is already in progress."


class ServerRejected(GalleryClientError):
    """서버가 2xx가 아닌 상태코드로 응답했다."""

    def __init__(self, status_code: int, message: str | None = None):
        self.status_code = status_code
        super().__init__(message or f"Server returned status {status_code}")


class TransportFailure(GalleryClientError):
    """응답 없이 실패한 요청 (연결 실패, 끊김 등)."""

    message = "Network error. Please check your connection."


class MalformedResponse(GalleryClientError):
    message = "Invalid server response."
