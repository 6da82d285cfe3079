"""갤러리 서버 HTTP API 호출.

httpx.Client를 주입받는다. 테스트에서는 fastapi TestClient(httpx.Client 하위 클래스)나
MockTransport를 끼운 Client를 그대로 넘길 수 있다.
"""

from collections.abc import Callable, Iterator

import httpx
from loguru import logger

from client.config import ClientSettings, api_url
from client.errors import MalformedResponse, ServerRejected, TransportFailure
from client.files import LocalFile
from model.image import DeleteResponse, ImageRecord

ProgressCallback = Callable[[int], None]


def _error_message(response: httpx.Response, fallback: str | None = None) -> str:
    """에러 응답 본문의 message를 꺼낸다. 없으면 fallback 또는 상태코드 문구."""
    try:
        message = response.json().get("message")
    except (ValueError, AttributeError):
        message = None
    if message:
        return message
    return fallback or f"Server returned status {response.status_code}: {response.reason_phrase}"


class GalleryApi:
    def __init__(
        self,
        http: httpx.Client,
        base_url: str = "",
        upload_field: str = "image",
        chunk_size: int = 64 * 1024,
    ):
        self.http = http
        self.base_url = base_url
        self.upload_field = upload_field
        self.chunk_size = chunk_size

    @classmethod
    def from_settings(cls, settings: ClientSettings, origin: str = "") -> "GalleryApi":
        """설정으로부터 만든다. 프로덕션 모드에서는 origin이 페이지의 origin이다.

        타임아웃은 두지 않는다. 네트워크 실패는 transport 에러로만 판단한다.
        """
        http = httpx.Client(base_url=origin, timeout=None)
        return cls(http, settings.api_base_url, chunk_size=settings.UPLOAD_CHUNK_SIZE)

    def close(self) -> None:
        self.http.close()

    def _send(self, method: str, endpoint: str, network_message: str | None = None, **kwargs) -> httpx.Response:
        url = api_url(self.base_url, endpoint)
        try:
            return self.http.request(method, url, **kwargs)
        except httpx.TransportError as exc:
            logger.error(f"{method} {url} failed: {exc!r}")
            raise TransportFailure(network_message) from exc

    def fetch_images(self) -> list[ImageRecord]:
        response = self._send("GET", "/images")
        if not response.is_success:
            raise ServerRejected(response.status_code, "Unable to load images.")
        try:
            return [ImageRecord.model_validate(item) for item in response.json()]
        except (ValueError, TypeError) as exc:
            raise MalformedResponse from exc

    def delete_image(self, image_id: str) -> str:
        response = self._send("DELETE", f"/images/{image_id}")
        if not response.is_success:
            raise ServerRejected(response.status_code, _error_message(response, "Unable to delete image."))
        try:
            return DeleteResponse.model_validate(response.json()).id
        except ValueError as exc:
            raise MalformedResponse from exc

    def upload_image(self, file: LocalFile, on_progress: ProgressCallback | None = None) -> ImageRecord:
        """파일 한 개를 업로드하고 저장된 레코드를 반환한다.

        multipart 본문을 미리 인코딩한 뒤 chunk_size 단위로 흘려보내며
        on_progress(0~100)를 호출한다. 결과는 레코드 하나 또는 예외 하나:
          - ServerRejected: 2xx 이외 (서버 message 우선)
          - MalformedResponse: 2xx이지만 레코드로 파싱 불가
          - TransportFailure: 응답 없음
        """
        url = api_url(self.base_url, "/upload")
        logger.debug(f"Uploading {file.name} to {url}")

        encoded = self.http.build_request(
            "POST", url, files={self.upload_field: (file.name, file.data, file.content_type)}
        )
        body = encoded.read()
        headers = {
            "Content-Type": encoded.headers["Content-Type"],
            "Content-Length": str(len(body)),
        }

        response = self._send(
            "POST",
            "/upload",
            network_message="Network error during upload. Please check your connection.",
            content=self._iter_chunks(body, on_progress),
            headers=headers,
        )
        logger.debug(f"Upload response status: {response.status_code}")

        if not response.is_success:
            message = _error_message(response)
            logger.warning(f"Upload failed: {message}")
            raise ServerRejected(response.status_code, message)

        try:
            record = ImageRecord.model_validate(response.json())
        except ValueError as exc:
            logger.error(f"Could not parse upload response: {exc}")
            raise MalformedResponse from exc

        logger.info(f"Upload successful: {record.filename}")
        return record

    def _iter_chunks(self, body: bytes, on_progress: ProgressCallback | None) -> Iterator[bytes]:
        total = len(body)
        sent = 0
        for start in range(0, total, self.chunk_size):
            chunk = body[start:start + self.chunk_size]
            yield chunk
            sent += len(chunk)
            if on_progress and total:
                on_progress(round(sent / total * 100))
