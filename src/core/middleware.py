import time

from fastapi import Request, Response
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

SLOW_THRESHOLD_MS = 500


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """모든 HTTP 요청을 로깅하는 미들웨어.

    기록 항목: 메서드, 경로, 클라이언트 IP, 상태코드, 처리시간(ms)
    처리시간이 500ms를 초과하면 WARNING 레벨로 기록.
    업로드 요청은 Content-Length도 함께 남긴다.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - start) * 1000
        client_ip = request.client.host if request.client else "unknown"
        line = f"{request.method} {request.url.path} | {client_ip} | {response.status_code}"

        content_length = request.headers.get("content-length")
        if request.method == "POST" and content_length:
            line += f" | {content_length}B"

        if elapsed_ms > SLOW_THRESHOLD_MS:
            logger.warning(f"{line} | {elapsed_ms:.0f}ms (slow)")
        else:
            logger.info(f"{line} | {elapsed_ms:.0f}ms")

        return response
