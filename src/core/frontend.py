"""프로덕션 모드에서 빌드된 클라이언트를 서빙한다.

API 라우터를 모두 등록한 뒤에 호출해야 한다. catch-all 라우트가
가장 마지막에 매칭되어야 API 경로를 가리지 않는다.
"""

from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger

from core.constants import API_PATH_PREFIXES
from core.exceptions import RouteNotFound


def mount_client(app: FastAPI, dist_dir: str) -> None:
    dist = Path(dist_dir).resolve()
    index_html = dist / "index.html"

    assets = dist / "assets"
    if assets.is_dir():
        app.mount("/assets", StaticFiles(directory=assets), name="assets")
    if not index_html.is_file():
        logger.warning(f"Client build not found: {index_html}")

    @app.get("/{full_path:path}", include_in_schema=False)
    def client_fallback(full_path: str):
        # API 모양의 경로는 index.html 대신 JSON 404
        if f"/{full_path}".startswith(API_PATH_PREFIXES):
            raise RouteNotFound

        if full_path:
            candidate = (dist / full_path).resolve()
            if candidate.is_relative_to(dist) and candidate.is_file():
                return FileResponse(candidate)

        if not index_html.is_file():
            raise RouteNotFound
        return FileResponse(index_html)
