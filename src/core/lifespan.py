from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from service.image_store import ImageStore
from utility.logger import setup_logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    # === 시작 ===
    config = app.state.settings
    setup_logger(config.log_level)
    logger.info(f"{config.APP_NAME} v{config.APP_VERSION}")

    # 프로세스 로컬 저장소. 재시작하면 비어 있다.
    app.state.store = ImageStore()
    logger.info("In-memory image store ready")

    if config.PRODUCTION:
        logger.info(f"Serving client build from {config.CLIENT_DIST_DIR}")

    yield

    # === 종료 ===
    logger.info(f"Shutting down ({len(app.state.store)} images discarded)")
