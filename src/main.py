import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import Settings, settings
from core.error_handlers import (
    app_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from core.exceptions import AppException
from core.frontend import mount_client
from core.lifespan import lifespan
from core.middleware import RequestLoggingMiddleware
from router.image_router import router as image_router


def create_app(config: Settings = settings) -> FastAPI:
    app = FastAPI(
        title=config.APP_NAME,
        version=config.APP_VERSION,
        description="Mini image gallery: single JPEG/PNG upload (≤ 3 MB), in-memory storage",
        lifespan=lifespan,
    )
    app.state.settings = config

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(image_router)

    # catch-all이므로 반드시 마지막
    if config.PRODUCTION:
        mount_client(app, config.CLIENT_DIST_DIR)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        access_log=False,
    )
