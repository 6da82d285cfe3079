from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # 앱 설정
    APP_NAME: str = "mini-image-gallery"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    # 서버 설정
    HOST: str = "0.0.0.0"
    PORT: int = 4000

    # 프로덕션 모드: 빌드된 클라이언트 정적 파일 + SPA fallback 서빙
    PRODUCTION: bool = False
    CLIENT_DIST_DIR: str = "client/dist"

    # CORS (모든 origin 허용)
    CORS_ORIGINS: list[str] = ["*"]

    # multipart 업로드에서 파일을 담는 필드 이름
    UPLOAD_FIELD: str = "image"

    @property
    def log_level(self) -> str:
        return "DEBUG" if self.DEBUG else "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
