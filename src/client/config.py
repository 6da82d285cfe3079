from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """클라이언트 설정 (환경변수 prefix: GALLERY_)."""

    MODE: Literal["development", "production"] = "development"
    DEV_API_ORIGIN: str = "http://localhost:4000"

    # 성공/실패 알림이 자동으로 사라지기까지의 시간(초)
    NOTIFICATION_DELAY: float = 3.0

    # 업로드 진행률을 보고하는 전송 단위
    UPLOAD_CHUNK_SIZE: int = 64 * 1024

    model_config = SettingsConfigDict(env_prefix="GALLERY_", env_file=".env", extra="ignore")

    @property
    def api_base_url(self) -> str:
        # 개발: 절대 origin / 프로덕션: 같은 origin 기준 상대 경로
        return self.DEV_API_ORIGIN if self.MODE == "development" else ""


def api_url(base: str, endpoint: str) -> str:
    """base와 endpoint 사이의 슬래시가 중복되지 않도록 이어 붙인다."""
    base = base[:-1] if base.endswith("/") else base
    path = endpoint if endpoint.startswith("/") else f"/{endpoint}"
    return f"{base}{path}"
