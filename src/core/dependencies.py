from fastapi import Request

from core.config import Settings
from service.image_store import ImageStore


def get_store(request: Request) -> ImageStore:
    """lifespan에서 app.state에 만들어 둔 저장소를 주입한다.

    앱마다 저장소가 하나이므로 테스트마다 새 앱을 만들면 빈 저장소로 시작한다.
    """
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
