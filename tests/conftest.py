"""pytest 공용 fixture.

모든 API 테스트는 테스트마다 새로 만든 앱(=빈 in-memory 저장소)을 사용하여 격리된다.
- client: TestClient (httpx.Client 하위 클래스라 GalleryApi에도 그대로 넘길 수 있다)
- store: 해당 앱이 소유한 ImageStore
- make_image: 지정 크기의 PNG/JPEG 바이트를 만드는 팩토리
- fake_timers: threading.Timer 대신 쓰는 수동 타이머 목록
"""

import io
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from PIL import Image

# src/ 디렉토리를 import path에 추가
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from core.config import Settings
from main import create_app


@pytest.fixture()
def settings():
    return Settings(PRODUCTION=False)


@pytest.fixture()
def client(settings):
    """lifespan을 실행한 TestClient. 테스트마다 저장소가 비어 있다."""
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture()
def store(client):
    return client.app.state.store


@pytest.fixture()
def make_image():
    """Pillow로 만든 이미지 바이트. size를 주면 0으로 채워 정확히 그 크기로 맞춘다."""

    def _make(fmt: str = "PNG", size: int | None = None, color: str = "blue") -> bytes:
        buf = io.BytesIO()
        Image.new("RGB", (8, 8), color=color).save(buf, format=fmt)
        data = buf.getvalue()
        if size is not None:
            assert size >= len(data), "requested size is smaller than the encoded image"
            data += b"\x00" * (size - len(data))
        return data

    return _make


class FakeTimer:
    """threading.Timer와 같은 모양. fire()를 불러야 실행된다."""

    def __init__(self, interval, function, args=None, kwargs=None):
        self.interval = interval
        self.function = function
        self.args = args or ()
        self.kwargs = kwargs or {}
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.function(*self.args, **self.kwargs)


@pytest.fixture()
def fake_timers():
    """생성된 FakeTimer를 순서대로 모아 둔다. timer_factory로 list.append 래퍼를 넘긴다."""
    timers: list[FakeTimer] = []

    def _factory(interval, function, args=None, kwargs=None):
        timer = FakeTimer(interval, function, args, kwargs)
        timers.append(timer)
        return timer

    _factory.timers = timers
    return _factory
