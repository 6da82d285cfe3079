"""자동으로 사라지는 알림 (success / error).

새 알림을 띄우면 이전 알림의 타이머를 먼저 취소하고 새 타이머를 건다.
타이머는 threading.Timer 시그니처(interval, function, args=...)를 따르는
팩토리로 주입받는다.
"""

import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

Kind = Literal["success", "error"]


@dataclass(frozen=True)
class Notification:
    kind: Kind
    text: str
    transient: bool = True


class TransientNotifier:
    def __init__(self, delay: float = 3.0, timer_factory: Callable = threading.Timer):
        self.delay = delay
        self._timer_factory = timer_factory
        self._timer = None
        # 취소가 늦게 도착한 타이머가 새 알림을 지우지 않도록 세대 번호로 구분
        self._generation = 0
        self._lock = threading.Lock()
        self.current: Notification | None = None

    @property
    def success(self) -> str:
        return self.current.text if self.current and self.current.kind == "success" else ""

    @property
    def error(self) -> str:
        return self.current.text if self.current and self.current.kind == "error" else ""

    def show(self, kind: Kind, text: str, delay: float | None = None) -> Notification:
        """delay초 뒤에 자동으로 사라지는 알림을 띄운다."""
        with self._lock:
            self._cancel_pending()
            self.current = Notification(kind, text)
            timer = self._timer_factory(
                self.delay if delay is None else delay, self._expire, args=(self._generation,)
            )
            timer.daemon = True
            self._timer = timer
            timer.start()
            return self.current

    def show_persistent(self, kind: Kind, text: str) -> Notification:
        """다음 알림이나 clear()가 올 때까지 남아 있는 알림."""
        with self._lock:
            self._cancel_pending()
            self.current = Notification(kind, text, transient=False)
            return self.current

    def clear(self) -> None:
        with self._lock:
            self._cancel_pending()
            self.current = None

    def close(self) -> None:
        """화면이 내려갈 때 대기 중인 타이머를 정리한다."""
        self.clear()

    def _cancel_pending(self) -> None:
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _expire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self.current = None
            self._timer = None
