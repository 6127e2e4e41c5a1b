# ansyla/notifications.py
from __future__ import annotations
import asyncio
import itertools
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol

logger = logging.getLogger(__name__)

DEFAULT_ALERT_DURATION: float = 3.0


@dataclass(frozen=True)
class AlertHandle:
    """Opaque ticket returned by `AlertCenter.schedule`."""
    id: int


@dataclass
class Alert:
    handle: AlertHandle
    message: str
    duration: float
    _timer: asyncio.TimerHandle | None = field(default=None, repr=False)


AlertListener = Callable[[list[Alert]], None]


class AlertSink(Protocol):
    """Anything that can show a transient message; AlertCenter in production."""
    def schedule(self, message: str, duration: float | None = None) -> Any: ...


class AlertCenter:
    """
    Owns transient, auto-dismissing error messages. Nothing in the wizard
    depends on an alert's lifecycle; the UI subscribes and renders
    whatever is active.
    """

    def __init__(self, default_duration: float = DEFAULT_ALERT_DURATION):
        self.default_duration = default_duration
        self._alerts: dict[AlertHandle, Alert] = {}
        self._listeners: list[AlertListener] = []
        self._ids = itertools.count(1)

    @property
    def active(self) -> list[Alert]:
        return list(self._alerts.values())

    def subscribe(self, listener: AlertListener) -> None:
        self._listeners.append(listener)

    def schedule(self, message: str, duration: float | None = None) -> AlertHandle:
        """Shows `message` until `dismiss` is called or `duration` seconds pass.

        Must be called from inside the running event loop.
        """
        duration = self.default_duration if duration is None else duration
        handle = AlertHandle(next(self._ids))
        alert = Alert(handle=handle, message=message, duration=duration)
        if duration > 0:
            alert._timer = asyncio.get_running_loop().call_later(duration, self._expire, handle)
        self._alerts[handle] = alert
        logger.info(f"Alert #{handle.id} shown: {message}")
        self._notify()
        return handle

    def dismiss(self, handle: AlertHandle) -> bool:
        """Removes an alert early. Unknown or expired handles are ignored."""
        alert = self._alerts.pop(handle, None)
        if alert is None:
            return False
        if alert._timer is not None:
            alert._timer.cancel()
        self._notify()
        return True

    def _expire(self, handle: AlertHandle) -> None:
        if self._alerts.pop(handle, None) is not None:
            self._notify()

    def _notify(self) -> None:
        snapshot = self.active
        for listener in self._listeners:
            listener(snapshot)
