# ansyla/preferences.py
from __future__ import annotations
import logging
from collections.abc import Callable, MutableMapping
from typing import Any

from .utils import THEME_STORAGE_KEY

logger = logging.getLogger(__name__)

ThemeListener = Callable[[bool], None]


class ThemePreference:
    """
    The dark-mode flag, persisted per browser. At runtime `storage` is
    NiceGUI's `app.storage.user`; any mutable mapping works.
    """

    def __init__(self, storage: MutableMapping[str, Any], default: bool = True):
        self._storage = storage
        self._listeners: list[ThemeListener] = []
        stored = storage.get(THEME_STORAGE_KEY)
        self._dark: bool = stored if isinstance(stored, bool) else default
        # Write-through, so a fresh browser gets the default stored too.
        self._storage[THEME_STORAGE_KEY] = self._dark

    @property
    def dark(self) -> bool:
        return self._dark

    def subscribe(self, listener: ThemeListener) -> None:
        self._listeners.append(listener)

    def toggle(self) -> bool:
        self._dark = not self._dark
        self._storage[THEME_STORAGE_KEY] = self._dark
        logger.info(f"Theme switched to {'dark' if self._dark else 'light'} mode.")
        for listener in self._listeners:
            listener(self._dark)
        return self._dark
