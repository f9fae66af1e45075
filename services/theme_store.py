import logging
import threading
import time
from typing import Optional
from datetime import datetime, timezone
from sqlmodel import Session # pyright: ignore[reportMissingImports]
from config.settings import THEME_STORAGE_KEY, DEFAULT_DARK_MODE
from models.preferences import Preference

logger = logging.getLogger(__name__)

DARK_TOKENS = {"root_class": "dark", "background": "#000000", "text": "#ffffff"}
LIGHT_TOKENS = {"root_class": None, "background": "#ffffff", "text": "#000000"}


class SQLPreferenceStorage:
    """Durable key-value store backed by the ``preferences`` table."""

    def __init__(self, engine):
        self.engine = engine

    def get(self, key: str) -> Optional[str]:
        with Session(self.engine) as s:
            pref = s.get(Preference, key)
            return pref.value if pref else None

    def set(self, key: str, value: str):
        with Session(self.engine) as s:
            pref = s.get(Preference, key)
            if pref:
                pref.value = value
                pref.updated_at = datetime.now(timezone.utc)
            else:
                pref = Preference(key=key, value=value)
            s.add(pref)
            s.commit()


class ThemeStore:
    """
    Light/dark preference for the whole site.

    Created once at startup with ``load()`` and released with ``close()``.
    Only ``toggle()`` mutates it; every change is mirrored to storage.
    """

    def __init__(self, storage, key: str = THEME_STORAGE_KEY):
        self.storage = storage
        self.key = key
        self.is_dark_mode = DEFAULT_DARK_MODE
        self.changed_at = 0
        self._closed = True
        self._lock = threading.Lock()

    def load(self) -> "ThemeStore":
        saved = self.storage.get(self.key)
        if saved:
            self.is_dark_mode = saved == "dark"
        else:
            self.is_dark_mode = DEFAULT_DARK_MODE
        self._closed = False
        self._apply()
        logger.info(f"Theme loaded: {self.mode}")
        return self

    def close(self):
        self._closed = True

    @property
    def mode(self) -> str:
        return "dark" if self.is_dark_mode else "light"

    def get(self) -> bool:
        return self.is_dark_mode

    def toggle(self) -> bool:
        if self._closed:
            raise RuntimeError("ThemeStore is not loaded")
        with self._lock:
            self.is_dark_mode = not self.is_dark_mode
            self._apply()
            self.storage.set(self.key, self.mode)
        return self.is_dark_mode

    def _apply(self):
        # Stamp every change so clients re-render their sections
        self.changed_at = max(time.time_ns(), self.changed_at + 1)

    def tokens(self) -> dict:
        tokens = dict(DARK_TOKENS if self.is_dark_mode else LIGHT_TOKENS)
        tokens["changed_at"] = self.changed_at
        return tokens

    def state(self) -> dict:
        return {"is_dark_mode": self.is_dark_mode, "theme": self.mode, "tokens": self.tokens()}
