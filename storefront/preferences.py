"""
Dark-mode preference with durable storage.

The flag lives in a key/value storage port (``get_item``/``set_item``, the
shape of browser localStorage) as the strings ``"true"``/``"false"``. When
no storage is configured every storage call is skipped and the flag only
lives for the current process, defaulting to ``False``.
"""
from typing import Callable, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine

from .db import get_engine
from .logger import get_logger
from .observable import Subscriber, Unsubscribe, Writable

logger = get_logger(__name__)

DARK_MODE_KEY = "darkMode"


class SqlPreferenceStorage:
    """
    Key/value preferences in a single table:
      - preferences(key TEXT PRIMARY KEY, value TEXT)
    """
    def __init__(self, engine: Engine):
        self.engine = engine
        self.ensure_table()

    def ensure_table(self) -> None:
        with self.engine.begin() as conn:
            conn.execute(text("""
            CREATE TABLE IF NOT EXISTS preferences (
              key TEXT PRIMARY KEY,
              value TEXT
            )
            """))

    def get_item(self, key: str) -> Optional[str]:
        with self.engine.begin() as conn:
            return conn.execute(
                text("SELECT value FROM preferences WHERE key = :key"),
                {"key": key},
            ).scalar_one_or_none()

    def set_item(self, key: str, value: str) -> None:
        sql = """
        INSERT INTO preferences (key, value)
        VALUES (:key, :value)
        ON CONFLICT (key) DO UPDATE SET value = EXCLUDED.value
        """
        with self.engine.begin() as conn:
            conn.execute(text(sql), {"key": key, "value": value})


def preference_storage_from_env() -> Optional[SqlPreferenceStorage]:
    engine = get_engine()
    if engine is None:
        logger.info("DATABASE_URL not set; preferences will not persist")
        return None
    return SqlPreferenceStorage(engine)


class DarkModeStore:
    def __init__(self, storage=None, apply: Optional[Callable[[bool], None]] = None):
        self.storage = storage
        self._apply = apply or (lambda is_dark: None)
        self._state: Writable[bool] = Writable(self._read())

    def _read(self) -> bool:
        if self.storage is None:
            return False
        return self.storage.get_item(DARK_MODE_KEY) == "true"

    def _persist(self, value: bool) -> None:
        if self.storage is not None:
            self.storage.set_item(DARK_MODE_KEY, "true" if value else "false")

    def subscribe(self, fn: Subscriber) -> Unsubscribe:
        return self._state.subscribe(fn)

    def get(self) -> bool:
        return self._state.get()

    def init(self) -> None:
        stored = self._read()
        self._apply(stored)
        self._state.set(stored)

    def toggle(self) -> None:
        self.set(not self._state.get())

    def set(self, value: bool) -> None:
        self._persist(value)
        self._apply(value)
        self._state.set(value)
