# bookit/store.py

import json
import logging
from typing import Any, Dict, Optional

from sqlmodel import Session

from bookit.db import engine as default_engine, init_db
from bookit.models import StoreEntry

logger = logging.getLogger(__name__)


class KeyValueStore:
    """JSON get/set on top of a raw text store.

    Each ``set`` replaces the whole value.  A value that cannot be decoded
    reads as ``None``, the same as an absent key.
    """

    def get_raw(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_raw(self, key: str, text: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError

    def get(self, key: str) -> Any:
        text = self.get_raw(key)
        if not text:
            return None
        try:
            return json.loads(text)
        except ValueError:
            logger.warning("Discarding undecodable value stored under %r", key)
            return None

    def set(self, key: str, value: Any) -> None:
        self.set_raw(key, json.dumps(value))


class MemoryStore(KeyValueStore):
    """Process-local store, used in tests and throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get_raw(self, key):
        return self._data.get(key)

    def set_raw(self, key, text):
        self._data[key] = text

    def remove(self, key):
        self._data.pop(key, None)


class SQLStore(KeyValueStore):
    """Durable store: one ``store_entry`` row per key."""

    def __init__(self, engine=None):
        self.engine = engine if engine is not None else default_engine
        init_db(self.engine)

    def get_raw(self, key):
        with Session(self.engine) as session:
            entry = session.get(StoreEntry, key)
            return entry.value if entry is not None else None

    def set_raw(self, key, text):
        with Session(self.engine) as session:
            entry = session.get(StoreEntry, key)
            if entry is None:
                entry = StoreEntry(key=key, value=text)
                session.add(entry)
            else:
                entry.value = text
            session.commit()

    def remove(self, key):
        with Session(self.engine) as session:
            entry = session.get(StoreEntry, key)
            if entry is not None:
                session.delete(entry)
                session.commit()
