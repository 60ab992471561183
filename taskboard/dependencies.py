import logging
import threading
from functools import lru_cache

import taskboard.config as _cfg
from taskboard.store.base import DocumentStore
from taskboard.store.json_file import JsonFileStore
from taskboard.store.memory import MemoryStore
from taskboard.store.sql import SqlDocumentStore
from taskboard.utils.mailer import Mailer, build_mailer

logger = logging.getLogger(__name__)

# one store per process, so every request shares its lock
_store = None
_store_lock = threading.Lock()


def build_store() -> DocumentStore:
    # config is read at call time so tests can patch taskboard.config
    backend = _cfg.STORE_BACKEND
    serialize = _cfg.SERIALIZE_WRITES
    if backend == "json":
        store = JsonFileStore(_cfg.DATA_FILE, serialize=serialize)
    elif backend == "sql":
        store = SqlDocumentStore(_cfg.DATABASE_URL, serialize=serialize)
    elif backend == "memory":
        store = MemoryStore(serialize=serialize)
    else:
        raise RuntimeError(f"Unknown TASKBOARD_STORE backend: {backend!r}")
    logger.info("Using %s store (serialized writes: %s)", backend, serialize)
    return store


def get_store() -> DocumentStore:
    global _store
    with _store_lock:
        if _store is None:
            _store = build_store()
        return _store


@lru_cache
def get_mailer() -> Mailer:
    return build_mailer()
