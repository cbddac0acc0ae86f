"""Process-wide configuration store.

The default :class:`~envstore.store.EnvStore` is created on first use and
seeded from ``os.environ``, so dotenv files loaded afterwards take precedence
over exported shell variables::

    from envstore import env

    env.load(".env")
    debug = env.get_bool("DEBUG")
    env.map_record(settings)

Writes are guarded by the store's lock; nothing here is asynchronous.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from envstore import loader, mapper
from envstore.mapper import FieldBinding
from envstore.store import EnvStore

_default: Optional[EnvStore] = None
_default_lock = threading.Lock()


def default_store() -> EnvStore:
    global _default
    with _default_lock:
        if _default is None:
            store = EnvStore()
            loader.seed_environ(store)
            _default = store
        return _default


def reset_default_store() -> None:
    """Drop the process-wide store; the next call re-seeds it from ``os.environ``."""
    global _default
    with _default_lock:
        _default = None


def set(key: str, value: Any) -> None:
    default_store().set(key, value)


def get(key: str) -> Optional[str]:
    return default_store().get(key)


def load(path: str | Path) -> Dict[str, str]:
    return loader.load(path, default_store())


def map_record(target: Any, bindings: Optional[Sequence[FieldBinding]] = None) -> None:
    mapper.map_record(target, default_store(), bindings)


def get_string(key: str, default: str = "") -> str:
    return default_store().get_string(key, default)


def get_strings(key: str, default: Optional[List[str]] = None) -> List[str]:
    return default_store().get_strings(key, default)


def get_int(key: str, default: int = 0) -> int:
    return default_store().get_int(key, default)


def get_int64(key: str, default: int = 0) -> int:
    return default_store().get_int64(key, default)


def get_uint(key: str, default: int = 0) -> int:
    return default_store().get_uint(key, default)


def get_uint64(key: str, default: int = 0) -> int:
    return default_store().get_uint64(key, default)


def get_bool(key: str, default: bool = False) -> bool:
    return default_store().get_bool(key, default)


def get_float(key: str, default: float = 0.0) -> float:
    return default_store().get_float(key, default)
