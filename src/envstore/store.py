from __future__ import annotations

import threading
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from envstore.convert import Kind, coerce, render, zero_value
from envstore.utils.logger import get_logger

logger = get_logger(__name__)

ROOT_KEY = "root"


class EnvStore:
    """In-memory ``str -> str`` configuration store with typed accessors.

    Values are rendered to text on ``set`` and parsed back on read. A key that
    is absent returns the caller's default, while a value that is present but
    does not parse returns the zero value of the requested type.
    """

    def __init__(self, initial: Optional[Mapping[str, Any]] = None) -> None:
        self._lock = threading.RLock()
        self._values: Dict[str, str] = {}
        for key, value in (initial or {}).items():
            self.set(key, value)

    def set(self, key: str, value: Any) -> None:
        text = render(value)
        with self._lock:
            self._values[key] = text

    def update(self, pairs: Iterable[Tuple[str, Any]]) -> None:
        with self._lock:
            for key, value in pairs:
                self.set(key, value)

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._values.get(key)

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._values)

    def as_dict(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._values)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._values

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    @property
    def root(self) -> Optional[str]:
        return self.get(ROOT_KEY)

    @root.setter
    def root(self, path: Any) -> None:
        self.set(ROOT_KEY, str(path))

    def lookup(self, key: str, kind: Kind, default: Any) -> Any:
        raw = self.get(key)
        if raw is None:
            return default
        try:
            return coerce(raw, kind)
        except ValueError:
            logger.debug("conversion_failed", key=key, kind=kind.value)
            return zero_value(kind)

    def get_string(self, key: str, default: str = "") -> str:
        return self.lookup(key, Kind.STRING, default)

    def get_strings(self, key: str, default: Optional[List[str]] = None) -> List[str]:
        if default is None:
            default = []
        return self.lookup(key, Kind.STRINGS, default)

    def get_int(self, key: str, default: int = 0) -> int:
        return self.lookup(key, Kind.INT, default)

    def get_int64(self, key: str, default: int = 0) -> int:
        return self.lookup(key, Kind.INT, default)

    def get_uint(self, key: str, default: int = 0) -> int:
        return self.lookup(key, Kind.UINT, default)

    def get_uint64(self, key: str, default: int = 0) -> int:
        return self.lookup(key, Kind.UINT, default)

    def get_bool(self, key: str, default: bool = False) -> bool:
        return self.lookup(key, Kind.BOOL, default)

    def get_float(self, key: str, default: float = 0.0) -> float:
        return self.lookup(key, Kind.FLOAT, default)
