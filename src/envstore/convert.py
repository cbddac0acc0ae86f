from __future__ import annotations

import math
import re
from enum import Enum
from typing import Any, Callable, Dict, List, NewType

Int64 = NewType("Int64", int)
Uint = NewType("Uint", int)
Uint64 = NewType("Uint64", int)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"[0-9]+")

TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

LIST_SEPARATOR = ","


class Kind(Enum):
    STRING = "string"
    INT = "int"
    UINT = "uint"
    BOOL = "bool"
    FLOAT = "float"
    STRINGS = "strings"


def parse_int(raw: str) -> int:
    if not _SIGNED_RE.fullmatch(raw):
        raise ValueError(f"invalid integer literal: {raw!r}")
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"integer out of range: {raw!r}")
    return value


def parse_uint(raw: str) -> int:
    if not _UNSIGNED_RE.fullmatch(raw):
        raise ValueError(f"invalid unsigned literal: {raw!r}")
    value = int(raw)
    if value > UINT64_MAX:
        raise ValueError(f"unsigned integer out of range: {raw!r}")
    return value


def parse_bool(raw: str) -> bool:
    if raw in TRUE_LITERALS:
        return True
    if raw in FALSE_LITERALS:
        return False
    raise ValueError(f"invalid boolean literal: {raw!r}")


def parse_float(raw: str) -> float:
    # float() tolerates padding and digit separators, a strict literal does not
    if not raw or not raw.isascii() or raw != raw.strip() or "_" in raw:
        raise ValueError(f"invalid float literal: {raw!r}")
    value = float(raw)
    if math.isinf(value) and "inf" not in raw.lower():
        raise ValueError(f"float out of range: {raw!r}")
    return value


def split_list(raw: str) -> List[str]:
    return raw.split(LIST_SEPARATOR)


_PARSERS: Dict[Kind, Callable[[str], Any]] = {
    Kind.STRING: str,
    Kind.INT: parse_int,
    Kind.UINT: parse_uint,
    Kind.BOOL: parse_bool,
    Kind.FLOAT: parse_float,
    Kind.STRINGS: split_list,
}


def coerce(raw: str, kind: Kind) -> Any:
    """Convert a stored string to ``kind``; raises ``ValueError`` when it does not parse."""
    return _PARSERS[kind](raw)


def zero_value(kind: Kind) -> Any:
    if kind is Kind.STRING:
        return ""
    if kind in (Kind.INT, Kind.UINT):
        return 0
    if kind is Kind.BOOL:
        return False
    if kind is Kind.FLOAT:
        return 0.0
    return []


def render(value: Any) -> str:
    """Render a value in the text form the parsers above read back."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, (list, tuple)):
        return LIST_SEPARATOR.join(render(item) for item in value)
    return str(value)
