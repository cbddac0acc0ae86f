from __future__ import annotations

from typing import Optional, Tuple

Declaration = Tuple[str, str]  # (key, value)

_EXPORT_PREFIX = "export"
_QUOTES = ('"', "'")


def parse_line(line: str) -> Optional[Declaration]:
    """Parse one dotenv line into ``(key, value)``, or ``None`` when it declares nothing.

    Blank lines, ``#`` comments and lines without ``=`` yield ``None``. A leading
    ``export`` is dropped, the line is split on the first ``=`` only, and one
    matching pair of outer quotes is removed from the value. Keys are taken
    verbatim, so ``"="`` parses to ``("", "")``.
    """
    line = line.strip()
    if not line or line.startswith("#"):
        return None
    line = _strip_export(line)
    if "=" not in line:
        return None
    key, value = line.split("=", 1)
    return key.strip(), _unquote(value.strip())


def _strip_export(line: str) -> str:
    head = line[: len(_EXPORT_PREFIX) + 1]
    if head[:-1] == _EXPORT_PREFIX and head[-1:].isspace():
        return line[len(_EXPORT_PREFIX) :].lstrip()
    return line


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1]
    return value
