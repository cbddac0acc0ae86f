from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Mapping, Optional

from envstore.parser import parse_line
from envstore.store import EnvStore
from envstore.utils.logger import get_logger

logger = get_logger(__name__)


class EnvFileError(OSError):
    """Raised when a dotenv file cannot be opened or read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot load env file {path}: {reason}")
        self.path = path
        self.reason = reason


def resolve_path(path: str | Path, store: EnvStore) -> Path:
    env_path = Path(path)
    if env_path.is_absolute() or not store.root:
        return env_path
    return Path(store.root) / env_path


def read_env_file(path: Path) -> Dict[str, str]:
    """Parse a dotenv file without touching any store; later duplicates win."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        logger.warning("env_file_missing", path=str(path))
        raise EnvFileError(path, "file not found") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise EnvFileError(path, str(exc)) from exc

    pairs: Dict[str, str] = {}
    for lineno, line in enumerate(text.split("\n"), start=1):
        declaration = parse_line(line)
        if declaration is None:
            if line.strip():
                logger.debug("line_skipped", path=str(path), lineno=lineno)
            continue
        key, value = declaration
        pairs[key] = value
    return pairs


def load(path: str | Path, store: EnvStore) -> Dict[str, str]:
    """Install every declaration of ``path`` into ``store`` and return what was installed.

    Relative paths resolve against ``store.root`` when one is set. A missing or
    unreadable file raises :class:`EnvFileError` and leaves ``store`` unchanged.
    """
    env_path = resolve_path(path, store)
    pairs = read_env_file(env_path)
    for key, value in pairs.items():
        store.set(key, value)
    logger.info("env_file_loaded", path=str(env_path), keys=len(pairs))
    return pairs


def seed_environ(store: EnvStore, environ: Optional[Mapping[str, str]] = None) -> None:
    source = os.environ if environ is None else environ
    store.update(source.items())
    logger.debug("environ_seeded", keys=len(source))
