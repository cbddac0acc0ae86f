from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional

from envstore.loader import EnvFileError, load, seed_environ
from envstore.store import EnvStore
from envstore.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_LOAD_FAILED = 1
EXIT_MISSING_KEY = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve configuration from dotenv files and the environment.")
    parser.add_argument(
        "--file",
        dest="files",
        action="append",
        default=[],
        help="Dotenv file to load; repeat to layer files, later ones win.",
    )
    parser.add_argument("--root", default=None, help="Base directory for relative --file paths.")
    parser.add_argument(
        "--no-environ",
        action="store_true",
        help="Do not seed the store from the process environment.",
    )
    parser.add_argument("--json", action="store_true", help="Print a JSON object instead of KEY=value lines.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log more (repeat for debug output).")
    parser.add_argument("keys", nargs="*", help="Keys to print (default: all).")
    return parser.parse_args(argv)


def build_store(files: List[str], root: Optional[str] = None, use_environ: bool = True) -> EnvStore:
    store = EnvStore()
    if use_environ:
        seed_environ(store)
    if root:
        store.root = root
    for path in files:
        load(path, store)
    return store


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging([logging.WARNING, logging.INFO, logging.DEBUG][min(args.verbose, 2)])
    try:
        store = build_store(args.files, root=args.root, use_environ=not args.no_environ)
    except EnvFileError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_LOAD_FAILED

    missing = [key for key in args.keys if key not in store]
    selected: Dict[str, str] = {}
    for key in args.keys or sorted(store.keys()):
        if key in store:
            selected[key] = store.get_string(key)

    if args.json:
        print(json.dumps(selected, indent=2, sort_keys=True))
    else:
        for key, value in selected.items():
            print(f"{key}={value}")

    if missing:
        logger.info("keys_missing", keys=missing)
        print(f"missing: {', '.join(missing)}", file=sys.stderr)
        return EXIT_MISSING_KEY
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
