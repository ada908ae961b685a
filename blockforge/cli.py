# blockforge/cli.py
"""
blockforge – write the '+++BEGIN' / '+++END' blocks of an LLM transcript to disk.

Usage
-----
blockforge --config config.json --input input.txt [--dry-run] [--tree]

config.json
-----------
{"RootPath": "out/project"}
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from ._logging import resolve_logger
from .config import DEFAULT_CONFIG_PATH
from .core import DEFAULT_INPUT_PATH, run
from .errors import BlockforgeError
from .utils.gitignore import get_gitignore
from .utils.tree import _generate_tree_string


def _parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        prog="blockforge",
        description="Extract '+++BEGIN'/'+++END' code blocks from a transcript into files.",
    )
    ap.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="JSON config with a 'RootPath' field.")
    ap.add_argument("--input", default=DEFAULT_INPUT_PATH, help="Transcript to extract blocks from.")
    ap.add_argument("--dry-run", action="store_true", help="Report target paths without writing.")
    ap.add_argument(
        "--backup-ext",
        default=None,
        help="Copy files about to be overwritten to '<file><ext>' (overrides the config).",
    )
    ap.add_argument("--tree", action="store_true", help="Print the root directory tree afterwards.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr.")
    return ap.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    args = _parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")
        # Module loggers inherit from the package logger.
        resolve_logger(enabled=True, name="blockforge", level=logging.DEBUG)

    def _on_written(full_path: str) -> None:
        prefix = "Would write" if args.dry_run else "Wrote"
        print(f"{prefix} {full_path}")

    try:
        summary = run(
            args.config,
            args.input,
            dry_run=args.dry_run,
            backup_ext=args.backup_ext,
            log_callback=_on_written,
            log=args.verbose,
        )
    except BlockforgeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.tree and not args.dry_run:
        print(_generate_tree_string(summary.root_path, get_gitignore(summary.root_path), summary.relative_paths))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
