# blockforge/extract/main.py
from __future__ import annotations

import logging
import os
from typing import List

from .._logging import resolve_logger
from ..errors.input import InputError
from ..models.blocks import ExtractedFile
from ..utils.text import split_lines
from .extract import extract_files


def extract_blocks_from_text(
    text: str,
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> List[ExtractedFile]:
    """Extract every labelled block from a whole transcript string."""
    return extract_files(split_lines(text), logger=logger, log=log)


def read_input_lines(
    path: str,
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> List[str]:
    """
    Read a transcript file as UTF-8 and return its lines without terminators.
    Raises InputError if the file is missing or cannot be read or decoded.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    if not os.path.isfile(path):
        raise InputError(f"Input file not found: '{path}'")
    try:
        with open(path, "r", encoding="utf-8-sig", newline=None) as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Could not read input file '{path}': {e}") from e
    lines = split_lines(content)
    lg.debug("read %d line(s) from %s", len(lines), path)
    return lines


def extract_blocks_from_file(
    path: str,
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> List[ExtractedFile]:
    """Read `path` and extract every labelled block from it."""
    return extract_files(read_input_lines(path, logger=logger, log=log), logger=logger, log=log)
