# blockforge/extract/extract.py

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from .._logging import resolve_logger
from ..errors.extract import UnclosedBlock, UnexpectedBegin, UnexpectedEnd
from ..models.blocks import Block, ExtractedFile, InputLine
from .finalize import finalize_block
from .markers import is_begin_marker, is_end_marker


def iter_extracted_files(
    lines: Iterable[str],
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> Iterator[ExtractedFile]:
    """
    Scan transcript lines and yield one ExtractedFile per '+++BEGIN'/'+++END'
    block, in input order.

    `lines` may be plain strings or an open file; trailing CR/LF is dropped
    from each. Text outside blocks is ignored.
    The scan stops at the first problem by raising an ExtractError subclass;
    files already yielded are unaffected. All scanner state lives in this call.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    current: Block | None = None

    for number, text in enumerate(lines, 1):
        text = text.rstrip("\r\n")
        if is_begin_marker(text):
            if current is not None:
                raise UnexpectedBegin(
                    number,
                    f"'+++BEGIN' while the block opened on line {current.start_line} is still open",
                )
            current = Block(start_line=number)
            lg.debug("block opened on line %d", number)
            continue

        if is_end_marker(text):
            if current is None:
                raise UnexpectedEnd(number)
            current.end_line = number
            extracted = finalize_block(current)
            lg.debug(
                "block %d-%d -> %s (%d lines)",
                extracted.start_line,
                extracted.end_line,
                extracted.relative_path,
                len(extracted.code_lines),
            )
            current = None
            yield extracted
            continue

        if current is not None:
            current.lines.append(InputLine(number=number, text=text))
        # Prose between blocks is ignored.

    if current is not None:
        raise UnclosedBlock(current.start_line)


def extract_files(
    lines: Iterable[str],
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> list[ExtractedFile]:
    """Eager form of iter_extracted_files: all blocks or the first error."""
    files = list(iter_extracted_files(lines, logger=logger, log=log))
    resolve_logger(logger=logger, enabled=log, name=__name__).info(
        "extracted %d file block(s)", len(files)
    )
    return files
