# blockforge/commit/core.py
import logging
import os
import shutil
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional

from .._logging import resolve_logger
from ..errors.commit import CommitError
from ..models.blocks import ExtractedFile


@dataclass
class CommitSummary:
    """Outcome of writing a batch of extracted files."""

    root_path: str
    # Full paths written (or planned, for a dry run), in emission order.
    success: List[str] = field(default_factory=list)
    # Root-relative paths matching `success`, as given in the transcript.
    relative_paths: List[str] = field(default_factory=list)
    backups: List[str] = field(default_factory=list)
    dry_run: bool = False


def resolve_target(root_path: str, relative_path: str) -> str:
    """Join root and relative path with host semantics. No containment check."""
    return os.path.join(root_path, relative_path)


def _backup_path(dest: str, backup_ext: str) -> str:
    ext = backup_ext if backup_ext.startswith(".") else "." + backup_ext
    return dest + ext


def commit_files(
    root_path: str,
    files: Iterable[ExtractedFile],
    *,
    dry_run: bool = False,
    backup_ext: Optional[str] = None,
    log_callback: Optional[Callable[[str], None]] = None,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
) -> CommitSummary:
    """
    Write each extracted file to `root_path/relative_path`, in order.

    Missing parent directories are created and existing files are overwritten.
    The content is the file's code lines joined with '\\n', encoded as UTF-8.

    Args:
        root_path: Base directory for every relative path.
        files: Extracted files, written in iteration order.
        dry_run: Resolve and report the targets without touching the filesystem.
        backup_ext: When set, copy a pre-existing target to `<target><ext>`
                    before overwriting it.
        log_callback: Receives the full path of each file once it is written
                      (or would be, for a dry run).

    Returns:
        CommitSummary listing what was written.

    Raises:
        CommitError on the first failure. Files written before it stay on disk.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    summary = CommitSummary(root_path=root_path, dry_run=dry_run)

    def _report(full_path: str) -> None:
        if log_callback:
            log_callback(full_path)

    for ef in files:
        target = resolve_target(root_path, ef.relative_path)
        content = ef.content

        if dry_run:
            lg.info(
                "DRY RUN: Would write %s (%d bytes)", target, len(content.encode("utf-8"))
            )
            summary.success.append(target)
            summary.relative_paths.append(ef.relative_path)
            _report(target)
            continue

        try:
            parent = os.path.dirname(target)
            if parent:
                os.makedirs(parent, exist_ok=True)
            if backup_ext and os.path.isfile(target):
                backup = _backup_path(target, backup_ext)
                shutil.copy2(target, backup)
                summary.backups.append(backup)
                lg.debug("backed up %s -> %s", target, backup)
            with open(target, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
        except (OSError, ValueError) as e:
            lg.error("failed to write %s: %s", target, e)
            raise CommitError(
                f"Could not write '{ef.relative_path}' to '{target}': {e}",
                ef.relative_path,
                target,
            ) from e

        lg.info("wrote %s (%d lines)", target, len(ef.code_lines))
        summary.success.append(target)
        summary.relative_paths.append(ef.relative_path)
        _report(target)

    return summary
