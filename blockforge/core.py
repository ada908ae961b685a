# blockforge/core.py
import logging
from typing import Callable, Optional

from ._logging import resolve_logger
from .commit import CommitSummary, commit_files
from .config import DEFAULT_CONFIG_PATH, load_config
from .extract import extract_files, read_input_lines

DEFAULT_INPUT_PATH = "input.txt"


def run(
    config_path: str = DEFAULT_CONFIG_PATH,
    input_path: str = DEFAULT_INPUT_PATH,
    *,
    dry_run: bool = False,
    backup_ext: Optional[str] = None,
    log_callback: Optional[Callable[[str], None]] = None,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
) -> CommitSummary:
    """
    Load the config, extract every block from the transcript and write the files.

    The whole transcript is validated before anything is written, so a malformed
    block anywhere leaves the filesystem untouched. `backup_ext` overrides the
    config's 'BackupExtension'. Errors propagate as BlockforgeError subclasses.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)

    config = load_config(config_path, logger=logger, log=log)
    lines = read_input_lines(input_path, logger=logger, log=log)
    files = extract_files(lines, logger=logger, log=log)
    lg.info("writing %d file(s) under %s", len(files), config.root_path)

    return commit_files(
        config.root_path,
        files,
        dry_run=dry_run,
        backup_ext=backup_ext if backup_ext is not None else config.backup_ext,
        log_callback=log_callback,
        logger=logger,
        log=log,
    )
