from .commit import CommitSummary, commit_files
from .config import Config, load_config
from .core import run
from .errors import (
    BlockforgeError,
    CommitError,
    ConfigError,
    EmptyBlock,
    EmptyCode,
    EmptyPath,
    ExtractError,
    InputError,
    MissingPathLine,
    UnclosedBlock,
    UnexpectedBegin,
    UnexpectedEnd,
)
from .extract import (
    extract_blocks_from_file,
    extract_blocks_from_text,
    extract_files,
    iter_extracted_files,
    read_input_lines,
)
from .models import Block, ExtractedFile, InputLine

__all__ = [
    "run",
    "load_config",
    "Config",
    "extract_files",
    "iter_extracted_files",
    "extract_blocks_from_text",
    "extract_blocks_from_file",
    "read_input_lines",
    "commit_files",
    "CommitSummary",
    "InputLine",
    "Block",
    "ExtractedFile",
    "BlockforgeError",
    "ConfigError",
    "InputError",
    "CommitError",
    "ExtractError",
    "UnexpectedBegin",
    "UnexpectedEnd",
    "UnclosedBlock",
    "EmptyBlock",
    "MissingPathLine",
    "EmptyPath",
    "EmptyCode",
]
