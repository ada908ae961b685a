from .extract import extract_files, iter_extracted_files
from .finalize import finalize_block
from .main import extract_blocks_from_file, extract_blocks_from_text, read_input_lines
from .markers import is_begin_marker, is_end_marker, is_fence_line, match_path_line

__all__ = [
    "extract_files",
    "iter_extracted_files",
    "finalize_block",
    "extract_blocks_from_text",
    "extract_blocks_from_file",
    "read_input_lines",
    "is_begin_marker",
    "is_end_marker",
    "is_fence_line",
    "match_path_line",
]
