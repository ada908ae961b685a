import pytest

from blockforge.errors import InputError, UnclosedBlock
from blockforge.extract import extract_blocks_from_file, read_input_lines


def test_read_input_lines_strips_terminators_and_bom(tmp_path):
    p = tmp_path / "in.txt"
    p.write_bytes("\ufeffone\r\ntwo\nthree".encode("utf-8"))
    assert read_input_lines(str(p)) == ["one", "two", "three"]


def test_read_input_missing_file(tmp_path):
    with pytest.raises(InputError, match="not found"):
        read_input_lines(str(tmp_path / "nope.txt"))


def test_read_input_directory_is_not_a_file(tmp_path):
    with pytest.raises(InputError):
        read_input_lines(str(tmp_path))


def test_read_input_rejects_undecodable_bytes(tmp_path):
    p = tmp_path / "bad.txt"
    p.write_bytes(b"\xff\xfe\xfa not utf-8")
    with pytest.raises(InputError, match="Could not read"):
        read_input_lines(str(p))


def test_extract_blocks_from_file(write_transcript):
    path = write_transcript(
        """\
        Here you go:
        +++BEGIN
        Path: pkg/__init__.py
        ```python
        VERSION = "1.0"
        ```
        +++END
        """
    )
    files = extract_blocks_from_file(path)
    assert len(files) == 1
    assert files[0].relative_path == "pkg/__init__.py"
    assert files[0].content == 'VERSION = "1.0"'


def test_extract_blocks_from_file_propagates_parse_errors(write_transcript):
    path = write_transcript("+++BEGIN\nPath: a.txt\ncode\n")
    with pytest.raises(UnclosedBlock):
        extract_blocks_from_file(path)
