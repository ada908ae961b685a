import os

import pytest

from blockforge.commit import commit_files, resolve_target
from blockforge.errors import CommitError
from blockforge.models import ExtractedFile


def read(path):
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def _ef(path, *lines):
    return ExtractedFile(relative_path=path, code_lines=tuple(lines))


def test_creates_parent_directories_and_writes(tmp_path):
    root = tmp_path / "out"
    summary = commit_files(str(root), [_ef("sub/dir/file.txt", "a", "b")])
    target = root / "sub" / "dir" / "file.txt"
    assert target.exists()
    assert read(target) == "a\nb"
    assert summary.success == [os.path.join(str(root), "sub/dir/file.txt")]
    assert summary.relative_paths == ["sub/dir/file.txt"]


def test_rerun_overwrites_existing_file(tmp_path):
    commit_files(str(tmp_path), [_ef("sub/dir/file.txt", "old")])
    commit_files(str(tmp_path), [_ef("sub/dir/file.txt", "new", "content")])
    assert read(tmp_path / "sub" / "dir" / "file.txt") == "new\ncontent"


def test_writes_utf8(tmp_path):
    commit_files(str(tmp_path), [_ef("u.txt", "héllo ✓")])
    assert (tmp_path / "u.txt").read_bytes() == "héllo ✓".encode("utf-8")


def test_log_callback_receives_full_paths_in_order(tmp_path):
    seen = []
    commit_files(str(tmp_path), [_ef("a.txt", "1"), _ef("b/c.txt", "2")], log_callback=seen.append)
    assert seen == [resolve_target(str(tmp_path), "a.txt"), resolve_target(str(tmp_path), "b/c.txt")]


def test_dry_run_writes_nothing(tmp_path):
    seen = []
    summary = commit_files(str(tmp_path), [_ef("plan/x.txt", "x")], dry_run=True, log_callback=seen.append)
    assert summary.dry_run
    assert len(seen) == 1
    assert not (tmp_path / "plan").exists()


def test_backup_ext_copies_existing_file(tmp_path):
    target = tmp_path / "c.txt"
    target.write_text("OLD", encoding="utf-8")
    summary = commit_files(str(tmp_path), [_ef("c.txt", "NEW")], backup_ext="bak")
    assert read(target) == "NEW"
    assert read(tmp_path / "c.txt.bak") == "OLD"
    assert summary.backups == [str(target) + ".bak"]


def test_backup_ext_ignored_for_new_files(tmp_path):
    commit_files(str(tmp_path), [_ef("new.txt", "N")], backup_ext=".bak")
    assert not (tmp_path / "new.txt.bak").exists()


def test_failure_is_fatal_but_keeps_earlier_files(tmp_path):
    # A regular file where a directory is needed makes makedirs fail.
    (tmp_path / "blocker").write_text("", encoding="utf-8")
    files = [_ef("first.txt", "1"), _ef("blocker/inner.txt", "2"), _ef("third.txt", "3")]
    with pytest.raises(CommitError) as exc:
        commit_files(str(tmp_path), files)
    assert exc.value.relative_path == "blocker/inner.txt"
    assert (tmp_path / "first.txt").exists()
    assert not (tmp_path / "third.txt").exists()


def test_target_that_is_a_directory_fails(tmp_path):
    (tmp_path / "taken").mkdir()
    with pytest.raises(CommitError):
        commit_files(str(tmp_path), [_ef("taken", "x")])


def test_no_containment_check_on_relative_paths(tmp_path):
    root = tmp_path / "root"
    root.mkdir()
    commit_files(str(root), [_ef("../sibling.txt", "s")])
    assert read(tmp_path / "sibling.txt") == "s"
