# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
GitWiki - fs repository tests
"""

import errno
import json

import pytest

from gitwiki.storage import AddFile, UpdateFile
from gitwiki.storage.exceptions import ConflictError, NoSuchFileError
from gitwiki.user import commit_signature

from ..fs import Repository


AUTHOR = commit_signature("Tester", "tester@example.org")


def test_create_and_destroy(tmp_path):
    target = tmp_path / "repository"
    repository = Repository(str(target))
    assert not target.exists()
    repository.create()
    assert target.is_dir()
    # creating again is fine
    repository.create()
    repository.destroy()
    assert not target.exists()


def test_from_uri(tmp_path):
    repository = Repository.from_uri(str(tmp_path))
    assert repository.path == str(tmp_path)


def test_layout(tmp_path):
    repository = Repository(str(tmp_path))
    repository.create()
    repository.commit("main", [AddFile("docs/intro", b"hello")], "add intro", AUTHOR)
    assert (tmp_path / "main" / "docs" / "intro").read_bytes() == b"hello"
    (line,) = (tmp_path / "main.log").read_text(encoding="utf-8").splitlines()
    record = json.loads(line)
    assert record["paths"] == ["docs/intro"]
    assert record["message"] == "add intro"
    assert record["author_name"] == "Tester"


def test_persistent(tmp_path):
    repository = Repository(str(tmp_path))
    repository.create()
    commit_id = repository.commit("main", [AddFile("Home", b"hello")], "add", AUTHOR)
    reopened = Repository(str(tmp_path))
    reopened.open()
    assert reopened.read_file("Home", "main") == b"hello"
    assert [commit.commit_id for commit in reopened.history("main")] == [commit_id]


@pytest.mark.parametrize("path", ["../escape", "/etc/passwd", "docs/../../main.log", ".", ""])
def test_path_outside_branch(tmp_path, path):
    repository = Repository(str(tmp_path))
    repository.create()
    with pytest.raises(ValueError):
        repository.file_exists(path, "main")
    with pytest.raises(ValueError):
        repository.commit("main", [AddFile(path, b"data")], "escape", AUTHOR)


@pytest.mark.parametrize("branch", ["../main", "a/b", "..", ""])
def test_invalid_branch(tmp_path, branch):
    repository = Repository(str(tmp_path))
    repository.create()
    with pytest.raises(ValueError):
        repository.read_file("Home", branch)


def test_read_directory(tmp_path):
    repository = Repository(str(tmp_path))
    repository.create()
    repository.commit("main", [AddFile("docs/intro", b"hello")], "add", AUTHOR)
    with pytest.raises(NoSuchFileError):
        repository.read_file("docs", "main")
    with pytest.raises(NoSuchFileError):
        repository.read_file("docs/intro/more", "main")


def test_commit_write_failure(tmp_path, monkeypatch):
    """a failing write leaves neither files nor temporary files behind"""
    repository = Repository(str(tmp_path))
    repository.create()
    repository.commit("main", [AddFile("Home", b"old")], "add", AUTHOR)
    write_temp = Repository._write_temp
    written = []

    def failing_write_temp(self, fname, data):
        if written:
            raise OSError(errno.ENOSPC, "No space left on device")
        written.append(fname)
        return write_temp(self, fname, data)

    monkeypatch.setattr(Repository, "_write_temp", failing_write_temp)
    with pytest.raises(OSError):
        repository.commit("main", [UpdateFile("Home", b"new"), AddFile("Other", b"data")], "both", AUTHOR)
    assert repository.read_file("Home", "main") == b"old"
    assert not repository.file_exists("Other", "main")
    assert sorted(p.name for p in (tmp_path / "main").iterdir()) == ["Home"]
    assert [commit.message for commit in repository.history("main")] == ["add"]


def test_commit_over_directory(tmp_path):
    repository = Repository(str(tmp_path))
    repository.create()
    repository.commit("main", [AddFile("docs/intro", b"hello")], "add", AUTHOR)
    with pytest.raises(ConflictError):
        repository.commit("main", [AddFile("docs", b"data")], "add", AUTHOR)
    assert repository.read_file("docs/intro", "main") == b"hello"


def test_no_temporary_files(tmp_path):
    repository = Repository(str(tmp_path))
    repository.create()
    repository.commit("main", [AddFile("Home", b"1")], "add", AUTHOR)
    repository.commit("main", [UpdateFile("Home", b"2")], "update", AUTHOR)
    assert [p.name for p in (tmp_path / "main").iterdir()] == ["Home"]
    assert repository.read_file("Home", "main") == b"2"
