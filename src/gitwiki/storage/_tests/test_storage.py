# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
GitWiki - storage tests
"""

import pytest

from gitwiki.error import ConfigurationError, Error
from gitwiki.storage import create_repository
from gitwiki.storage import fs, memory
from gitwiki.storage.exceptions import ConflictError, NoSuchFileError, StorageError


def test_create_repository_memory():
    assert isinstance(create_repository("memory:"), memory.Repository)


def test_create_repository_fs(tmp_path):
    repository = create_repository(f"fs:{tmp_path}")
    assert isinstance(repository, fs.Repository)
    assert repository.path == str(tmp_path)


@pytest.mark.parametrize("uri", ["memory", "git:/srv/wiki", "", "/srv/wiki"])
def test_create_repository_invalid(uri):
    with pytest.raises(ConfigurationError):
        create_repository(uri)


def test_exceptions():
    assert issubclass(StorageError, Error)
    assert issubclass(ConflictError, StorageError)
    assert issubclass(NoSuchFileError, StorageError)
    err = NoSuchFileError("Home", "main")
    assert str(err) == "No file 'Home' on branch 'main'"
