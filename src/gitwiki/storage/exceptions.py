# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
GitWiki - storage exceptions
"""

from gitwiki.error import Error


class StorageError(Error):
    """
    Base class for errors raised by a repository.
    """


class NoSuchFileError(StorageError, KeyError):
    """
    Raised when a file does not exist at some path on some branch.
    """

    def __init__(self, path, branch):
        self.path = path
        self.branch = branch
        super().__init__(f"No file {path!r} on branch {branch!r}")

    def __str__(self):
        return self.message


class ConflictError(StorageError):
    """
    Raised when a commit does not fit the current state of the branch,
    e.g. a file to add already exists or a file to update is gone.
    """
