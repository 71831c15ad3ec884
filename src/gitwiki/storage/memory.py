# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
GitWiki - memory repository

Keeps branches, files and commits in memory (RAM, non-persistent!).

Note: likely this is mostly useful for unit tests.
"""

import threading
from uuid import uuid4

from . import RepositoryBase, Commit
from .exceptions import NoSuchFileError


class Repository(RepositoryBase):
    """
    A simple dict-based in-memory repository. No persistence!
    """

    @classmethod
    def from_uri(cls, uri):
        return cls()

    def __init__(self):
        self._branches = None
        self.__branches = None
        self._commits = None
        self.__commits = None
        self._lock = threading.Lock()

    def create(self):
        self.__branches = {}  # branch -> {path: data}
        self.__commits = []  # oldest first

    def destroy(self):
        self.__branches = None
        self.__commits = None

    def open(self):
        if self.__branches is None:
            # not created yet: start with an empty repository
            self.create()
        self._branches = self.__branches
        self._commits = self.__commits

    def close(self):
        self._branches = None
        self._commits = None

    def read_file(self, path, branch):
        try:
            return self._branches[branch][path]
        except KeyError:
            raise NoSuchFileError(path, branch)

    def file_exists(self, path, branch):
        return path in self._branches.get(branch, {})

    def commit(self, branch, operations, message, author):
        with self._lock:
            self._check_operations(branch, operations)
            files = self._branches.setdefault(branch, {})
            for operation in operations:
                files[operation.path] = bytes(operation.data)
            commit = Commit(
                commit_id=uuid4().hex,
                branch=branch,
                paths=tuple(operation.path for operation in operations),
                message=message,
                author_name=author.name,
                author_email=author.email,
                timestamp=author.when,
            )
            self._commits.append(commit)
        return commit.commit_id

    def history(self, branch, path=None):
        for commit in reversed(self._commits):
            if commit.branch == branch and (path is None or path in commit.paths):
                yield commit
