# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
GitWiki - storage subsystem

A repository keeps text files on branches and records every change as a
commit with a message and an author signature. The wiki only needs a very
small part of what a real version control system does::

    read_file(path, branch)              -> bytes, or NoSuchFileError
    file_exists(path, branch)            -> bool
    commit(branch, operations, message, author)
                                         -> commit id, or ConflictError
    history(branch, path=None)           -> commit records, newest first

Repositories are created from an URI, see create_repository().
"""

from abc import abstractmethod, ABCMeta
from collections import namedtuple

from gitwiki.error import ConfigurationError
from gitwiki.storage.exceptions import ConflictError

REPOSITORIES_PACKAGE = "gitwiki.storage"

# known URI schemes -> module in REPOSITORIES_PACKAGE
REPOSITORY_SCHEMES = {
    "memory": "memory",
    "fs": "fs",
}


# a file to add, it must not exist yet
AddFile = namedtuple("AddFile", ["path", "data"])

# a file to update, it must exist already
UpdateFile = namedtuple("UpdateFile", ["path", "data"])

# a committed change, as returned by RepositoryBase.history()
Commit = namedtuple("Commit", ["commit_id", "branch", "paths", "message", "author_name", "author_email", "timestamp"])


class RepositoryBase(metaclass=ABCMeta):
    """
    A versioned file repository with branches.
    """

    @classmethod
    @abstractmethod
    def from_uri(cls, uri):
        """
        Create an instance using the data given in the URI (without scheme).
        """

    def create(self):
        """
        Create an empty repository.
        """

    def destroy(self):
        """
        Destroy the repository (erase all stored data).
        """

    def open(self):
        """
        Open the repository; prepare it for usage.
        """

    def close(self):
        """
        Close the repository; free resources (except stored data).
        """

    @abstractmethod
    def read_file(self, path, branch):
        """
        Return the content of the file at path on branch (bytes).

        :raises NoSuchFileError: if there is no such file
        """

    @abstractmethod
    def file_exists(self, path, branch):
        """
        Return True if there is a file at path on branch.
        """

    @abstractmethod
    def commit(self, branch, operations, message, author):
        """
        Apply operations (AddFile / UpdateFile) to branch as one commit.

        Either all operations are applied or none.

        :param author: CommitSignature of the author
        :returns: commit id (str)
        :raises ConflictError: if an operation does not fit the branch state
        """

    @abstractmethod
    def history(self, branch, path=None):
        """
        Yield Commit records of branch, newest first, optionally only those touching path.
        """

    def _check_operations(self, branch, operations):
        paths = {operation.path for operation in operations}
        for operation in operations:
            parts = operation.path.split("/")
            for i in range(1, len(parts)):
                parent = "/".join(parts[:i])
                if parent in paths or self.file_exists(parent, branch):
                    raise ConflictError(
                        f"Can not write {operation.path!r} on branch {branch!r}: {parent!r} is a file."
                    )
            exists = self.file_exists(operation.path, branch)
            if isinstance(operation, AddFile) and exists:
                raise ConflictError(f"Can not add {operation.path!r} on branch {branch!r}: file exists.")
            if isinstance(operation, UpdateFile) and not exists:
                raise ConflictError(f"Can not update {operation.path!r} on branch {branch!r}: no such file.")


def create_repository(uri):
    """
    create a (not yet opened) repository instance for uri

    :param uri: '<scheme>:<scheme specific part>', e.g. 'memory:' or 'fs:/srv/wiki'
    """
    scheme_uri = uri.split(":", 1)
    if len(scheme_uri) != 2:
        raise ConfigurationError(f"malformed repository uri: {uri!r}")
    scheme, repository_uri = scheme_uri
    try:
        module_name = REPOSITORY_SCHEMES[scheme]
    except KeyError:
        raise ConfigurationError(f"unknown repository uri scheme {scheme!r} in {uri!r}")
    module = __import__(REPOSITORIES_PACKAGE + "." + module_name, globals(), locals(), ["Repository"])
    return module.Repository.from_uri(repository_uri)

