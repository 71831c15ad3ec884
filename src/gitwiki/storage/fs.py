# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
GitWiki - filesystem repository

Every branch is a directory below the repository root, files are stored at
their relative path inside it. The commits of a branch are recorded as JSON
lines in <root>/<branch>.log (oldest first).

A commit writes all files to temporary files first and renames them into
place afterwards, readers see either the old or the new content of a file.
The log record is appended last.
"""

import os
import errno
import json
import shutil
import tempfile
import threading
from datetime import datetime
from uuid import uuid4

from . import RepositoryBase, Commit
from .exceptions import ConflictError, NoSuchFileError

from gitwiki import log

logging = log.getLogger(__name__)

# prefix of files being written, they are renamed into place when complete
TEMP_PREFIX = ".tmp-"


class Repository(RepositoryBase):
    """
    A simple filesystem-based repository.

    branch names and paths are required to be valid (relative) file names.
    """

    @classmethod
    def from_uri(cls, uri):
        return cls(uri)

    def __init__(self, path):
        """
        :param path: base directory used for this repository
        """
        self.path = path
        self._lock = threading.Lock()

    def create(self):
        try:
            os.makedirs(self.path)
        except OSError as e:
            if e.errno != errno.EEXIST:
                raise

    def destroy(self):
        shutil.rmtree(self.path)

    def _branch_dir(self, branch):
        branch_dir = os.path.normpath(os.path.join(self.path, branch))
        if os.path.dirname(branch_dir) != os.path.normpath(self.path):
            raise ValueError(f"invalid branch name: {branch!r}")
        return branch_dir

    def _mkpath(self, path, branch):
        branch_dir = self._branch_dir(branch)
        fname = os.path.normpath(os.path.join(branch_dir, path))
        if os.path.commonpath([branch_dir, fname]) != branch_dir or fname == branch_dir:
            raise ValueError(f"path {path!r} is outside of branch {branch!r}")
        return fname

    def _logpath(self, branch):
        return self._branch_dir(branch) + ".log"

    def read_file(self, path, branch):
        try:
            with open(self._mkpath(path, branch), "rb") as f:
                return f.read()
        except OSError as e:
            if e.errno in (errno.ENOENT, errno.EISDIR, errno.ENOTDIR):
                raise NoSuchFileError(path, branch)
            raise

    def file_exists(self, path, branch):
        return os.path.isfile(self._mkpath(path, branch))

    def _write_temp(self, fname, data):
        """write data to a new temporary file next to fname, return its name"""
        dirname = os.path.dirname(fname)
        os.makedirs(dirname, exist_ok=True)
        fd, tmpname = tempfile.mkstemp(dir=dirname, prefix=TEMP_PREFIX)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
        except Exception:
            os.unlink(tmpname)
            raise
        return tmpname

    def commit(self, branch, operations, message, author):
        with self._lock:
            self._check_operations(branch, operations)
            targets = []
            for operation in operations:
                fname = self._mkpath(operation.path, branch)
                if os.path.isdir(fname):
                    raise ConflictError(f"Can not write {operation.path!r} on branch {branch!r}: is a directory.")
                targets.append((fname, operation.data))
            # nothing is visible in the branch before all temporary files are written
            written = []
            try:
                for fname, data in targets:
                    written.append((self._write_temp(fname, data), fname))
            except Exception:
                for tmpname, _ in written:
                    os.unlink(tmpname)
                raise
            for tmpname, fname in written:
                os.replace(tmpname, fname)
            commit_id = uuid4().hex
            record = dict(
                commit_id=commit_id,
                paths=[operation.path for operation in operations],
                message=message,
                author_name=author.name,
                author_email=author.email,
                timestamp=author.when.isoformat(),
            )
            with open(self._logpath(branch), "a", encoding="utf-8") as f:
                f.write(json.dumps(record) + "\n")
        logging.debug(f"committed {commit_id} to branch {branch!r}: {record['paths']}")
        return commit_id

    def history(self, branch, path=None):
        try:
            with open(self._logpath(branch), encoding="utf-8") as f:
                records = [json.loads(line) for line in f if line.strip()]
        except FileNotFoundError:
            return
        for record in reversed(records):
            if path is None or path in record["paths"]:
                yield Commit(
                    commit_id=record["commit_id"],
                    branch=branch,
                    paths=tuple(record["paths"]),
                    message=record["message"],
                    author_name=record["author_name"],
                    author_email=record["author_email"],
                    timestamp=datetime.fromisoformat(record["timestamp"]),
                )
