# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
GitWiki - wiki users

Authentication is done by the host application, it hands us a
WikiUserWithPermissions (or None for anonymous users) via the configured
user_loader. This module has the user value types and the helpers to turn
a user into a git commit signature.
"""


import hashlib
from collections import namedtuple
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from gitwiki.constants.misc import GIT_EMAIL_DOMAIN, GIT_SIGNATURE_INVALID_CHARS, CHARSET
from gitwiki.constants.rights import READ, WRITE, ADMIN, REMOTEGIT


CommitSignature = namedtuple("CommitSignature", ["name", "email", "when"])


@dataclass(frozen=True)
class WikiUser:
    """
    A wiki user as seen by git.

    git_name and git_email are only used for commit metadata and never shown,
    git_email should be a generated, but per user stable address to keep the
    real address private (see git_email_from_identifier).
    """

    git_name: str
    git_email: str
    display_name: str = None

    def __post_init__(self):
        if self.display_name is None:
            object.__setattr__(self, "display_name", self.git_name)


@dataclass(frozen=True)
class WikiUserWithPermissions:
    """
    The current user, its groups and its wiki-wide rights.

    may_remote_git users may pull / push the repository, so they can see and
    change any page regardless of page-level rules.
    """

    user: WikiUser
    groups: tuple = ()
    may_view: bool = True
    may_edit: bool = False
    may_admin: bool = False
    may_remote_git: bool = False

    def __post_init__(self):
        object.__setattr__(self, "groups", tuple(self.groups))

    def may(self, right):
        """check a wiki-wide right, see gitwiki.constants.rights"""
        rights = {
            READ: self.may_view,
            WRITE: self.may_edit,
            ADMIN: self.may_admin,
            REMOTEGIT: self.may_remote_git,
        }
        return rights.get(right, False)


def generate_unique_git_email():
    """return a new random git email address, a different one for each call"""
    return f"{uuid4().hex}@{GIT_EMAIL_DOMAIN}"


def git_email_from_identifier(identifier):
    """
    return a git email address derived from some external user identifier

    The same identifier always gives the same address, so no mapping between
    the external system and the wiki needs to be stored.
    """
    name = hashlib.sha256(identifier.encode(CHARSET)).hexdigest()
    return f"{name}@{GIT_EMAIL_DOMAIN}"


def sanitize_git_name_or_email(value):
    """replace characters that would break a git signature by an underscore"""
    for c in GIT_SIGNATURE_INVALID_CHARS:
        value = value.replace(c, "_")
    return value


def commit_signature(name, email, when=None):
    """
    create a CommitSignature, user supplied names and emails are sanitized here

    :param when: commit time, defaults to now (UTC)
    """
    if when is None:
        when = datetime.now(timezone.utc)
    return CommitSignature(sanitize_git_name_or_email(name), sanitize_git_name_or_email(email), when)
