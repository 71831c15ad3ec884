# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
    GitWiki - gitwiki.user Tests
"""


import hashlib
from datetime import datetime, timezone

import pytest

from gitwiki.constants.rights import ADMIN, READ, REMOTEGIT, WRITE
from gitwiki.user import (
    CommitSignature,
    WikiUser,
    WikiUserWithPermissions,
    commit_signature,
    generate_unique_git_email,
    git_email_from_identifier,
    sanitize_git_name_or_email,
)


class TestWikiUser:

    def testDisplayNameDefaultsToGitName(self):
        user = WikiUser("Alice", "alice@gitwiki.local")
        assert user.display_name == "Alice"
        user = WikiUser("Alice", "alice@gitwiki.local", display_name="Alice A.")
        assert user.display_name == "Alice A."

    def testImmutable(self):
        user = WikiUser("Alice", "alice@gitwiki.local")
        with pytest.raises(AttributeError):
            user.git_name = "Bob"


class TestWikiUserWithPermissions:

    def testDefaults(self):
        user = WikiUserWithPermissions(WikiUser("Alice", "alice@gitwiki.local"), groups=["users"])
        assert user.groups == ("users",)
        assert user.may_view
        assert not user.may_edit
        assert not user.may_admin
        assert not user.may_remote_git

    def testMay(self):
        """user: rights map to the may_* flags"""
        user = WikiUserWithPermissions(
            WikiUser("Alice", "alice@gitwiki.local"), may_view=False, may_edit=True, may_admin=True
        )
        assert not user.may(READ)
        assert user.may(WRITE)
        assert user.may(ADMIN)
        assert not user.may(REMOTEGIT)
        assert not user.may("destroy")


class TestGitEmail:

    def testUnique(self):
        first, second = generate_unique_git_email(), generate_unique_git_email()
        assert first != second
        assert first.endswith("@gitwiki.local")

    def testFromIdentifier(self):
        """user: the same identifier always gives the same address"""
        email = git_email_from_identifier("auth0|12345")
        assert email == git_email_from_identifier("auth0|12345")
        assert email != git_email_from_identifier("auth0|12346")
        assert email == hashlib.sha256(b"auth0|12345").hexdigest() + "@gitwiki.local"


class TestCommitSignature:

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("Alice", "Alice"),
            ("Alice <alice@example.org>", "Alice _alice@example.org_"),
            ("multi\nline\r\n", "multi_line__"),
            ("nul\0byte", "nul_byte"),
        ],
    )
    def testSanitize(self, value, expected):
        assert sanitize_git_name_or_email(value) == expected

    def testSignature(self):
        when = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        signature = commit_signature("Eve <x>", "eve@example.org", when)
        assert signature == CommitSignature("Eve _x_", "eve@example.org", when)

    def testDefaultTime(self):
        before = datetime.now(timezone.utc)
        signature = commit_signature("Alice", "alice@gitwiki.local")
        assert signature.when.tzinfo is not None
        assert before <= signature.when <= datetime.now(timezone.utc)
