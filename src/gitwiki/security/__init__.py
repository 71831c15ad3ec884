# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
GitWiki - Page-level access control rules

A rule ties a page name pattern to the groups that may read and the groups
that may write the pages matching it. Rules are evaluated in ascending order,
the first rule matching a page name decides (see security.service).

Pattern syntax (always case-insensitive, always matching the whole name):

    literal characters    match themselves
    *                     any characters except "/" (stays within one segment)
    **                    any characters including "/" (crosses segments)

Note that "**/name" needs a "/" before name, so it does not match the
root level page "name". Use two rules ("name" and "**/name") if you need both.
"""


import re
from dataclasses import dataclass, field
from functools import wraps

from flask import abort
from flask import g as flaskg


def compile_pattern(pattern):
    """
    translate a glob-style page name pattern into a compiled, anchored regex

    Every non-wildcard character is escaped, "**" becomes ".*" and a remaining
    "*" becomes "[^/]*". Any string is a legal pattern.

    :param pattern: page name pattern, e.g. "docs/*/readme" or "admin/**"
    :returns: compiled regex, use its match() method
    """
    regex = re.escape(pattern).replace(r"\*\*", ".*").replace(r"\*", "[^/]*")
    return re.compile(rf"\A{regex}\Z", re.IGNORECASE)


@dataclass(frozen=True)
class AccessRule:
    """
    An immutable page access rule.

    Empty read_groups / write_groups mean that all users (including anonymous
    ones) may read / write the pages matching the pattern.
    """

    pattern: str
    read_groups: tuple = ()
    write_groups: tuple = ()
    order: int = 0
    compiled_pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "read_groups", tuple(self.read_groups))
        object.__setattr__(self, "write_groups", tuple(self.write_groups))
        object.__setattr__(self, "compiled_pattern", compile_pattern(self.pattern))

    def matches(self, page_name):
        """Check if page_name matches the pattern of this rule."""
        return self.compiled_pattern.match(page_name) is not None


@dataclass(frozen=True)
class PageAccessPermissions:
    """
    Result of checking a page name against the rules for some groups.

    matched_pattern is the pattern of the deciding rule, None if no rule
    matched (or page-level permissions are disabled).
    """

    can_read: bool = True
    can_edit: bool = True
    matched_pattern: str = None


FULL_ACCESS = PageAccessPermissions()


def groups_satisfy(user_groups, rule_groups):
    """
    Check whether a user in user_groups satisfies a rule's group list.

    An empty rule group list is satisfied by everybody, otherwise at least one
    group must be in both lists (compared case-insensitively).
    """
    if not rule_groups:
        return True
    wanted = {group.casefold() for group in rule_groups}
    return any(group.casefold() in wanted for group in user_groups)


def require_permission(right):
    """
    view decorator to require a specific (functional or content) right

    if flaskg.user is anonymous (None) or the right is not granted, abort with 403
    """

    def wrap(f):
        @wraps(f)
        def wrapped_f(*args, **kw):
            user = flaskg.user
            if user is None or not user.may(right):
                abort(403)
            return f(*args, **kw)

        return wrapped_f

    return wrap
