# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
GitWiki - rule document (.wikipermissions) serialization

The rule document is a text file with one rule per line::

    # comment
    Pattern | ReadGroup1, ReadGroup2 | WriteGroup1

Blank lines and lines starting with "#" are ignored. Every other line must
consist of exactly 3 fields separated by "|". Group fields are comma
separated lists, an empty field means "no restriction". The position of a
rule line among all rule lines is its evaluation order.
"""


from gitwiki.error import Error
from gitwiki.security import AccessRule

HEADER = """\
# Wiki Page Access Control Rules
# Format: Pattern | ReadGroups | WriteGroups
# Patterns support wildcards: * (any chars except /) and ** (any chars including /)
# Groups are comma-separated. Empty means all users.
# Rules are evaluated in order - first match wins.
"""

EXAMPLES = """\
#
# Examples:
# admin/** | admin | admin
# private/* | users, editors | editors
# * | | users
"""

FIELD_SEPARATOR = "|"
GROUP_SEPARATOR = ","


class RuleFormatError(Error):
    """
    Raised when a rule document line can not be parsed.

    :ivar reason: short description of the problem
    :ivar line: the offending line
    :ivar lineno: 1-based line number of the offending line
    """

    def __init__(self, reason, line, lineno=None):
        self.reason = reason
        self.line = line
        self.lineno = lineno
        where = f" (line {lineno})" if lineno is not None else ""
        super().__init__(f"Invalid rule format{where}: {reason}: {line!r}")


def _split_groups(text):
    return [group.strip() for group in text.split(GROUP_SEPARATOR) if group.strip()]


def parse_line(line, order=0, lineno=None):
    """
    Parse a single rule line (no comment, no blank line) into an AccessRule.

    :raises RuleFormatError: if the line does not have exactly 3 fields
    """
    parts = line.strip().split(FIELD_SEPARATOR)
    if len(parts) != 3:
        raise RuleFormatError(f"expected 3 fields separated by '|', got {len(parts)}", line, lineno)
    pattern, read_groups, write_groups = (part.strip() for part in parts)
    return AccessRule(pattern, _split_groups(read_groups), _split_groups(write_groups), order)


def parse_rules(content):
    """
    Parse a rule document.

    Either all rules are returned or RuleFormatError is raised for the first
    bad line, there are no partial results.

    :param content: rule document text (str)
    :returns: list of AccessRule, order = position among the rule lines
    """
    rules = []
    for lineno, line in enumerate(content.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        rules.append(parse_line(stripped, order=len(rules), lineno=lineno))
    return rules


def format_groups(groups):
    """join groups for display and serialization, e.g. "users, editors" """
    return ", ".join(groups)


def format_rule(rule):
    return f"{rule.pattern} | {format_groups(rule.read_groups)} | {format_groups(rule.write_groups)}"


def serialize_rules(rules, include_examples=False):
    """
    Serialize rules into the rule document format.

    Rules are written ascending by their order, an empty group list becomes
    an empty field (e.g. "* |  | users").

    :param rules: iterable of AccessRule
    :param include_examples: if True, add a commented examples block after the header
    :returns: rule document text (str)
    """
    lines = [HEADER]
    if include_examples:
        lines.append(EXAMPLES)
    lines.append("\n")
    for rule in sorted(rules, key=lambda rule: rule.order):
        lines.append(format_rule(rule) + "\n")
    return "".join(lines)
