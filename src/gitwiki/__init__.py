# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
GitWiki - a git-backed wiki with page-level access control.
"""


import sys
import platform

from ._version import version  # noqa

project = "GitWiki"


if sys.hexversion < 0x3090000:
    sys.exit("Error: %s requires Python 3.9+, current version is %s\n" % (project, platform.python_version()))
