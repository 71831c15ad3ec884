# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
GitWiki - access rights
"""

# read means to be able to view a page
READ = "read"

# write means to be able to change a page by committing a new version of it
WRITE = "write"

# admin enables access to the access control administration,
# it is not related to page CONTENT rights.
ADMIN = "admin"

# remotegit means to be able to pull/push the wiki repository,
# bypassing page-level rules
REMOTEGIT = "remotegit"
