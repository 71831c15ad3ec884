# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
GitWiki - miscellaneous constants
"""

# the rule document, relative to the repository root
PERMISSIONS_FILE_NAME = ".wikipermissions"

# the single cache slot the parsed rule document lives in
RULES_CACHE_KEY = "WikiPageAccessRules"

# absolute expiration of the cached rule document [s]
RULES_CACHE_TIMEOUT = 15 * 60

DEFAULT_BRANCH = "main"

DEFAULT_COMMIT_MESSAGE = "Update access control rules"

# domain used for generated, non-personal git commit email addresses
GIT_EMAIL_DOMAIN = "gitwiki.local"

# characters that would break a git commit signature line
GIT_SIGNATURE_INVALID_CHARS = "<>\n\r\0"

CHARSET = "utf-8"
