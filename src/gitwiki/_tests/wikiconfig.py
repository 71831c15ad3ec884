# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
GitWiki - Test wiki configuration.

Do not change any values without good reason.

We mostly want to have default values here, except for stuff that doesn't
work without setting them.
"""


from gitwiki.config.default import DefaultConfig


class Config(DefaultConfig):
    """
    Default configuration for unit tests.
    """

    sitename = "GitWikiTest"
    storage_uri = "memory:"
    create_repository = True
    destroy_repository = True
