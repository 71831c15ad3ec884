# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

from __future__ import annotations

from typing import Callable, Protocol


class WikiConfigProtocol(Protocol):
    sitename: str
    home_page_name: str
    storage_uri: str
    branch_name: str
    create_repository: bool
    destroy_repository: bool
    acl_use_page_level_permissions: bool
    acl_allow_anonymous_viewing: bool
    acl_rules_file: str
    acl_cache_timeout: int
    user_loader: Callable
    config_check_enabled: bool
