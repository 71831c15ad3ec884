# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
GitWiki - Configuration defaults class
"""


from gitwiki import error
from gitwiki.constants.misc import DEFAULT_BRANCH, PERMISSIONS_FILE_NAME, RULES_CACHE_TIMEOUT

from gitwiki import log

logging = log.getLogger(__name__)


class ConfigFunctionality:
    """Configuration base class with config class behaviour.

    This class contains the functionality for the DefaultConfig class,
    the settings are added to DefaultConfig from the options tables below.
    """

    def __init__(self):
        """Init Config instance"""
        if self.config_check_enabled:
            self._config_check()

        if not self.branch_name:
            raise error.ConfigurationError("No branch configured! You need to set branch_name = 'main'.")

        if not self.acl_rules_file:
            raise error.ConfigurationError(
                "No rule document configured! You need to set acl_rules_file = '.wikipermissions'."
            )

        try:
            cache_timeout = int(self.acl_cache_timeout)
            if cache_timeout <= 0:
                raise ValueError
        except (TypeError, ValueError):
            raise error.ConfigurationError(
                f"acl_cache_timeout must be a positive number of seconds, not {self.acl_cache_timeout!r}."
            )
        self.acl_cache_timeout = cache_timeout

        # a plain function in a config class body would become a bound method
        user_loader = getattr(type(self), "user_loader")
        if not callable(user_loader):
            raise error.ConfigurationError("user_loader must be a callable returning the current user (or None).")
        self.user_loader = user_loader

        if not self.acl_use_page_level_permissions:
            logging.info("page-level permissions are disabled, every user may read and write every page.")

    def _config_check(self):
        """Check namespace and complain about unknown names

        Complain about names which are not used by DefaultConfig, except
        _private or __magic__ names.
        """
        unknown = [f'"{name}"' for name in dir(self) if not name.startswith("_") and not hasattr(DefaultConfig, name)]
        if unknown:
            msg = """
Unknown configuration options: {}.

Please check your configuration for typos.
""".format(
                ", ".join(unknown)
            )
            raise error.ConfigurationError(msg)

    def __getitem__(self, item):
        """Make it possible to access a config object like a dict"""
        return getattr(self, item)


class DefaultConfig(ConfigFunctionality):
    """Configuration base class with default config values
    (added below)
    """

    # Do not add anything into this class. Functionality must
    # be added above. Settings must be added below to the
    # options dictionary.


def _anonymous_user_loader():
    """default user_loader: everybody is anonymous"""
    return None


#
# Options that are not prefixed automatically with their
# group name, see below (at the options dict) for more
# information on the layout of this structure.
#
options_no_group_name = {
    # ==========================================================================
    "storage": (
        "Storage",
        "The git repository the wiki content and the rule document are stored in.",
        (
            ("storage_uri", "memory:", "repository URI, 'memory:' (for testing) or 'fs:/path/to/repository'"),
            ("branch_name", DEFAULT_BRANCH, "name of the branch holding the wiki content"),
            ("create_repository", False, "if True, create the repository when the app is created"),
            ("destroy_repository", False, "if True, destroy the repository when the app is destroyed"),
        ),
    ),
    # ==========================================================================
    "various": (
        "Various",
        None,
        (
            ("sitename", "GitWiki", "Short description of your wiki site, displayed below the logo on each page"),
            ("home_page_name", "Home", "name of the wiki home page"),
            (
                "user_loader",
                _anonymous_user_loader,
                "callable returning the current WikiUserWithPermissions or None (anonymous).",
            ),
            ("config_check_enabled", False, "if True, check configuration for unknown settings."),
        ),
    ),
}

#
# The 'options' dict carries default GitWiki options. The dict is a
# group name to tuple mapping.
# Each group tuple consists of the following items:
#   group section heading, group help text, option list
#
# where each 'option list' is a tuple or list of option tuples
#
# each option tuple consists of
#   option name, default value, help text
#
# Unlike the options_no_group_name dict, option names in this dict
# are automatically prefixed with "group name '_'" (i.e. the name of
# the group they are in and an underscore), e.g. the 'rules_file'
# below creates an option called "acl_rules_file".
#
options = {
    "acl": (
        "Page-level Access Control",
        "Rules in the rule document control which groups may read and write which pages.",
        (
            ("use_page_level_permissions", True, "if False, every user may read and write every page."),
            ("allow_anonymous_viewing", False, "if True, pages may be viewed without being logged in."),
            ("rules_file", PERMISSIONS_FILE_NAME, "path of the rule document in the repository"),
            ("cache_timeout", RULES_CACHE_TIMEOUT, "seconds the parsed rule document is cached"),
        ),
    ),
}


def _add_options_to_defconfig(opts, addgroup=True):
    for groupname in opts:
        group_short, group_doc, group_opts = opts[groupname]
        for name, default, doc in group_opts:
            if addgroup:
                name = groupname + "_" + name
            if callable(default):
                default = staticmethod(default)
            setattr(DefaultConfig, name, default)


_add_options_to_defconfig(options)
_add_options_to_defconfig(options_no_group_name, False)
