# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
GitWiki - page access control service

Loads the rule document from the repository, keeps the parsed rules in a
cache and evaluates them for page names and user groups.

Evaluation: rules are checked ascending by their order, the first rule
matching the page name decides, later rules are not consulted. If no rule
matches, everybody may read and write the page.

Caching: the parsed rules live in a single cache slot with an absolute
expiration (15 minutes by default). A missing rule document is cached as
"no rules". Parse errors and repository errors are not cached, they
propagate to the caller. Saving rules clears the cache after (and only if)
the commit succeeded.

Two concurrent cache misses may both load the rule document and both fill
the cache, which is harmless as they load the same content.
"""


from gitwiki.constants.misc import (
    CHARSET,
    DEFAULT_BRANCH,
    PERMISSIONS_FILE_NAME,
    RULES_CACHE_KEY,
    RULES_CACHE_TIMEOUT,
)
from gitwiki.security import FULL_ACCESS, PageAccessPermissions, groups_satisfy
from gitwiki.security.ruleserializer import parse_rules, serialize_rules
from gitwiki.storage import AddFile, UpdateFile
from gitwiki.storage.exceptions import NoSuchFileError
from gitwiki.user import commit_signature

from gitwiki import log

logging = log.getLogger(__name__)


class PageAccessControlService:
    """
    Page-level access control for one wiki repository.

    :param repository: an opened repository (see gitwiki.storage)
    :param cache: a cache with get(key), set(key, value, timeout=...) and
                  delete(key), e.g. a cachelib cache or a flask_caching.Cache
    :param enabled: if False, every user may read and write every page
    :param branch: branch the rule document is read from / committed to
    :param rules_file: path of the rule document in the repository
    :param cache_timeout: absolute expiration of the cached rules [s]
    """

    cache_key = RULES_CACHE_KEY

    def __init__(
        self,
        repository,
        cache,
        enabled=True,
        branch=DEFAULT_BRANCH,
        rules_file=PERMISSIONS_FILE_NAME,
        cache_timeout=RULES_CACHE_TIMEOUT,
    ):
        self.repository = repository
        self.cache = cache
        self.enabled = enabled
        self.branch = branch
        self.rules_file = rules_file
        self.cache_timeout = cache_timeout

    @classmethod
    def from_config(cls, cfg, repository, cache):
        return cls(
            repository,
            cache,
            enabled=cfg.acl_use_page_level_permissions,
            branch=cfg.branch_name,
            rules_file=cfg.acl_rules_file,
            cache_timeout=cfg.acl_cache_timeout,
        )

    def check_page_access(self, page_name, user_groups):
        """
        May a user in user_groups read / edit page_name?

        :param page_name: page name, e.g. "docs/intro"
        :param user_groups: the group names of the user (may be empty)
        :returns: PageAccessPermissions
        """
        if not self.enabled:
            return FULL_ACCESS
        for rule in self._get_rules():
            if rule.matches(page_name):
                return PageAccessPermissions(
                    can_read=groups_satisfy(user_groups, rule.read_groups),
                    can_edit=groups_satisfy(user_groups, rule.write_groups),
                    matched_pattern=rule.pattern,
                )
        return FULL_ACCESS

    def get_rules(self):
        """
        Return the rules currently in effect, ascending by order.

        Page-level permissions being disabled, there are no rules in effect.
        """
        if not self.enabled:
            return []
        return list(self._get_rules())

    def save_rules(self, rules, commit_message, author_name, author_email):
        """
        Commit rules as the new rule document and clear the cache.

        If the commit fails, the exception propagates and the cache is kept.
        """
        rules = list(rules)
        content = serialize_rules(rules).encode(CHARSET)
        if self.repository.file_exists(self.rules_file, self.branch):
            operation = UpdateFile(self.rules_file, content)
        else:
            operation = AddFile(self.rules_file, content)
        author = commit_signature(author_name, author_email)
        commit_id = self.repository.commit(self.branch, [operation], commit_message, author)
        logging.info(
            f"saved {len(rules)} access rules to {self.rules_file!r} on branch {self.branch!r} "
            f"as commit {commit_id} by {author.name!r}"
        )
        self.clear_cache()

    def clear_cache(self):
        """Forget the cached rules, the next check loads them again."""
        self.cache.delete(self.cache_key)

    def _get_rules(self):
        rules = self.cache.get(self.cache_key)
        if rules is not None:
            return rules
        logging.debug(f"access rules cache miss, loading {self.rules_file!r} from branch {self.branch!r}")
        rules = self._load_rules()
        self.cache.set(self.cache_key, rules, timeout=self.cache_timeout)
        return rules

    def _load_rules(self):
        try:
            data = self.repository.read_file(self.rules_file, self.branch)
        except NoSuchFileError:
            logging.debug(f"no rule document {self.rules_file!r} on branch {self.branch!r}, no rules in effect")
            return ()
        rules = parse_rules(data.decode(CHARSET))
        # stable sort, rules with equal order keep their document position
        return tuple(sorted(rules, key=lambda rule: rule.order))
