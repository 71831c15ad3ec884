# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
GitWiki - page permission helper

Combines the wiki-wide rights of a user (may_view, may_edit) with the
page-level access rules of the PageAccessControlService.

The app keeps one as app.permissions, it is used by the access check view
and is the API for host applications deciding about page views and edits.
"""


class PagePermissionHelper:
    def __init__(self, service, allow_anonymous_viewing=False):
        """
        :param service: PageAccessControlService
        :param allow_anonymous_viewing: if True, viewing does not need the
                                        wiki-wide view right (nor a user)
        """
        self.service = service
        self.allow_anonymous_viewing = allow_anonymous_viewing

    @classmethod
    def from_config(cls, cfg, service):
        return cls(service, allow_anonymous_viewing=cfg.acl_allow_anonymous_viewing)

    def may_view(self, user, page_name):
        """
        May user (None: anonymous) view page_name?
        """
        if not self.allow_anonymous_viewing and (user is None or not user.may_view):
            return False
        if self.service.enabled:
            groups = user.groups if user is not None else ()
            if not self.service.check_page_access(page_name, groups).can_read:
                return False
        return True

    def may_edit(self, user, page_name):
        """
        May user (None: anonymous) edit page_name?

        Anonymous users never may edit.
        """
        if user is None or not user.may_edit:
            return False
        if self.service.enabled:
            if not self.service.check_page_access(page_name, user.groups).can_edit:
                return False
        return True

    def accessible_pages(self, user, page_names):
        """
        Return the page names (in given order) user may read according to page-level rules.
        """
        if not self.service.enabled:
            return list(page_names)
        groups = user.groups if user is not None else ()
        return [name for name in page_names if self.service.check_page_access(name, groups).can_read]
