# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
    GitWiki - some common code for testing
"""


from gitwiki.security import AccessRule
from gitwiki.security.ruleserializer import serialize_rules
from gitwiki.storage import AddFile, UpdateFile
from gitwiki.user import WikiUser, WikiUserWithPermissions, commit_signature


def make_user(name="TestUser", groups=(), may_view=True, may_edit=True, may_admin=False, may_remote_git=False):
    """create a WikiUserWithPermissions for tests"""
    return WikiUserWithPermissions(
        user=WikiUser(git_name=name, git_email=f"{name.lower()}@example.org"),
        groups=groups,
        may_view=may_view,
        may_edit=may_edit,
        may_admin=may_admin,
        may_remote_git=may_remote_git,
    )


def put_file(repository, path, content, branch="main", message="test commit"):
    """creates or updates a file in repository, bypassing the access control service"""
    if isinstance(content, str):
        content = content.encode()
    exists = repository.file_exists(path, branch)
    operation = UpdateFile(path, content) if exists else AddFile(path, content)
    author = commit_signature("Tester", "tester@example.org")
    return repository.commit(branch, [operation], message, author)


def put_rules(repository, rules, path=".wikipermissions", branch="main"):
    """
    write a rule document into repository

    :param rules: list of (pattern, read_groups, write_groups) tuples or a str (document text)
    """
    if isinstance(rules, str):
        content = rules
    else:
        content = serialize_rules([AccessRule(*rule, order=order) for order, rule in enumerate(rules)])
    return put_file(repository, path, content, branch=branch)
