# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
GitWiki CLI - page access rules

Show, check and commit the rule document of the configured repository.
"""


import sys

import click
from flask import current_app as app
from flask.cli import FlaskGroup

from gitwiki.app import create_app
from gitwiki.constants.misc import CHARSET, DEFAULT_COMMIT_MESSAGE
from gitwiki.security.ruleserializer import RuleFormatError, parse_rules, serialize_rules
from gitwiki.storage.exceptions import StorageError
from gitwiki.user import generate_unique_git_email

from gitwiki import log

logging = log.getLogger(__name__)

# flask-caching backends that are not shared between processes
PROCESS_LOCAL_CACHE_TYPES = {"SimpleCache", "simple", "NullCache", "null"}


@click.group(cls=FlaskGroup, create_app=create_app)
def cli():
    pass


@cli.command("acl-show", help="Show the page access rules in effect")
def AclShow():
    if not app.acl.enabled:
        print("# page-level permissions are disabled, every user may read and write every page.")
    print(serialize_rules(app.acl.get_rules()), end="")


@cli.command("acl-check", help="Check the access to a page for a user in some groups")
@click.argument("page")
@click.option("--group", "-g", "groups", multiple=True, help="Group the user is member of, may be repeated.")
def AclCheck(page, groups):
    result = app.acl.check_page_access(page, groups)
    print(f"page:    {page}")
    print(f"read:    {'yes' if result.can_read else 'no'}")
    print(f"edit:    {'yes' if result.can_edit else 'no'}")
    print(f"matched: {result.matched_pattern if result.matched_pattern is not None else '(no rule)'}")


@cli.command("acl-load", help="Commit a rule document file as the page access rules")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--message", "-m", default=DEFAULT_COMMIT_MESSAGE, help="Commit message.")
@click.option("--author-name", default="GitWiki CLI", help="Commit author name.")
@click.option("--author-email", default=None, help="Commit author email, default: a generated address.")
def AclLoad(file, message, author_name, author_email):
    logging.info(f"loading access rules from {file!r}")
    with open(file, encoding=CHARSET) as f:
        content = f.read()
    try:
        rules = parse_rules(content)
    except RuleFormatError as err:
        sys.exit(f"Error: {err}")
    if author_email is None:
        author_email = generate_unique_git_email()
    try:
        app.acl.save_rules(rules, message, author_name, author_email)
    except StorageError as err:
        sys.exit(f"Error: {err}")
    print(f"{len(rules)} access rules saved.")


@cli.command("acl-clear-cache", help="Forget the cached page access rules")
def AclClearCache():
    if app.config["CACHE_TYPE"] in PROCESS_LOCAL_CACHE_TYPES:
        print(
            f"Note: CACHE_TYPE {app.config['CACHE_TYPE']!r} is local to this process, running wiki processes "
            "keep their cached rules until they expire. Configure a shared CACHE_TYPE to clear them from here."
        )
    app.acl.clear_cache()
    logging.info("access rules cache cleared")
