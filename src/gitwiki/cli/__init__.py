# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
GitWiki CLI - Extension Script Package
"""

import click

from flask.cli import FlaskGroup

from gitwiki.app import create_app
from gitwiki.cli.maint import acl

from gitwiki import log

logging = log.getLogger(__name__)


def Help():
    """GitWiki initial help"""
    print(
        """\
Quick help / most important commands overview:

  gitwiki acl-show          # Show the page access rules in effect

  gitwiki acl-check PAGE    # Check page access for some groups

  gitwiki acl-load FILE     # Commit a rule document

  gitwiki run               # Run the builtin web server

For more information please run:

  gitwiki --help

  gitwiki <subcommand> --help
"""
    )


@click.group(cls=FlaskGroup, create_app=create_app, invoke_without_command=True)
@click.pass_context
def cli(ctx):
    """GitWiki extensions to the Flask CLI"""
    logging.debug("invoked_subcommand: %s", ctx.invoked_subcommand)
    if ctx.invoked_subcommand is None:
        Help()


@cli.command("help", help="Quick help")
def _Help():
    Help()


cli.add_command(acl.AclShow)
cli.add_command(acl.AclCheck)
cli.add_command(acl.AclLoad)
cli.add_command(acl.AclClearCache)
