# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
    GitWiki - admin views package

    This package contains the views and templates for the access control administration.
"""


from flask import Blueprint

admin = Blueprint("admin", __name__, template_folder="templates")
import gitwiki.apps.admin.views  # noqa
