# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
GitWiki - admin views

This shows the user interface for viewing and editing the page access rules.
"""
from collections import namedtuple

from flask import request, url_for, flash, redirect, render_template, jsonify
from flask import Response
from flask import current_app as app
from flask import g as flaskg

from flatland import Form, String
from flatland.validation import Present

from gitwiki.apps.admin import admin
from gitwiki.constants.misc import DEFAULT_COMMIT_MESSAGE
from gitwiki.constants.rights import ADMIN
from gitwiki.security import require_permission
from gitwiki.security.ruleserializer import RuleFormatError, format_groups, parse_rules, serialize_rules
from gitwiki.storage.exceptions import StorageError

from gitwiki import log

logging = log.getLogger(__name__)


NOT_ENABLED_MSG = "Page-level permissions are not enabled."

RuleRow = namedtuple("RuleRow", ["pattern", "read_groups", "write_groups", "order"])


class AccessControlEditForm(Form):
    """
    Edit the rule document as text.
    """

    content = String.using(label="Rules").validated_by(Present())
    commit_message = String.using(label="Commit message", default=DEFAULT_COMMIT_MESSAGE).validated_by(Present())


@admin.route("/acl", methods=["GET"])
@require_permission(ADMIN)
def access_control():
    """
    Show the rules in effect, in evaluation order.
    """
    rules = [
        RuleRow(rule.pattern, format_groups(rule.read_groups), format_groups(rule.write_groups), rule.order)
        for rule in app.acl.get_rules()
    ]
    return render_template(
        "admin/access_control.html", title_name="Page Access Control", rules=rules, is_enabled=app.acl.enabled
    )


@admin.route("/acl/edit", methods=["GET", "POST"])
@require_permission(ADMIN)
def access_control_edit():
    """
    Edit and commit the rule document.
    """
    if not app.acl.enabled:
        return Response(NOT_ENABLED_MSG, 400)

    title_name = "Edit Page Access Control"
    FormClass = AccessControlEditForm

    if request.method in ["GET", "HEAD"]:
        rules = app.acl.get_rules()
        form = FormClass.from_defaults()
        form["content"].set(serialize_rules(rules, include_examples=not rules))
    elif request.method == "POST":
        form = FormClass.from_flat(request.form)
        if form.validate():
            content = form["content"].value
            commit_message = form["commit_message"].value
            author = flaskg.user.user
            try:
                rules = parse_rules(content)
                app.acl.save_rules(rules, commit_message, author.git_name, author.git_email)
            except (RuleFormatError, StorageError) as err:
                logging.info(f"saving access control rules failed: {err}")
                flash(f"Error saving rules: {err}", "error")
            else:
                flash(f"{len(rules)} access control rules saved.", "info")
                return redirect(url_for("admin.access_control"))

    return render_template("admin/access_control_edit.html", title_name=title_name, form=form)


@admin.route("/acl/check", methods=["GET"])
def access_control_check():
    """
    Show the permissions of the current user for ?page=<page name>, as JSON.

    can_read / can_edit only consider the page-level rules, may_view / may_edit
    also consider the wiki-wide rights of the user.
    """
    page_name = request.args.get("page")
    if not page_name:
        return Response("Missing page parameter.", 400)
    user = flaskg.user
    groups = user.groups if user is not None else ()
    result = app.acl.check_page_access(page_name, groups)
    return jsonify(
        page=page_name,
        can_read=result.can_read,
        can_edit=result.can_edit,
        matched_pattern=result.matched_pattern,
        may_view=app.permissions.may_view(user, page_name),
        may_edit=app.permissions.may_edit(user, page_name),
    )
