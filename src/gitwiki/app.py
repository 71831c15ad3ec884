# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
GitWiki - WSGI application setup and related code.

Use create_app(config) to create the WSGI application (using Flask).
"""

from __future__ import annotations

from os import path, PathLike
from flask import Flask
from flask import current_app as app
from flask import g as flaskg

from flask_caching import Cache

from gitwiki.security.permissions import PagePermissionHelper
from gitwiki.security.service import PageAccessControlService
from gitwiki.storage import create_repository

from gitwiki import log

from typing import Any

logging = log.getLogger(__name__)


def create_app(config: str | PathLike[str] | None = None) -> Flask:
    """
    Simple wrapper around create_app_ext().
    """
    return create_app_ext(flask_config_file=config)


def create_app_ext(
    flask_config_file: str | PathLike[str] | None = None,
    flask_config_dict: dict[str, Any] | None = None,
    wiki_config_class: type | None = None,
    warn_default: bool = True,
    **kwargs,
) -> Flask:
    """
    Factory for GitWiki WSGI apps.

    :param flask_config_file: A Flask config file name (may define a GITWIKICFG class).
                              If not given, a config pointed to by the GITWIKICFG env var
                              or a wikiconfig.py in the current directory will be loaded
                              (if possible).
    :param flask_config_dict: A dict used to update the Flask config (applied after
                              flask_config_file was loaded, if given).
    :param wiki_config_class: If given, this class is instantiated as app.cfg;
                              otherwise, GITWIKICFG from the Flask config is used. If that
                              is also not present, the built-in DefaultConfig will be used.
    :param warn_default: Emit a warning if we fall back to the built-in default config.
    :param kwargs: Additional keyword args override settings of the wiki configuration
                   class (in a subclass, the given class is not modified).
    """
    logging.debug("running create_app_ext")
    app = Flask("gitwiki")

    if flask_config_file:
        app.config.from_pyfile(path.abspath(flask_config_file))
    elif not app.config.from_envvar("GITWIKICFG", silent=True):
        # no GITWIKICFG env variable set, try stuff in cwd:
        flask_config_file = path.abspath("wikiconfig.py")
        if path.exists(flask_config_file):
            app.config.from_pyfile(flask_config_file)
    if flask_config_dict:
        app.config.update(flask_config_dict)
    Config = wiki_config_class
    if not Config:
        Config = app.config.get("GITWIKICFG")
    if not Config:
        if warn_default:
            logging.warning("using builtin default configuration")
        from gitwiki.config.default import DefaultConfig as Config
    if kwargs:
        Config = type(Config.__name__, (Config,), dict(kwargs))
    app.cfg = Config()

    app.before_request(before_wiki)
    app.teardown_request(teardown_wiki)
    from gitwiki.apps.admin import admin

    app.register_blueprint(admin, url_prefix="/+admin")

    # 'SimpleCache' caching uses a dict, one cache per process. Processes sharing the
    # rules cache (e.g. the server and the cli) need a shared CACHE_TYPE in the Flask
    # config, e.g. FileSystemCache (with CACHE_DIR) or RedisCache.
    app.config.setdefault("CACHE_TYPE", "SimpleCache")
    cache = Cache()
    cache.init_app(app)
    app.cache = cache

    init_backends(app)
    return app


def destroy_app(app):
    deinit_backends(app)


def init_backends(app, create_repository_now=False):
    """
    initialize the repository and the access control on top of it
    """
    logging.debug("running init_backends")
    app.repository = create_repository(app.cfg.storage_uri)
    if create_repository_now or app.cfg.create_repository:
        app.repository.create()
    app.repository.open()
    app.acl = PageAccessControlService.from_config(app.cfg, app.repository, app.cache)
    app.permissions = PagePermissionHelper.from_config(app.cfg, app.acl)


def deinit_backends(app):
    app.repository.close()
    if app.cfg.destroy_repository:
        app.repository.destroy()


def before_wiki():
    """
    Setup environment for wiki requests.
    """
    logging.debug("running before_wiki")
    flaskg.user = app.cfg.user_loader()
    flaskg.acl = app.acl


def teardown_wiki(response):
    """
    Teardown environment of wiki requests.
    """
    logging.debug("running teardown_wiki")
    flaskg.pop("user", None)
    flaskg.pop("acl", None)
    return response
