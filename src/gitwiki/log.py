# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
GitWiki - logging setup

Logging must be configured before the first call of log.getLogger does its
implicit configuration. The configuration source is, in this order:

a) the file named by the GITWIKILOGGINGCONF environment variable,
b) the file given to an explicit, early call of gitwiki.log.load_config(),
c) the builtin fallback configuration below (stderr, INFO).

If a) or b) can not be read or used, c) is used and a warning is logged.

Developers use it like this at the top of a module::

    from gitwiki import log
    logging = log.getLogger(__name__)
"""

import configparser
from io import StringIO
import os
import logging
import logging.config
import logging.handlers  # noqa, makes the handlers there usable from a logging.conf file
import warnings

ENV_NAME = "GITWIKILOGGINGCONF"

logging_config = """\
[DEFAULT]
# Default loglevel, to adjust verbosity: DEBUG, INFO, WARNING, ERROR, CRITICAL
loglevel=INFO

[loggers]
keys=root

[handlers]
keys=stderr

[formatters]
keys=default

[logger_root]
level=%(loglevel)s
handlers=stderr

[handler_stderr]
class=StreamHandler
level=NOTSET
formatter=default
args=(sys.stderr, )

[formatter_default]
format=%(asctime)s %(levelname)s %(name)s:%(lineno)d %(message)s
datefmt=
class=logging.Formatter
"""

configured = False


def _log_warning(message, category, filename, lineno, file=None, line=None):
    # warnings go to the logging system, msg tells where they really come from
    msg = f"{filename}:{lineno}: {category.__name__}: {message}"
    logger = getLogger(__name__)
    logger.warning(msg)


def load_config(conf_fname=None):
    """load logging config from conffile, fall back to the builtin config"""
    global configured
    err_msg = None
    conf_fname = os.environ.get(ENV_NAME, conf_fname)
    if conf_fname:
        try:
            conf_fname = os.path.abspath(conf_fname)
            # open it ourselves, fileConfig() silently ignores unreadable files
            with open(conf_fname) as f:
                logging.config.fileConfig(f, disable_existing_loggers=False)
            configured = True
            logger = getLogger(__name__)
            logger.debug(f'using logging configuration read from "{conf_fname}"')
            warnings.showwarning = _log_warning
        except (OSError, ValueError, KeyError, RuntimeError, configparser.Error) as err:
            err_msg = str(err)
    if not configured:
        with StringIO(logging_config) as f:
            logging.config.fileConfig(f, disable_existing_loggers=False)
        configured = True
        logger = getLogger(__name__)
        if err_msg:
            logger.warning(f'load_config for "{conf_fname}" failed with "{err_msg}".')
        logger.debug("using logging configuration read from built-in fallback in gitwiki.log module!")
        warnings.showwarning = _log_warning

    import gitwiki

    logger = getLogger(__name__)
    code_path = os.path.dirname(gitwiki.__file__)
    logger.debug(f"Running {gitwiki.project} {gitwiki.version} code from {code_path}")


def getLogger(name):
    """wrapper around logging.getLogger

    - configures logging if nobody did that yet
    - patches the loglevel constants into the logger object, so it can be
      used instead of the logging module
    """
    if not configured:
        load_config()
    logger = logging.getLogger(name)
    for levelnumber, levelname in logging._levelToName.items():
        setattr(logger, levelname, levelnumber)
    return logger
