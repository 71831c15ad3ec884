# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
GitWiki errors / exception classes.
"""


class Error(Exception):
    """Base class for GitWiki errors.

    The message may be given as str, as utf-8 encoded bytes or as any object
    supporting __str__, str(error) always returns a str.
    """

    def __init__(self, message):
        """Initialize an error, decode if needed

        :param message: str, bytes or object that supports __str__.
        """
        if isinstance(message, bytes):
            message = message.decode()
        if not isinstance(message, str):
            message = str(message)
        self.message = message
        super().__init__(message)

    def __str__(self):
        """Return the error message as str."""
        return self.message

    def __getitem__(self, item):
        """Make it possible to access attributes like a dict"""
        return getattr(self, item)


class FatalError(Error):
    """Base class for fatal errors we can't handle.

    Do not use this class directly; use its more specific subclasses.
    """


class ConfigurationError(FatalError):
    """Raised when a fatal misconfiguration is found."""
