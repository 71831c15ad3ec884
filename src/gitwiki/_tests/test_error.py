# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
    GitWiki - gitwiki.error Tests
"""


import pytest

from gitwiki import error


class TestMessage:
    """errors always have a str message"""

    def testStr(self):
        """error: create with str"""
        err = error.Error("Zugriff verweigert")
        assert str(err) == "Zugriff verweigert"
        assert err.message == "Zugriff verweigert"

    def testBytes(self):
        """error: create with utf-8 encoded bytes"""
        err = error.Error("Übersicht".encode())
        assert str(err) == "Übersicht"

    def testObject(self):
        """error: create with any object"""

        class Page:
            def __str__(self):
                return "docs/intro"

        err = error.Error(Page())
        assert str(err) == "docs/intro"

    def testAccessLikeDict(self):
        err = error.Error("branch moved")
        assert "%(message)s" % err == "branch moved"


class TestHierarchy:

    def testConfigurationError(self):
        """error: configuration errors are fatal wiki errors"""
        assert issubclass(error.ConfigurationError, error.FatalError)
        assert issubclass(error.FatalError, error.Error)
        with pytest.raises(error.Error) as excinfo:
            raise error.ConfigurationError("no branch configured")
        assert str(excinfo.value) == "no branch configured"
