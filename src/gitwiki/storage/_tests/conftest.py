# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
GitWiki - repository test magic
"""

import pytest

REPOSITORIES_PACKAGE = "gitwiki.storage"

REPOSITORIES = "memory fs".split()


constructors = {
    "memory": lambda klass, _: klass(),
    "fs": lambda klass, tmp_path: klass(str(tmp_path / "repository")),
}


@pytest.fixture(params=REPOSITORIES)
def repository(request, tmp_path):
    module = pytest.importorskip(REPOSITORIES_PACKAGE + "." + request.param)
    repository = constructors[request.param](module.Repository, tmp_path)
    repository.create()
    repository.open()
    yield repository
    repository.close()
    repository.destroy()
