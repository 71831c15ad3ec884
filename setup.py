#!/usr/bin/env python
# Copyright: 2026 GitWiki project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

from setuptools import setup, find_packages


setup_args = dict(
    name="gitwiki",
    version="0.1.0",
    description="A git-backed wiki with page-level access control",
    license="GPL-2.0-or-later",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={
        "gitwiki": [
            "apps/admin/templates/admin/*.html",
            "_tests/*.conf",
        ],
    },
    install_requires=[
        "flask>=3.0",
        "flask-caching>=2.0",
        "cachelib>=0.10",
        "click>=8.0",
        "flatland>=0.9.1",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "gitwiki = gitwiki.cli:cli",
        ],
    },
)


if __name__ == '__main__':
    setup(**setup_args)
