#!/usr/bin/env python
#
"""The setup.py file."""

import os
import sys

from setuptools import find_packages, setup
from setuptools.command.install import install

VERSION = "0.1.0"

with open("README.md") as fh:
    LONG_DESCRIPTION = fh.read()


class VerifyVersionCommand(install):
    """Custom command to verify that the git tag matches our VERSION."""

    def run(self):
        tag = os.getenv("CIRCLE_TAG")
        if tag != VERSION:
            info = f"The git tag: '{tag}' does not match the package ver: '{VERSION}'"
            sys.exit(info)


setup(
    name="izone-local",
    description="An async client (and CLI) for the local API of iZone controllers.",
    keywords=["izone", "hvac", "air conditioning", "zoning"],
    install_requires=[val.strip() for val in open("requirements.txt") if val.strip()],
    extras_require={
        "tests": ["aiohttp<3.14", "aioresponses", "pytest", "pytest-asyncio"],
    },
    long_description=LONG_DESCRIPTION,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages("src", exclude=["tests", "docs"]),
    entry_points={
        "console_scripts": ["izone = izone_cli.client:main"],
    },
    version=VERSION,
    license="Apache 2",
    python_requires=">=3.12",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.12",
        "Topic :: Home Automation",
    ],
    cmdclass={
        "verify": VerifyVersionCommand,
    },
)
