#!/usr/bin/env python

from setuptools import find_packages, setup

with open("README.md", "r") as fh:  # description to be used in pypi project page
    long_description = fh.read()

install_requires = ["telethon", "typing_extensions", "aiofiles", "pyyaml", "pathvalidate"]

setup(
    name="tgdrive",
    version="1.0",
    description="Browse telegram chats as a read only drive",
    packages=find_packages(include=["tgdrive", "tgdrive.*"]),
    long_description=long_description,
    long_description_content_type="text/markdown",
    install_requires=install_requires,
    extras_require={"test": ["pytest", "pytest-asyncio"]},
    scripts=["cli.py"],
)
