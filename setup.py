#!/usr/bin/env python3
# coding: utf-8

from setuptools import setup


setup(
    name='osrelease-info',
    version="0.1.0",
    python_requires=">= 3.12",
    description="Parser for the os-release file",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    license="GPLV2+",
    # coloredlogs and texttable are optional at runtime, but the command line
    # output is much nicer with them
    install_requires=["pyyaml", "coloredlogs", "texttable"],
    extras_require={"test": ["pytest"]},
    packages=['osrelease', "osrelease.cli"],
    entry_points={"console_scripts": ["osrelease-info = osrelease.__main__:run"]},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v2 or later (GPLv2+)",
        "Topic :: System :: Operating System",
    ],
)
