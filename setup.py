#!/usr/bin/env python

import os
from setuptools import setup

def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


setup(
    name='graphdecl',
    version='0.1.0',
    description='Build GraphQL schemas from decorated resolver classes',
    long_description=read("README.rst"),
    packages=['graphdecl'],
    keywords="graphql schema resolvers decorators sdl",
    install_requires=[
        "graphql-core>=3.2,<3.3",
    ],
    extras_require={
        "testing": [
            "precisely>=0.1.9",
            "pytest",
            "pytest-asyncio",
        ],
    },
    entry_points={
        "console_scripts": [
            "graphdecl-emit-schema=graphdecl.cli:main",
        ],
    },
    python_requires=">=3.9",
    license="BSD-2-Clause",
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
