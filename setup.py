#!/usr/bin/env python
from __future__ import annotations

import sys

try:
    from setuptools import setup
except ImportError:
    print(
        'You do not have setuptools, and can not install trigger-registry. '
        'The easiest way to fix this is to install pip by following the '
        'instructions at https://pip.readthedocs.io/en/latest/installing/',
        file=sys.stderr,
    )
    sys.exit(1)

# We check Python's version ourselves in case someone installed it on an
# old version of pip (<9.0.0), which doesn't know about `python_requires`.
if sys.version_info < (3, 8):
    raise ImportError('trigger-registry requires Python 3.8+.')


def read_reqs(path):
    with open(path, 'r') as fil:
        return [line.strip() for line in fil if line.strip()]


requires = read_reqs('requirements.txt')
dev_requires = requires + read_reqs('dev-requirements.txt')

setup(
    install_requires=requires, extras_require={"dev": dev_requires},
)
