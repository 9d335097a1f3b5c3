"""
A registry of IRC bot triggers, reserved globally or per channel.

It lets independent plugins claim command names without stepping on each
other's toes.
"""
#
# Licensed under the Eiffel Forum License 2.

from __future__ import annotations

import importlib.metadata

from .exceptions import InvalidArgument, NotFound, RegistryError
from .registry import MATCH_ANY, Token, TriggerRegistry


__all__ = [
    'config',
    'exceptions',
    'logger',
    'registry',
    'tools',
    'InvalidArgument',
    'MATCH_ANY',
    'NotFound',
    'RegistryError',
    'Token',
    'TriggerRegistry',
]

__version__ = importlib.metadata.version('trigger-registry')
