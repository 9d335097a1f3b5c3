"""Trigger registry exceptions."""
# Licensed under the Eiffel Forum License 2.
from __future__ import annotations

from typing import Any


class RegistryError(Exception):
    """Base class for trigger registry related exceptions."""


class InvalidArgument(RegistryError, ValueError):
    """Exception raised when the registry is given a malformed value.

    :param message: a description of the problem
    :param value: the offending value

    This is raised for a scope that isn't a string, a token that cannot be
    parsed, or a trigger group that is empty or contains something other
    than trigger names.
    """
    def __init__(self, message: str, value: Any = None):
        self.value = value
        super().__init__(message)


class NotFound(RegistryError, LookupError):
    """Exception raised when a token or a scope doesn't resolve to anything.

    :param message: a description of what is missing
    :param token: the token that was looked up (optional)
    :param scope: the scope that was looked up (optional)
    """
    def __init__(
        self,
        message: str,
        token: str | None = None,
        scope: str | None = None,
    ):
        self.token = token
        self.scope = scope
        super().__init__(message)
