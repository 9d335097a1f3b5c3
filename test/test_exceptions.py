"""Tests for the ``trigger_registry.exceptions`` module."""
from __future__ import annotations

from trigger_registry import exceptions


def test_invalid_argument():
    error = exceptions.InvalidArgument('Invalid token', 42)

    assert str(error) == 'Invalid token'
    assert error.value == 42
    assert isinstance(error, exceptions.RegistryError)
    assert isinstance(error, ValueError)


def test_not_found():
    error = exceptions.NotFound('No such triggers', token='#test 0')

    assert str(error) == 'No such triggers'
    assert error.token == '#test 0'
    assert error.scope is None
    assert isinstance(error, exceptions.RegistryError)
    assert isinstance(error, LookupError)


def test_not_found_scope():
    error = exceptions.NotFound('No triggers found', scope='#test')

    assert error.token is None
    assert error.scope == '#test'
