"""Casemapping functions to compare trigger names.

Triggers are command names that users type on IRC, and the registry
compares them without regard to case: ``lag``, ``Lag`` and ``LAG`` are the
same trigger. What "without regard to case" means depends on the rules
followed by the IRC server, as defined by the `CASEMAPPING parameter`__:

* ``ascii``: only ``[A-Z]`` must be mapped to ``[a-z]`` (implemented by
  :func:`ascii_lower`); this is the registry's default
* ``rfc1459``: follow :rfc:`2812`, which also maps ``[]\\~`` to ``{}|^``
  (implemented by :func:`rfc1459_lower`)
* ``rfc1459-strict``: follow :rfc:`1459`, without the ``~`` to ``^``
  mapping (implemented by :func:`rfc1459_strict_lower`)

.. __: https://modern.ircdocs.horse/index.html#casemapping-parameter
"""
# Licensed under the Eiffel Forum License 2.
from __future__ import annotations

import string
from typing import Callable

Casemapping = Callable[[str], str]

ASCII_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
RFC1459_TABLE = str.maketrans(
    string.ascii_uppercase + '[]\\~',
    string.ascii_lowercase + '{}|^',
)
RFC1459_STRICT_TABLE = str.maketrans(
    string.ascii_uppercase + '[]\\',
    string.ascii_lowercase + '{}|',
)


def ascii_lower(text: str) -> str:
    """Lower ``text`` according to the ``ascii`` value of ``CASEMAPPING``.

    Only ``[A-Z]`` are mapped to their lowercase equivalent (``[a-z]``).
    Non-ASCII characters are kept unmodified.
    """
    return text.translate(ASCII_TABLE)


def rfc1459_lower(text: str) -> str:
    """Lower ``text`` according to :rfc:`2812`.

    Similar to :func:`rfc1459_strict_lower`, but also maps ``~`` to ``^``.
    """
    return text.translate(RFC1459_TABLE)


def rfc1459_strict_lower(text: str) -> str:
    """Lower ``text`` according to :rfc:`1459` (strict version)."""
    return text.translate(RFC1459_STRICT_TABLE)


CASEMAPPINGS: dict[str, Casemapping] = {
    'ascii': ascii_lower,
    'rfc1459': rfc1459_lower,
    'rfc1459-strict': rfc1459_strict_lower,
}
"""Casemapping functions by their ``CASEMAPPING`` name."""


def get_casemapping(name: str) -> Casemapping:
    """Get the casemapping function for the ``CASEMAPPING`` value ``name``.

    :param name: one of ``ascii``, ``rfc1459``, or ``rfc1459-strict``
    :raise ValueError: when ``name`` is not a known casemapping
    """
    try:
        return CASEMAPPINGS[name.lower()]
    except KeyError:
        raise ValueError('Unknown casemapping: %r' % name)
