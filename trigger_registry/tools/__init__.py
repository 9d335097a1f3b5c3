"""Useful miscellaneous tools and shortcuts for trigger registry users."""
# Licensed under the Eiffel Forum License 2.
from __future__ import annotations

import logging

from .identifiers import (  # NOQA
    ascii_lower,
    get_casemapping,
    rfc1459_lower,
    rfc1459_strict_lower,
)


def get_logger(plugin_name):
    """Return a logger for a plugin.

    :param str plugin_name: name of the plugin
    :return: the logger for the given plugin

    This::

        from trigger_registry import tools
        LOGGER = tools.get_logger('my_custom_plugin')

    is equivalent to this::

        import logging
        LOGGER = logging.getLogger('trigger_registry.externals.my_custom_plugin')

    :func:`~trigger_registry.logger.setup_logging` configures logging for the
    ``trigger_registry`` namespace only, so external plugins using
    ``logging.getLogger(__name__)`` won't benefit from it. This function puts
    the ``plugin_name`` inside that namespace.
    """
    return logging.getLogger('trigger_registry.externals.%s' % plugin_name)
