"""The ``[core]`` section: where files go and how logs are written."""
# Licensed under the Eiffel Forum License 2.
from __future__ import annotations

from trigger_registry.config.types import (
    ChoiceAttribute,
    FilenameAttribute,
    StaticSection,
    ValidatedAttribute,
)


LOGGING_LEVELS = ['CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG']
"""Valid values for :attr:`CoreSection.logging_level`."""


class CoreSection(StaticSection):
    """The config section used for configuring logging and runtime files."""

    @property
    def homedir(self):
        """The directory in which various files are stored at runtime.

        By default, this is the same directory as the config file. It cannot be
        changed at runtime.
        """
        return self._parent.homedir

    logdir = FilenameAttribute('logdir', directory=True, default='logs')
    """Directory in which to place logs.

    :default: ``logs``

    If the given value is not an absolute path, it will be interpreted relative
    to :attr:`homedir`.
    """

    logging_datefmt = ValidatedAttribute('logging_datefmt')
    """The format string to use for timestamps in logs.

    If not set, :mod:`logging` will use the Python default.
    """

    logging_format = ValidatedAttribute(
        'logging_format',
        default='[%(asctime)s] %(name)-30s %(levelname)-8s - %(message)s')
    """The logging format string to use for logs.

    :default: ``[%(asctime)s] %(name)-30s %(levelname)-8s - %(message)s``

    For example::

        [2024-03-02 10:12:44,272] trigger_registry.registry      INFO     - A trigger named "lag" has already been registered globally.

    """

    logging_level = ChoiceAttribute('logging_level', LOGGING_LEVELS, 'INFO')
    """The lowest severity of logs to display.

    :default: ``INFO``

    Valid values sorted by increasing verbosity: ``CRITICAL``, ``ERROR``,
    ``WARNING``, ``INFO``, ``DEBUG``.
    """
