"""Logging configuration for the trigger registry.

The registry itself only ever uses :func:`logging.getLogger` and never
configures handlers: an application that doesn't call :func:`setup_logging`
keeps full control over where log records go.
"""
# Licensed under the Eiffel Forum License 2.
from __future__ import annotations

from logging.config import dictConfig
import os


def setup_logging(settings):
    """Set up logging based on the configuration ``settings``.

    :param settings: configuration settings object
    :type settings: :class:`trigger_registry.config.Config`

    This configures the ``trigger_registry`` logger with three handlers:

    * ``console``: output on stderr
    * ``logfile``: every record, in ``<basename>.trigger_registry.log``
    * ``errorfile``: only errors, in ``<basename>.error.log``

    Both files are rotated at midnight, and are stored in the
    :attr:`core.logdir <trigger_registry.config.core_section.CoreSection.logdir>`
    directory.
    """
    log_directory = settings.core.logdir
    base_level = settings.core.logging_level or 'WARNING'
    base_format = settings.core.logging_format
    base_datefmt = settings.core.logging_datefmt

    logging_config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'trigger_registry': {
                'format': base_format,
                'datefmt': base_datefmt,
            },
        },
        'loggers': {
            'trigger_registry': {
                'level': base_level,
                'handlers': ['console', 'logfile', 'errorfile'],
            },
        },
        'handlers': {
            # output on stderr
            'console': {
                'level': 'DEBUG',
                'class': 'logging.StreamHandler',
                'formatter': 'trigger_registry',
            },
            # generic purpose log file
            'logfile': {
                'level': 'DEBUG',
                'class': 'logging.handlers.TimedRotatingFileHandler',
                'filename': os.path.join(
                    log_directory,
                    settings.basename + '.trigger_registry.log'),
                'when': 'midnight',
                'formatter': 'trigger_registry',
            },
            # caught error log file
            'errorfile': {
                'level': 'ERROR',
                'class': 'logging.handlers.TimedRotatingFileHandler',
                'filename': os.path.join(
                    log_directory, settings.basename + '.error.log'),
                'when': 'midnight',
                'formatter': 'trigger_registry',
            },
        },
    }
    dictConfig(logging_config)
