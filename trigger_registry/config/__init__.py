"""The registry's configuration module.

The :class:`~trigger_registry.config.Config` object provides an interface to
access a configuration file. It exposes the configuration's sections through
its attributes as objects, which in turn expose their directives through
*their* attributes::

    >>> from trigger_registry import config
    >>> settings = config.Config('/home/bot/registry.cfg')
    >>> settings.core.logging_level
    'INFO'

The configuration file being:

.. code-block:: ini

    [core]
    logging_level = INFO

    [registry]
    casemapping = rfc1459
    validate_names = yes

A section is represented by a subclass of
:class:`~trigger_registry.config.types.StaticSection`. The ``[core]`` section
(:class:`~trigger_registry.config.core_section.CoreSection`) is added
automatically; the ``[registry]`` section is defined by
:meth:`TriggerRegistry.from_settings
<trigger_registry.registry.TriggerRegistry.from_settings>`.
"""
# Licensed under the Eiffel Forum License 2.
from __future__ import annotations

import configparser
import os

from . import core_section, types


__all__ = [
    'core_section',
    'types',
    'ConfigurationError',
    'ConfigurationNotFound',
    'Config',
]


class ConfigurationError(Exception):
    """Exception type for configuration errors.

    :param str value: a description of the error that has occurred
    """
    def __init__(self, value):
        super().__init__(value)
        self.value = value

    def __str__(self):
        return 'ConfigurationError: %s' % self.value


class ConfigurationNotFound(ConfigurationError):
    """Exception type for use when the configuration file cannot be found.

    :param str filename: file path that could not be found
    """
    def __init__(self, filename):
        super().__init__(None)
        self.filename = filename
        """Path to the configuration file that could not be found."""

    def __str__(self):
        return 'Unable to find the configuration file %s' % self.filename


class Config:
    """The registry's configuration.

    :param str filename: the configuration file to load and use to populate
                         this ``Config`` instance
    :param bool validate: if ``True``, validate values in the ``[core]``
                          section when it is loaded (optional; ``True`` by
                          default)
    :raise ConfigurationNotFound: if ``filename`` doesn't exist

    Only the ``[core]`` section (see :class:`~.core_section.CoreSection`) is
    made available by default. Other sections must be defined by the code
    that needs them, using :meth:`define_section`.
    """
    def __init__(self, filename, validate=True):
        if not os.path.isfile(filename):
            raise ConfigurationNotFound(filename)

        self.filename = filename
        """The config object's associated file."""
        basename, _ = os.path.splitext(os.path.basename(filename))
        self.basename = basename
        """The config's base filename, i.e. the filename without the extension.

        If the filename is ``libera.config.cfg``, then the ``basename`` will
        be ``libera.config``.
        """
        self.parser = configparser.RawConfigParser(allow_no_value=True)
        """The configuration parser object that does the heavy lifting."""
        self.parser.read(self.filename, encoding='utf-8')
        self.define_section('core', core_section.CoreSection,
                            validate=validate)

    @property
    def homedir(self):
        """The config file's home directory.

        If the ``core.homedir`` option is set, that value is used. Otherwise,
        the default ``homedir`` is the directory portion of :attr:`filename`.
        """
        configured = None
        if self.parser.has_option('core', 'homedir'):
            configured = self.parser.get('core', 'homedir')
        if configured:
            return configured
        return os.path.dirname(os.path.abspath(self.filename))

    def save(self):
        """Write all changes to the config file.

        .. note::

            Saving the config file will remove any comments that might have
            existed, as Python's :mod:`configparser` ignores them when parsing.

        """
        with open(self.filename, 'w', encoding='utf-8') as cfgfile:
            self.parser.write(cfgfile)

    def add_section(self, name):
        """Add a new, empty section to the config file.

        :param str name: name of the new section
        :return: ``None`` if successful; ``False`` if a section named ``name``
                 already exists
        """
        try:
            return self.parser.add_section(name)
        except configparser.DuplicateSectionError:
            return False

    def define_section(self, name, cls_, validate=True):
        """Define the available settings in a section.

        :param str name: name of the new section
        :param cls\\_: :term:`class` defining the settings within the section
        :type cls\\_: subclass of :class:`~.types.StaticSection`
        :param bool validate: whether to validate the section's values
                              (optional; defaults to ``True``)
        :raise ValueError: if the section ``name`` has been defined already with
                           a different ``cls_``

        If ``validate`` is ``True``, the section's values will be validated,
        and a :class:`ValueError` raised if they are invalid.
        """
        if not issubclass(cls_, types.StaticSection):
            raise ValueError('Class must be a subclass of StaticSection.')
        current = self.__dict__.get(name)
        if current is not None and not isinstance(current, cls_):
            raise ValueError(
                'Can not re-define class for section from {} to {}.'.format(
                    current.__class__, cls_)
            )
        setattr(self, name, cls_(self, name, validate=validate))

    def __getitem__(self, name):
        return getattr(self, name)

    def __contains__(self, name):
        return name in self.parser.sections()
