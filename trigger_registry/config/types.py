"""Types for creating section definitions.

A section definition consists of a subclass of :class:`StaticSection`, on which
any number of subclasses of :class:`BaseValidated` are assigned as attributes.
These descriptors define how to read values from, and write values to, the
config file.

For example, the ``[registry]`` section could be declared with a single
``casemapping`` option like this:

    >>> class RegistrySection(StaticSection):
    ...     casemapping = ChoiceAttribute(
    ...         'casemapping', ['ascii', 'rfc1459'], default='ascii')
    ...
    >>> config.define_section('registry', RegistrySection)
    >>> config.registry.casemapping
    'ascii'
    >>> config.registry.casemapping = 'utf-8'
    Traceback (most recent call last):
        ...
    ValueError: Value must be in ['ascii', 'rfc1459']

Any option can be overridden by an environment variable named after its
section and its name: ``TRIGGER_REGISTRY_REGISTRY_CASEMAPPING`` for the
example above.
"""
# Licensed under the Eiffel Forum License 2.
from __future__ import annotations

import os

from typing_extensions import override


ENV_PREFIX = 'TRIGGER_REGISTRY'


class NO_DEFAULT:
    """A special value to indicate that there should be no default."""


class StaticSection:
    """A configuration section with parsed and validated settings.

    This class is intended to be subclassed and customized with added
    attributes containing :class:`BaseValidated`-based objects.
    """
    def __init__(self, config, section_name, validate=True):
        if not config.parser.has_section(section_name):
            config.parser.add_section(section_name)
        self._parent = config
        self._parser = config.parser
        self._section_name = section_name
        for value in dir(self):
            if value.startswith('_'):
                continue
            try:
                getattr(self, value)
            except ValueError as e:
                raise ValueError(
                    'Invalid value for {}.{}: {}'.format(
                        section_name, value, str(e))
                )
            except AttributeError:
                if validate:
                    raise ValueError(
                        'Missing required value for {}.{}'.format(
                            section_name, value)
                    )


class BaseValidated:
    """The base type for a setting descriptor in a :class:`StaticSection`.

    :param str name: the attribute name to use in the config file
    :param default: the value to be returned if the setting has no value
                    (optional; defaults to :obj:`None`)

    ``default`` also can be set to :const:`NO_DEFAULT`, if the value *must* be
    configured by the user. Trying to read an empty ``NO_DEFAULT`` value will
    raise :class:`AttributeError`.
    """
    def __init__(self, name, default=None):
        self.name = name
        self.default = default

    def serialize(self, value):
        """Take some object, and return the string to be saved to the file.

        Must be implemented in subclasses.
        """
        raise NotImplementedError(
            'Serialize method must be implemented in subclass')

    def parse(self, value):
        """Take a string from the file, and return the appropriate object.

        Must be implemented in subclasses.
        """
        raise NotImplementedError(
            'Parse method must be implemented in subclass')

    def _read(self, instance):
        """Read the raw value, or ``None`` if not set anywhere."""
        env_name = '%s_%s_%s' % (
            ENV_PREFIX,
            instance._section_name.upper(),
            self.name.upper(),
        )
        if env_name in os.environ:
            return os.environ.get(env_name)
        if instance._parser.has_option(instance._section_name, self.name):
            return instance._parser.get(instance._section_name, self.name)
        return None

    def _missing(self, instance):
        return AttributeError(
            'Missing required value for {}.{}'.format(
                instance._section_name, self.name))

    def __get__(self, instance, owner=None):
        if instance is None:
            # access from the section class returns the descriptor itself
            return self

        value = self._read(instance)
        if value is None:
            if self.default is not NO_DEFAULT:
                return self.default
            raise self._missing(instance)
        return self.parse(value)

    def __set__(self, instance, value):
        if value is None:
            if self.default is NO_DEFAULT:
                raise ValueError(
                    'Cannot unset an option with a required value.')
            instance._parser.remove_option(instance._section_name, self.name)
            return
        value = self.serialize(value)
        instance._parser.set(instance._section_name, self.name, value)

    def __delete__(self, instance):
        instance._parser.remove_option(instance._section_name, self.name)


def _parse_boolean(value):
    if value is True or value == 1:
        return value
    if isinstance(value, str):
        return value.lower() in ['1', 'yes', 'y', 'true', 'on']
    return bool(value)


def _serialize_boolean(value):
    return 'true' if _parse_boolean(value) else 'false'


class ValidatedAttribute(BaseValidated):
    """A descriptor for settings in a :class:`StaticSection`.

    :param str name: the attribute name to use in the config file
    :param parse: a function to be used to read the string and create the
                  appropriate object (optional; the string value will be
                  returned as-is if not set)
    :type parse: :term:`function`
    :param serialize: a function that, given an object, should return a string
                      that can be written to the config file safely (optional;
                      defaults to :class:`str`)
    :type serialize: :term:`function`
    """
    def __init__(self, name, parse=None, serialize=None, default=None):
        super().__init__(name, default=default)
        if parse == bool:
            parse = _parse_boolean
            if not serialize or serialize == bool:
                serialize = _serialize_boolean
        self.parse = parse or self.parse
        self.serialize = serialize or self.serialize

    @override
    def serialize(self, value):
        """Return the ``value`` as a string.

        :param value: the option value
        :rtype: str
        """
        return str(value)

    @override
    def parse(self, value):
        """No-op: simply returns the given ``value``, unchanged.

        :param str value: the string read from the config file
        :rtype: str
        """
        return value


class BooleanAttribute(BaseValidated):
    """A descriptor for Boolean settings in a :class:`StaticSection`.

    :param str name: the attribute name to use in the config file
    :param bool default: the default value to use if this setting is not
                         present in the config file (optional; defaults to
                         ``False``)

    Unlike :class:`ValidatedAttribute` with ``parse=bool``, this type always
    returns a real :class:`bool`.
    """
    def __init__(self, name, default=False):
        super().__init__(name, default=default)

    @override
    def parse(self, value):
        """Parse a limited set of values/objects into Boolean representations.

        :param value: the value to parse

        The literal values ``True`` or ``1`` will be parsed as ``True``. The
        strings ``1``, ``on``, ``true``, ``y``, and ``yes`` (in any case) are
        also ``True``. Anything else is ``False``.
        """
        return bool(_parse_boolean(value))

    @override
    def serialize(self, value):
        """Convert a Boolean value to a string for saving to the config file.

        :param bool value: the value to serialize
        """
        return _serialize_boolean(value)


class ChoiceAttribute(BaseValidated):
    """A config attribute which must be one of a set group of options.

    :param str name: the attribute name to use in the config file
    :param choices: acceptable values; only strings are supported
    :type choices: list or tuple
    :param default: which choice to use if none is set in the config file; to
                    require explicit configuration, use :const:`NO_DEFAULT`
                    (optional)
    :type default: str
    """
    def __init__(self, name, choices, default=None):
        super().__init__(name, default=default)
        self.choices = choices

    @override
    def parse(self, value):
        """Check the loaded ``value`` against the valid ``choices``.

        :param str value: the value loaded from the config file
        :return: the ``value``, if it is valid
        :rtype: str
        :raise ValueError: if ``value`` is not one of the valid ``choices``
        """
        if value in self.choices:
            return value
        raise ValueError('Value must be in {}'.format(self.choices))

    @override
    def serialize(self, value):
        """Make sure ``value`` is valid and safe to write in the config file.

        :param str value: the value needing to be saved
        :return: the ``value``, if it is valid
        :rtype: str
        :raise ValueError: if ``value`` is not one of the valid ``choices``
        """
        if value in self.choices:
            return value
        raise ValueError('Value must be in {}'.format(self.choices))


class FilenameAttribute(BaseValidated):
    """A config attribute which must be a file or directory.

    :param str name: the attribute name to use in the config file
    :param relative: whether the path should be relative to the location of
                     the config file (optional; note that absolute paths will
                     always be interpreted as absolute)
    :type relative: bool
    :param directory: whether the path should indicate a directory, rather
                      than a file (optional)
    :type directory: bool
    :param default: the value to use if none is defined in the config file; to
                    require explicit configuration, use :const:`NO_DEFAULT`
                    (optional)
    :type default: str

    The directory or file is created when missing.
    """
    def __init__(self, name, relative=True, directory=False, default=None):
        super().__init__(name, default=default)
        self.relative = relative
        self.directory = directory

    @override
    def __get__(self, instance, owner=None):
        if instance is None:
            return self

        value = self._read(instance)
        if value is None:
            if self.default is NO_DEFAULT:
                raise self._missing(instance)
            value = self.default
        return self.parse(value, instance._parent)

    @override
    def __set__(self, instance, value):
        value = self.serialize(value, instance._parent)
        instance._parser.set(instance._section_name, self.name, value)

    @override
    def parse(self, value, main_config=None):
        """Used to validate ``value`` when loading the config.

        :param main_config: the config object which contains this attribute
        :type main_config: :class:`~trigger_registry.config.Config`
        :return: the absolute path of ``value``, if it is valid
        :rtype: str
        :raise ValueError: if the ``value`` is not valid
        """
        if value is None:
            return None

        value = os.path.expanduser(value)

        if not os.path.isabs(value):
            if not self.relative or main_config is None:
                raise ValueError('Value must be an absolute path.')
            value = os.path.join(main_config.homedir, value)

        if self.directory and not os.path.isdir(value):
            try:
                os.makedirs(value)
            except OSError:
                raise ValueError(
                    'Value must be an existing or creatable directory.')
        if not self.directory and not os.path.isfile(value):
            try:
                open(value, 'w').close()
            except OSError:
                raise ValueError(
                    'Value must be an existing or creatable file.')
        return value

    @override
    def serialize(self, value, main_config=None):
        """Used to validate ``value`` when it is changed at runtime.

        :param main_config: the config object which contains this attribute
        :type main_config: :class:`~trigger_registry.config.Config`
        :return: the ``value``, if it is valid
        :rtype: str
        :raise ValueError: if the ``value`` is not valid
        """
        self.parse(value, main_config)
        return value  # So that it's still relative
