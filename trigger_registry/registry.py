"""Registry of triggers reserved by bot plugins.

Here, a trigger simply means a command that the bot recognizes and reacts to
(e.g. ``!lag``). The registry prevents conflicts between plugins by ensuring
no two plugins use the same trigger at the same time, either globally or in
one channel.

A plugin registers its triggers when it needs them (e.g. at the beginning of
a game) and frees them when it's done (e.g. at the end of the game)::

    >>> from trigger_registry import registry
    >>> triggers = registry.TriggerRegistry()
    >>> token = triggers.register(['start', 'stop'], '#games')
    >>> token
    '#games 0'
    >>> triggers.register('START', '#games') is None
    True
    >>> triggers.free(token)

Triggers registered for :data:`MATCH_ANY` are reserved in every channel.

Triggers should only contain alphanumeric characters, without spaces or
prefixes (e.g. ``!``). This is only enforced when the registry is created
with ``validate_names=True``.
"""
# Licensed under the Eiffel Forum License 2.
from __future__ import annotations

from collections.abc import Sequence
import logging
import re
import threading
from typing import NamedTuple, Union

from trigger_registry.config import types
from trigger_registry.exceptions import InvalidArgument, NotFound
from trigger_registry.tools.identifiers import (
    ascii_lower,
    Casemapping,
    CASEMAPPINGS,
    get_casemapping,
)


__all__ = [
    'MATCH_ANY',
    'RegistrySection',
    'Token',
    'TriggerRegistry',
]

LOGGER = logging.getLogger(__name__)

MATCH_ANY = '*'
"""Scope used to register triggers globally rather than for one channel."""

TRIGGER_NAME_PATTERN = re.compile(r'[A-Za-z0-9]+')
"""Valid trigger names, when names are validated."""

TOKEN_INDEX_PATTERN = re.compile(r'[0-9]+')

TriggerGroup = tuple
"""Trigger names registered together: ``str`` items or nested groups."""

TriggersInput = Union[str, Sequence]


class RegistrySection(types.StaticSection):
    """The ``[registry]`` config section."""

    casemapping = types.ChoiceAttribute(
        'casemapping', list(CASEMAPPINGS), default='ascii')
    """How to compare trigger names case-insensitively.

    :default: ``ascii``

    One of ``ascii``, ``rfc1459``, or ``rfc1459-strict``; see
    :mod:`trigger_registry.tools.identifiers`.
    """

    validate_names = types.BooleanAttribute('validate_names', default=False)
    """Reject trigger names that are not only made of letters and digits.

    :default: ``False``
    """


class Token(NamedTuple):
    """The location of a trigger group in the registry.

    Outside of the registry, a token is an opaque string such as
    ``'#channel 3'``: the scope and the index of the group in that scope,
    separated by a space. Use :meth:`parse` to get a ``Token`` from such a
    string, and :class:`str` to get the string back.
    """
    scope: str
    index: int

    @classmethod
    def parse(cls, value) -> 'Token':
        """Parse a token string.

        :param value: the token string, as returned by
                      :meth:`TriggerRegistry.register`
        :raise InvalidArgument: when ``value`` is not a string, or doesn't
                                contain a space
        :raise NotFound: when the index part isn't a number, as no group can
                         ever be found there
        """
        if not isinstance(value, str) or ' ' not in value:
            raise InvalidArgument('Invalid token', value)

        scope, _, index = value.partition(' ')
        if not TOKEN_INDEX_PATTERN.fullmatch(index):
            raise NotFound('No such triggers', token=value, scope=scope)

        return cls(scope, int(index))

    def __str__(self):
        return '%s %d' % (self.scope, self.index)


def _flatten(triggers):
    for trigger in triggers:
        if isinstance(trigger, str):
            yield trigger
        else:
            yield from _flatten(trigger)


def _freeze(triggers):
    result = []
    for trigger in triggers:
        if isinstance(trigger, str):
            result.append(trigger)
        elif isinstance(trigger, Sequence) and not isinstance(
                trigger, (bytes, bytearray)):
            result.append(_freeze(trigger))
        else:
            raise InvalidArgument(
                'Invalid trigger: %r' % (trigger,), trigger)
    return tuple(result)


class TriggerRegistry:
    """Registry of triggers, per channel or global.

    :param casemapping: function used to compare trigger names (optional;
                        defaults to :func:`~.identifiers.ascii_lower`)
    :param validate_names: if ``True``, only accept alphanumeric trigger
                           names (optional; ``False`` by default)
    :param logger: where to log registration conflicts (optional; defaults
                   to this module's logger)

    The registry is safe to use from several threads: every operation holds
    the registry's lock for its whole duration.
    """
    def __init__(
        self,
        casemapping: Casemapping = ascii_lower,
        validate_names: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.casemapping = casemapping
        self.validate_names = validate_names
        self.logger = logger or LOGGER
        self._lock = threading.Lock()
        self._triggers: dict[str, list[TriggerGroup | None]] = {}
        self.reset()

    @classmethod
    def from_settings(cls, settings, logger=None) -> 'TriggerRegistry':
        """Create a registry configured by the ``[registry]`` section.

        :param settings: configuration settings object
        :type settings: :class:`trigger_registry.config.Config`
        :param logger: where to log registration conflicts (optional)
        :raise ValueError: when the ``[registry]`` section is invalid
        """
        settings.define_section('registry', RegistrySection)
        section = settings.registry
        return cls(
            casemapping=get_casemapping(section.casemapping),
            validate_names=section.validate_names,
            logger=logger,
        )

    def reset(self) -> None:
        """Forget every registered trigger.

        Only the global scope (:data:`MATCH_ANY`) remains, with no trigger.
        Tokens returned before the reset must not be used anymore.
        """
        with self._lock:
            self._triggers = {MATCH_ANY: []}

    def _contains(self, groups, trigger: str) -> bool:
        lowered = self.casemapping(trigger)
        return any(
            self.casemapping(registered) == lowered
            for group in groups
            if group is not None
            for registered in _flatten(group)
        )

    def _check_names(self, group: TriggerGroup) -> None:
        names = list(_flatten(group))
        if not names:
            raise InvalidArgument('No trigger to register', group)
        if not self.validate_names:
            return
        for name in names:
            if not TRIGGER_NAME_PATTERN.fullmatch(name):
                raise InvalidArgument(
                    'Invalid trigger name: %r' % name, name)

    def register(self, triggers: TriggersInput, scope: str) -> str | None:
        """Register a series of triggers, either globally or for a channel.

        :param triggers: a trigger name, or a list of trigger names
        :param scope: the channel for which to register the triggers (e.g.
                      ``#sopel``), or :data:`MATCH_ANY` to register them
                      globally
        :return: a token to :meth:`free` the triggers later, or ``None`` if
                 one of the triggers is already registered
        :raise InvalidArgument: when ``scope`` is not a string or contains a
                                space, or when ``triggers`` is empty or
                                contains something that is not a trigger name

        The triggers are registered as a whole: if only one of them conflicts
        with an existing trigger, none of them are registered. A trigger
        conflicts when it's already registered for the same channel, or
        globally. Triggers registered globally only conflict with other
        global triggers.
        """
        # a space would make the token ambiguous
        if not isinstance(scope, str) or ' ' in scope:
            raise InvalidArgument('Invalid channel', scope)

        if isinstance(triggers, str):
            triggers = [triggers]
        elif not isinstance(triggers, Sequence) or isinstance(
                triggers, (bytes, bytearray)):
            raise InvalidArgument('Invalid triggers', triggers)

        group = _freeze(triggers)
        self._check_names(group)

        with self._lock:
            for trigger in _flatten(group):
                if scope != MATCH_ANY and self._contains(
                        self._triggers.get(scope, []), trigger):
                    self.logger.info(
                        'A trigger named "%s" has already been registered '
                        'on channel %s.', trigger, scope)
                    return None
                if self._contains(self._triggers[MATCH_ANY], trigger):
                    self.logger.info(
                        'A trigger named "%s" has already been registered '
                        'globally.', trigger)
                    return None

            slots = self._triggers.setdefault(scope, [])
            slots.append(group)
            token = Token(scope, len(slots) - 1)

        self.logger.debug('Triggers registered: %r (token %r)', group, str(token))
        return str(token)

    def _get_slot(self, token: Token, raw) -> TriggerGroup:
        try:
            group = self._triggers[token.scope][token.index]
        except (KeyError, IndexError):
            group = None

        if group is None:
            raise NotFound('No such triggers', token=raw, scope=token.scope)

        return group

    def free(self, token: str) -> None:
        """Unregister a series of triggers.

        :param token: the token returned by :meth:`register` for these
                      triggers
        :raise InvalidArgument: when ``token`` is not a valid token
        :raise NotFound: when there are no triggers for ``token``, including
                         when they have already been freed

        All the triggers registered together are freed together. The token
        is never given again by this registry.
        """
        location = Token.parse(token)
        with self._lock:
            self._get_slot(location, token)
            self._triggers[location.scope][location.index] = None
        self.logger.debug('Triggers freed: %r', token)

    def triggers_for_scope(self, scope: str) -> list[TriggerGroup]:
        """Get all the trigger groups registered for a channel.

        :param scope: the name of a channel, to get only the triggers that
                      were specifically registered for that channel, or
                      :data:`MATCH_ANY` to get the global triggers
        :return: the trigger groups, in registration order
        :raise InvalidArgument: when ``scope`` is not a string
        :raise NotFound: when nothing was ever registered for ``scope``
        """
        if not isinstance(scope, str):
            raise InvalidArgument('Invalid channel', scope)

        with self._lock:
            if scope not in self._triggers:
                raise NotFound(
                    'No triggers found for channel "%s"' % scope,
                    scope=scope)
            return [
                group
                for group in self._triggers[scope]
                if group is not None
            ]

    def triggers_for_token(self, token: str) -> TriggerGroup:
        """Get the triggers registered with a token.

        :param token: the token returned by :meth:`register`
        :return: the trigger names, as registered
        :raise InvalidArgument: when ``token`` is not a valid token
        :raise NotFound: when there are no triggers for ``token``
        """
        location = Token.parse(token)
        with self._lock:
            return self._get_slot(location, token)
