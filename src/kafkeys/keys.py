"""Typed configuration keys.

A ConfigKey binds a librdkafka property id to a conversion from a Python
domain value to the wire value the client expects.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Generic, NamedTuple, TypeVar

from kafkeys.errors import InvalidConfigValue

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

WireValue = str | int | bool
"""Primitive types a rendered property value may take."""

logger = logging.getLogger("kafkeys.keys")


class ConfigEntry(NamedTuple):
    """A rendered (property id, wire value) pair."""

    id: str
    value: WireValue


@dataclass(frozen=True)
class ConfigKey(Generic[T]):
    """A named property and the conversion of its domain value."""

    id: str
    """Property id as understood by the client, e.g. "linger.ms"."""

    convert: Callable[[T], WireValue | None]
    """Pure conversion from the domain value to its wire value."""

    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            msg = "Config key id must not be blank"
            raise ValueError(msg)

    def bind(self, value: T) -> ConfigEntry:
        """Convert a value and pair it with this key's id.

        Raises:
            InvalidConfigValue: The converted value is None or a blank string.
        """
        wire = self.convert(value)
        if wire is None or (isinstance(wire, str) and not wire.strip()):
            logger.debug("Rejected blank value for %s", self.id)
            raise InvalidConfigValue(self.id)
        return ConfigEntry(self.id, wire)


def passthrough(value: T) -> T:
    """Conversion for values already in wire form."""
    return value


def enum_converter(
    enum_type: type[E],
    mapping: Mapping[E, WireValue],
) -> Callable[[E], WireValue]:
    """Build a conversion from an enum member using a total mapping.

    Raises ValueError if the mapping does not cover every member. The returned
    conversion raises TypeError for values that are not members of enum_type.
    """
    missing = [member.name for member in enum_type if member not in mapping]
    if missing:
        msg = f"No wire value for {enum_type.__name__} members: {', '.join(missing)}"
        raise ValueError(msg)
    table = dict(mapping)

    def convert(value: E) -> WireValue:
        if not isinstance(value, enum_type):
            msg = f"Expected a {enum_type.__name__} member, got {value!r}"
            raise TypeError(msg)
        return table[value]

    return convert
