"""Closed value sets for enumerated client settings.

Wire values are not attached to the members; each is mapped by the key that
renders it (see kafkeys.registry).
"""

from enum import Enum, auto


class Acks(Enum):
    """How many broker acknowledgments a produce request waits for."""

    ZERO = auto()
    LEADER = auto()
    ALL = auto()


class CompressionType(Enum):
    """Compression codec applied to produced message sets."""

    NONE = auto()
    GZIP = auto()
    SNAPPY = auto()
    LZ4 = auto()


class Partitioner(Enum):
    """Strategy used to pick a partition for a produced message."""

    RANDOM = auto()
    CONSISTENT = auto()
    CONSISTENT_RANDOM = auto()


class AutoOffsetReset(Enum):
    """What a consumer does when it has no valid committed offset."""

    EARLIEST = auto()
    LATEST = auto()
    ERROR = auto()
