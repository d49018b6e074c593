"""kafkeys: typed, validated configuration for Kafka clients."""

from kafkeys.config import ClientConfig, ConsumerConfig, ProducerConfig
from kafkeys.enums import Acks, AutoOffsetReset, CompressionType, Partitioner
from kafkeys.errors import InvalidConfigValue, KafkeysError
from kafkeys.keys import ConfigEntry, ConfigKey

__all__ = [
    # config
    "ClientConfig",
    "ConsumerConfig",
    "ProducerConfig",
    # keys
    "ConfigEntry",
    "ConfigKey",
    # enums
    "Acks",
    "AutoOffsetReset",
    "CompressionType",
    "Partitioner",
    # errors
    "InvalidConfigValue",
    "KafkeysError",
]
