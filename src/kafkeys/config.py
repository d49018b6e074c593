"""Configuration for Kafka producer and consumer clients.

Each config exposes one optional field per supported property. Unset fields
are left out of the rendered configuration, so the client falls back to its
own defaults.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar

from kafkeys import registry
from kafkeys.enums import Acks, AutoOffsetReset, CompressionType, Partitioner
from kafkeys.keys import ConfigEntry, ConfigKey
from kafkeys.registry import consumer, producer

logger = logging.getLogger("kafkeys.config")


@dataclass
class ClientConfig:
    """Settings shared by producers and consumers."""

    client_id: str | None = None
    """Client identifier sent with every request."""

    bootstrap_servers: str | None = None
    """Comma-separated list of broker addresses."""

    retry_backoff_ms: int | None = None
    """Milliseconds to wait before retrying a failed request."""

    socket_keepalive_enable: bool | None = None
    """Enable TCP keep-alive on broker sockets."""

    log_connection_close: bool | None = None
    """Log broker-initiated connection closes."""

    max_in_flight: int | None = None
    """Maximum unacknowledged requests per broker connection."""

    statistics_interval_ms: int | None = None
    """Interval for emitting client statistics. 0 disables them."""

    overrides: dict[str, Any] = field(default_factory=dict)
    """Unmodeled properties, rendered verbatim after the typed ones."""

    _fields: ClassVar[tuple[tuple[str, ConfigKey], ...]] = (
        ("client_id", registry.client_id),
        ("bootstrap_servers", registry.bootstrap_servers),
        ("retry_backoff_ms", registry.retry_backoff),
        ("socket_keepalive_enable", registry.socket_keepalive),
        ("log_connection_close", registry.log_connection_close),
        ("max_in_flight", registry.max_in_flight),
        ("statistics_interval_ms", registry.statistics_interval),
    )

    def __post_init__(self) -> None:
        self.overrides = dict(self.overrides)

    def set(self, key: str, value: Any) -> None:
        """Set an arbitrary property. The key is not checked against the registry."""
        self.overrides[key] = value

    def render(self) -> list[ConfigEntry]:
        """Render set fields in declaration order, followed by the overrides.

        Duplicate ids between typed fields and overrides are kept; the later
        entry wins once folded into a dict.

        Raises:
            InvalidConfigValue: A set field has a null or blank wire value.
        """
        entries = [
            key.bind(value)
            for name, key in self._fields
            if (value := getattr(self, name)) is not None
        ]
        if logger.isEnabledFor(logging.DEBUG):
            typed_ids = {entry.id for entry in entries}
            for key in self.overrides:
                if key in typed_ids:
                    logger.debug("Override %s shadows a typed field", key)
            logger.debug(
                "Rendered %s: %d typed entries, %d overrides",
                type(self).__name__,
                len(entries),
                len(self.overrides),
            )
        entries.extend(ConfigEntry(key, value) for key, value in self.overrides.items())
        return entries

    def to_dict(self) -> dict[str, Any]:
        """Render into a dict, later entries replacing earlier ones.

        This is the form client constructors take, e.g.
        ``confluent_kafka.Producer(config.to_dict())``.
        """
        return dict(self.render())


@dataclass
class ProducerConfig(ClientConfig):
    """Configuration for a Kafka producer."""

    message_send_max_retries: int | None = None
    """How many times to retry sending a failing message."""

    acks: Acks | None = None
    """Acknowledgments the leader must receive before a request completes."""

    linger_ms: int | None = None
    """Milliseconds to buffer messages before sending a batch."""

    partitioner: Partitioner | None = None
    """Partition selection strategy."""

    compression_type: CompressionType | None = None
    """Compression codec for message sets."""

    request_timeout_ms: int | None = None
    """Milliseconds the producer waits for request acknowledgment."""

    _fields: ClassVar[tuple[tuple[str, ConfigKey], ...]] = (
        ("client_id", registry.client_id),
        ("bootstrap_servers", registry.bootstrap_servers),
        ("retry_backoff_ms", registry.retry_backoff),
        ("message_send_max_retries", producer.message_send_retries),
        ("acks", producer.acks),
        ("socket_keepalive_enable", registry.socket_keepalive),
        ("log_connection_close", registry.log_connection_close),
        ("max_in_flight", registry.max_in_flight),
        ("linger_ms", producer.linger),
        ("partitioner", producer.partitioner),
        ("compression_type", producer.compression),
        ("request_timeout_ms", producer.request_timeout),
        ("statistics_interval_ms", registry.statistics_interval),
    )


@dataclass
class ConsumerConfig(ClientConfig):
    """Configuration for a Kafka consumer."""

    group_id: str | None = None
    """Consumer group identifier."""

    auto_offset_reset: AutoOffsetReset | None = None
    """Where to start reading when there is no committed offset."""

    fetch_max_bytes: int | None = None
    """Maximum bytes fetched per partition per request."""

    enable_auto_commit: bool | None = None
    """Commit offsets periodically in the background."""

    enable_auto_offset_store: bool | None = None
    """Store the offset of each message handed to the application."""

    fetch_min_bytes: int | None = None
    """Minimum bytes the broker returns for a fetch request."""

    auto_commit_interval_ms: int | None = None
    """Milliseconds between background offset commits."""

    _fields: ClassVar[tuple[tuple[str, ConfigKey], ...]] = (
        ("client_id", registry.client_id),
        ("bootstrap_servers", registry.bootstrap_servers),
        ("group_id", consumer.group_id),
        ("auto_offset_reset", consumer.auto_offset_reset),
        ("fetch_max_bytes", consumer.fetch_max_bytes),
        ("log_connection_close", registry.log_connection_close),
        ("enable_auto_commit", consumer.enable_auto_commit),
        ("enable_auto_offset_store", consumer.enable_auto_offset_store),
        ("fetch_min_bytes", consumer.fetch_min_bytes),
        ("auto_commit_interval_ms", consumer.auto_commit_interval),
        ("retry_backoff_ms", registry.retry_backoff),
        ("socket_keepalive_enable", registry.socket_keepalive),
        ("max_in_flight", registry.max_in_flight),
        ("statistics_interval_ms", registry.statistics_interval),
    )
