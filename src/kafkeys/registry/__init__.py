"""Registry of known client properties.

Keys defined here apply to producers and consumers alike. Role-specific keys
live in kafkeys.registry.producer and kafkeys.registry.consumer.
"""

from kafkeys.keys import ConfigKey, passthrough

bootstrap_servers: ConfigKey[str] = ConfigKey("bootstrap.servers", passthrough)
client_id: ConfigKey[str] = ConfigKey("client.id", passthrough)
log_connection_close: ConfigKey[bool] = ConfigKey("log.connection.close", passthrough)
max_in_flight: ConfigKey[int] = ConfigKey(
    "max.in.flight.requests.per.connection", passthrough
)
retry_backoff: ConfigKey[int] = ConfigKey("retry.backoff.ms", passthrough)
socket_keepalive: ConfigKey[bool] = ConfigKey("socket.keepalive.enable", passthrough)
statistics_interval: ConfigKey[int] = ConfigKey("statistics.interval.ms", passthrough)

SHARED_KEYS: tuple[ConfigKey, ...] = (
    bootstrap_servers,
    client_id,
    log_connection_close,
    max_in_flight,
    retry_backoff,
    socket_keepalive,
    statistics_interval,
)

__all__ = [
    "SHARED_KEYS",
    "bootstrap_servers",
    "client_id",
    "log_connection_close",
    "max_in_flight",
    "retry_backoff",
    "socket_keepalive",
    "statistics_interval",
]
