"""Keys applying to producers only."""

from kafkeys.enums import Acks, CompressionType, Partitioner
from kafkeys.keys import ConfigKey, enum_converter, passthrough

acks: ConfigKey[Acks] = ConfigKey(
    "acks",
    enum_converter(Acks, {Acks.ZERO: 0, Acks.LEADER: 1, Acks.ALL: -1}),
)

# "compression.type" is only an alias on newer clients; older ones reject it.
compression: ConfigKey[CompressionType] = ConfigKey(
    "compression.codec",
    enum_converter(
        CompressionType,
        {
            CompressionType.NONE: "none",
            CompressionType.GZIP: "gzip",
            CompressionType.SNAPPY: "snappy",
            CompressionType.LZ4: "lz4",
        },
    ),
)

linger: ConfigKey[int] = ConfigKey("linger.ms", passthrough)
message_send_retries: ConfigKey[int] = ConfigKey(
    "message.send.max.retries", passthrough
)

partitioner: ConfigKey[Partitioner] = ConfigKey(
    "partitioner",
    enum_converter(
        Partitioner,
        {
            Partitioner.RANDOM: "random",
            Partitioner.CONSISTENT: "consistent",
            Partitioner.CONSISTENT_RANDOM: "consistent_random",
        },
    ),
)

request_timeout: ConfigKey[int] = ConfigKey("request.timeout.ms", passthrough)

PRODUCER_KEYS: tuple[ConfigKey, ...] = (
    acks,
    compression,
    linger,
    message_send_retries,
    partitioner,
    request_timeout,
)
