"""Keys applying to consumers only."""

from kafkeys.enums import AutoOffsetReset
from kafkeys.keys import ConfigKey, enum_converter, passthrough

auto_commit_interval: ConfigKey[int] = ConfigKey("auto.commit.interval.ms", passthrough)

auto_offset_reset: ConfigKey[AutoOffsetReset] = ConfigKey(
    "auto.offset.reset",
    enum_converter(
        AutoOffsetReset,
        {
            AutoOffsetReset.EARLIEST: "earliest",
            AutoOffsetReset.LATEST: "latest",
            AutoOffsetReset.ERROR: "error",
        },
    ),
)

enable_auto_commit: ConfigKey[bool] = ConfigKey("enable.auto.commit", passthrough)
enable_auto_offset_store: ConfigKey[bool] = ConfigKey(
    "enable.auto.offset.store", passthrough
)
group_id: ConfigKey[str] = ConfigKey("group.id", passthrough)
fetch_max_bytes: ConfigKey[int] = ConfigKey("fetch.message.max.bytes", passthrough)
fetch_min_bytes: ConfigKey[int] = ConfigKey("fetch.min.bytes", passthrough)

CONSUMER_KEYS: tuple[ConfigKey, ...] = (
    auto_commit_interval,
    auto_offset_reset,
    enable_auto_commit,
    enable_auto_offset_store,
    group_id,
    fetch_max_bytes,
    fetch_min_bytes,
)
