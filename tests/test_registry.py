"""Tests for the key registry and enum wire values."""

import pytest

from kafkeys import InvalidConfigValue, registry
from kafkeys.enums import Acks, AutoOffsetReset, CompressionType, Partitioner
from kafkeys.keys import ConfigKey
from kafkeys.registry import SHARED_KEYS, consumer, producer
from kafkeys.registry.consumer import CONSUMER_KEYS
from kafkeys.registry.producer import PRODUCER_KEYS


class TestRegistryIds:
    def test_shared_ids(self) -> None:
        assert [key.id for key in SHARED_KEYS] == [
            "bootstrap.servers",
            "client.id",
            "log.connection.close",
            "max.in.flight.requests.per.connection",
            "retry.backoff.ms",
            "socket.keepalive.enable",
            "statistics.interval.ms",
        ]

    def test_producer_ids(self) -> None:
        assert [key.id for key in PRODUCER_KEYS] == [
            "acks",
            "compression.codec",
            "linger.ms",
            "message.send.max.retries",
            "partitioner",
            "request.timeout.ms",
        ]

    def test_consumer_ids(self) -> None:
        assert [key.id for key in CONSUMER_KEYS] == [
            "auto.commit.interval.ms",
            "auto.offset.reset",
            "enable.auto.commit",
            "enable.auto.offset.store",
            "group.id",
            "fetch.message.max.bytes",
            "fetch.min.bytes",
        ]

    def test_ids_unique(self) -> None:
        ids = [key.id for key in (*SHARED_KEYS, *PRODUCER_KEYS, *CONSUMER_KEYS)]
        assert len(ids) == len(set(ids))

    def test_compression_uses_legacy_alias(self) -> None:
        assert producer.compression.id == "compression.codec"


class TestEnumWireValues:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(Acks.ZERO, 0), (Acks.LEADER, 1), (Acks.ALL, -1)],
    )
    def test_acks(self, value: Acks, expected: int) -> None:
        assert producer.acks.bind(value) == ("acks", expected)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (CompressionType.NONE, "none"),
            (CompressionType.GZIP, "gzip"),
            (CompressionType.SNAPPY, "snappy"),
            (CompressionType.LZ4, "lz4"),
        ],
    )
    def test_compression(self, value: CompressionType, expected: str) -> None:
        assert producer.compression.bind(value) == ("compression.codec", expected)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (Partitioner.RANDOM, "random"),
            (Partitioner.CONSISTENT, "consistent"),
            (Partitioner.CONSISTENT_RANDOM, "consistent_random"),
        ],
    )
    def test_partitioner(self, value: Partitioner, expected: str) -> None:
        assert producer.partitioner.bind(value) == ("partitioner", expected)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (AutoOffsetReset.EARLIEST, "earliest"),
            (AutoOffsetReset.LATEST, "latest"),
            (AutoOffsetReset.ERROR, "error"),
        ],
    )
    def test_auto_offset_reset(self, value: AutoOffsetReset, expected: str) -> None:
        assert consumer.auto_offset_reset.bind(value) == ("auto.offset.reset", expected)

    def test_acks_wire_value_is_int(self) -> None:
        assert isinstance(producer.acks.bind(Acks.ALL).value, int)


class TestStringKeysValidate:
    @pytest.mark.parametrize(
        "key",
        [registry.bootstrap_servers, registry.client_id, consumer.group_id],
        ids=lambda key: key.id,
    )
    def test_blank_rejected(self, key: ConfigKey[str]) -> None:
        with pytest.raises(InvalidConfigValue, match=key.id) as exc_info:
            key.bind(" ")
        assert exc_info.value.key_id == key.id
