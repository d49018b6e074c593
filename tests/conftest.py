"""Test fixtures for kafkeys."""

import pytest

from kafkeys import ConsumerConfig, ProducerConfig


@pytest.fixture
def producer_config() -> ProducerConfig:
    return ProducerConfig()


@pytest.fixture
def consumer_config() -> ConsumerConfig:
    return ConsumerConfig()
