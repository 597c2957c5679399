"""Pytest configuration for opensearch_api tests."""

import pytest

from opensearch_api import Client, ClientConfig
from tests.helpers import FakeTransport


@pytest.fixture
def config():
    """Client configuration pointing at a test cluster."""
    return ClientConfig(url="http://test:9200")


@pytest.fixture
def transport():
    """Fake transport answering 200 with an empty JSON object."""
    return FakeTransport()


@pytest.fixture
def client(config, transport):
    """Client wired to the fake transport."""
    return Client(config=config, transport=transport)
