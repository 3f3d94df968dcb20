"""Pytest configuration and fixtures for siren_client tests."""

from __future__ import annotations

import pytest

from siren_client.client import SirenClient
from tests.fixtures import FakeTransport


@pytest.fixture
def transport() -> FakeTransport:
    """Fake transport with an empty routing table."""
    return FakeTransport()


@pytest.fixture
def client(transport: FakeTransport) -> SirenClient:
    """Client wired to the fake transport."""
    return SirenClient(transport=transport)
