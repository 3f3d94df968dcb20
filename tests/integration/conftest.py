"""Pytest fixtures for integration tests against a real loopback HTTP server."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from .mock_siren_server import MockSirenServer


@pytest.fixture
def siren_server() -> Generator[MockSirenServer, None, None]:
    """Start a MockSirenServer for the duration of one test."""
    with MockSirenServer.running() as server:
        yield server
