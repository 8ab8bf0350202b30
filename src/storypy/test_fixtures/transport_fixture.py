"""Test fixtures for the in-memory transport and wallet."""

from __future__ import annotations

import pytest

from .mock_transport import MockTransport, MockWallet


@pytest.fixture(scope="function")
def mock_transport() -> MockTransport:
    """Fixture representing a transport connected to chain 1513.

    Returns
    -------
    MockTransport
        An empty transport; tests fill in `read_results` and call `emit`.
    """
    return MockTransport(chain_id=1513)


@pytest.fixture(scope="function")
def mock_wallet() -> MockWallet:
    """Fixture representing a wallet that records the transactions it sends.

    Returns
    -------
    MockWallet
        The wallet.
    """
    return MockWallet()
