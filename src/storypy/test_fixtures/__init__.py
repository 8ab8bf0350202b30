"""Test fixtures for storypy."""

from .mock_transport import MockTransport, MockWallet, encode_event_log
from .transport_fixture import mock_transport, mock_wallet
