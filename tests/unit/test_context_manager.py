# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Unit tests for HubSpotClient context manager support."""

import unittest
from unittest.mock import MagicMock

import requests

from hubspot_connector.client import HubSpotClient
from hubspot_connector.core.config import HubSpotConfig


class TestContextManager(unittest.TestCase):
    """Test context manager support on HubSpotClient."""

    def setUp(self):
        """Set up test fixtures."""
        self.config = HubSpotConfig(base_url="https://api.example.com")

    def test_enter_creates_session(self):
        """Test that __enter__ creates a session."""
        client = HubSpotClient("key", self.config)
        self.assertIsNone(client._session)

        result = client.__enter__()

        self.assertIsInstance(client._session, requests.Session)
        self.assertTrue(client._owns_session)
        self.assertIs(result, client)
        client.close()

    def test_exit_closes_session(self):
        """Test that __exit__ closes the session."""
        client = HubSpotClient("key", self.config)
        client.__enter__()

        mock_session = MagicMock(spec=requests.Session)
        client._session = mock_session
        client._owns_session = True

        client.__exit__(None, None, None)

        mock_session.close.assert_called_once()
        self.assertIsNone(client._session)
        self.assertFalse(client._owns_session)

    def test_gateway_uses_session(self):
        """Test that a gateway built inside the context reuses the session."""
        with HubSpotClient("key", self.config) as client:
            gateway = client._get_gateway()
            self.assertIs(gateway._http._session, client._session)

    def test_enter_discards_gateway_built_before(self):
        client = HubSpotClient("key", self.config)
        before = client._get_gateway()
        with client:
            self.assertIsNot(client._get_gateway(), before)

    def test_exceptions_propagate(self):
        """Test that exceptions raised inside the block are not suppressed."""
        with self.assertRaises(RuntimeError):
            with HubSpotClient("key", self.config):
                raise RuntimeError("boom")

    def test_close_without_session(self):
        client = HubSpotClient("key", self.config)
        client.close()
        self.assertIsNone(client._session)

    def test_reentry_after_close(self):
        client = HubSpotClient("key", self.config)
        with client:
            pass
        with client:
            self.assertIsInstance(client._session, requests.Session)
        self.assertIsNone(client._session)


if __name__ == "__main__":
    unittest.main()
