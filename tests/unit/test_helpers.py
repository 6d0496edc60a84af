# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared test utilities for unit tests.

Provides a fake HTTP client and a client factory so that tests exercise the
full gateway/interpreter path without network access.
"""

import json
import types

from hubspot_connector.client import HubSpotClient
from hubspot_connector.core.config import HubSpotConfig


class DummyHTTPClient:
    """Fake HTTP client that returns pre-configured responses.

    Args:
        responses: List of (status_code, headers, body) tuples to return in sequence.
            A dict or list body is served as JSON, a str as raw text, None as an empty body.
            An exception instance is raised instead of returning a response.

    Attributes:
        calls: List of (method, url, kwargs) tuples recording all requests made.
    """

    def __init__(self, responses):
        self._responses = list(responses)  # Make a copy
        self.calls = []
        self.closed = False

    def _request(self, method, url, **kwargs):
        """Fake HTTP request that returns the next pre-configured response."""
        self.calls.append((method, url, kwargs))
        if not self._responses:
            raise AssertionError("No more dummy responses configured")

        item = self._responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        status, headers, body = item
        resp = types.SimpleNamespace()
        resp.status_code = status
        resp.headers = headers
        if body is None:
            resp.text = ""
        elif isinstance(body, (dict, list)):
            resp.text = json.dumps(body)
        else:
            resp.text = str(body)
        return resp

    def close(self):
        self.closed = True

    @property
    def last_params(self):
        return self.calls[-1][2]["params"]


def make_client(responses, logger=None):
    """Build a HubSpotClient whose gateway is wired to a DummyHTTPClient.

    Returns:
        (client, http) tuple.
    """
    client = HubSpotClient("test-key", HubSpotConfig(base_url="https://api.example.com"), logger=logger)
    http = DummyHTTPClient(responses)
    client._get_gateway()._http = http
    return client, http
