# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_BASE_URL = "https://api.hubapi.com"


@dataclass(frozen=True)
class HubSpotConfig:
    """
    Configuration settings for HubSpot client operations.

    Instances are immutable and shared read-only by every call made through a client.

    :param base_url: Root URL of the HubSpot API. Default is ``https://api.hubapi.com``.
    :type base_url: str
    :param http_timeout: Request timeout in seconds handed to the transport. ``None`` leaves
        the transport's own behaviour in place (requests waits indefinitely).
    :type http_timeout: float or None
    """

    base_url: str = DEFAULT_BASE_URL
    http_timeout: Optional[float] = None

    @classmethod
    def from_env(cls) -> "HubSpotConfig":
        """
        Create a configuration instance from ``HUBSPOT_BASE_URL`` and ``HUBSPOT_HTTP_TIMEOUT``.

        Unset or blank variables fall back to the defaults.

        :return: Configuration instance.
        :rtype: ~hubspot_connector.core.config.HubSpotConfig
        :raises ValueError: If ``HUBSPOT_HTTP_TIMEOUT`` is set but not a number.
        """
        base_url = (os.environ.get("HUBSPOT_BASE_URL") or "").strip() or DEFAULT_BASE_URL
        raw_timeout = (os.environ.get("HUBSPOT_HTTP_TIMEOUT") or "").strip()
        return cls(
            base_url=base_url,
            http_timeout=float(raw_timeout) if raw_timeout else None,
        )
