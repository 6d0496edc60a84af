# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Core infrastructure components for the HubSpot connector.

This module contains the foundational components including configuration,
the HTTP client, error types and the value types passed between layers.
"""

from .config import HubSpotConfig
from .errors import (
    HubSpotError,
    ApiError,
    TransportError,
    ValidationError,
)
from .results import (
    RawRecord,
    FlatRecord,
    RequestSpec,
    Outcome,
    PaginatedEnvelope,
)

__all__ = [
    "HubSpotConfig",
    "HubSpotError",
    "ApiError",
    "TransportError",
    "ValidationError",
    "RawRecord",
    "FlatRecord",
    "RequestSpec",
    "Outcome",
    "PaginatedEnvelope",
]
