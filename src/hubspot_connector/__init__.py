# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
HubSpot connector: a normalizing client for the HubSpot CRM API.

Flattens HubSpot's property wrappers into plain dictionaries, splays flat
records into the API's name/value write format, and maps every response to a
value, an empty result or a typed error.
"""

from .client import HubSpotClient
from .core.config import HubSpotConfig
from .core.errors import ApiError, HubSpotError, TransportError, ValidationError
from .core.results import Outcome, RequestSpec
from .data._codec import decode, encode, flatten, splay
from .data._interpreter import interpret_collection, interpret_create_or_update, interpret_single
from .data._projectors import COMPANY, CONTACT

__version__ = "0.1.0"

__all__ = [
    "HubSpotClient",
    "HubSpotConfig",
    "HubSpotError",
    "ApiError",
    "TransportError",
    "ValidationError",
    "Outcome",
    "RequestSpec",
    "flatten",
    "splay",
    "decode",
    "encode",
    "interpret_single",
    "interpret_collection",
    "interpret_create_or_update",
    "CONTACT",
    "COMPANY",
]
