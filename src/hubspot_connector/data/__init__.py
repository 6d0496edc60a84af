# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Data access layer for the HubSpot connector.

This module contains the property codec, entity field projectors, response
interpretation and the request gateway shared by every endpoint.
"""

from ._codec import flatten, splay, decode, encode
from ._projectors import FieldProjector, CONTACT, COMPANY, get_projector
from ._interpreter import interpret_single, interpret_collection, interpret_create_or_update
from ._gateway import RequestGateway, encode_query

__all__ = [
    "flatten",
    "splay",
    "decode",
    "encode",
    "FieldProjector",
    "CONTACT",
    "COMPANY",
    "get_projector",
    "interpret_single",
    "interpret_collection",
    "interpret_create_or_update",
    "RequestGateway",
    "encode_query",
]
