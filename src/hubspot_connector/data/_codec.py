# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Property codec: conversion between HubSpot's property wire format and flat records.

HubSpot returns record properties as a map of wrappers::

    {"vid": 1, "properties": {"email": {"value": "x@y.com", "versions": [...]}}}

and expects writes as an array of name/value pairs::

    {"properties": [{"name": "email", "value": "x@y.com"}]}

:func:`flatten` turns the former into ``{"email": "x@y.com"}`` (plus projector
fields) and :func:`splay` turns a flat record into the latter.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

from ..core.results import FlatRecord, RawRecord
from ._projectors import FieldProjector


def flatten(
    raw: Union[RawRecord, List[RawRecord], None],
    projector: Optional[FieldProjector] = None,
    field_key_name: str = "value",
) -> Union[FlatRecord, List[Optional[FlatRecord]], None]:
    """
    Flatten one raw record or a sequence of raw records.

    :param raw: A raw record, a list/tuple of raw records, or ``None``.
    :param projector: Optional projector whose fields are merged into each flat record.
    :type projector: ~hubspot_connector.data._projectors.FieldProjector | None
    :param field_key_name: Key read from each property wrapper. Default ``"value"``.
    :type field_key_name: str
    :return: ``None`` for ``None`` input, a list (same order, no dedupe) for sequence
        input, otherwise a single flat record.

    Example::

        flatten({"properties": {"name": {"value": "Acme"}}})
        # {'name': 'Acme'}
    """
    if raw is None:
        return None
    if isinstance(raw, (list, tuple)):
        return [flatten(item, projector, field_key_name) for item in raw]
    return _flatten_one(raw, projector, field_key_name)


def _flatten_one(
    raw: Any,
    projector: Optional[FieldProjector],
    field_key_name: str,
) -> FlatRecord:
    flat: FlatRecord = {}
    if not isinstance(raw, Mapping):
        # Text or scalar bodies carry no properties and no top-level fields.
        raw = {}
    properties = raw.get("properties") or {}
    for name, wrapper in properties.items():
        flat[name] = wrapper.get(field_key_name) if isinstance(wrapper, Mapping) else None
    if projector is not None:
        flat.update(projector.project(raw))
    return flat


def splay(flat: Mapping[str, Any], name_key: str = "name") -> Dict[str, List[Dict[str, Any]]]:
    """
    Splay a flat record into HubSpot's name/value-pair write format.

    Keys are emitted in the mapping's iteration order. Values are passed through unchanged.

    :param flat: Flat record to encode.
    :type flat: dict
    :param name_key: Key holding the property name in each pair. Companies use ``"name"``,
        contacts use ``"property"``.
    :type name_key: str

    Example::

        splay({"name": "Acme", "domain": "acme.com"})
        # {'properties': [{'name': 'name', 'value': 'Acme'},
        #                 {'name': 'domain', 'value': 'acme.com'}]}
    """
    return {"properties": [{name_key: key, "value": value} for key, value in flat.items()]}


# Aliases matching the decode/encode naming of the wire protocol.
decode = flatten
encode = splay

__all__ = ["flatten", "splay", "decode", "encode"]
