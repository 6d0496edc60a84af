# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Value types exchanged between the request gateway, the response interpreter and callers.

- :class:`RequestSpec`: one fully described HTTP exchange.
- :class:`Outcome`: the status code and parsed body produced by executing a :class:`RequestSpec`.
  A successful write with no response body is reported to callers as its :class:`Outcome`.
- :class:`PaginatedEnvelope`: the flattened shape of a paged collection response.

Example::

    spec = RequestSpec("GET", "/companies/v2/companies/paged", {"limit": 10})
    outcome = gateway.execute(spec)
    page = interpret_collection(outcome, "Company", collection_name="companies")
    if page.get("hasMore"):
        next_offset = page["offset"]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, TypedDict

# Type aliases for semantic clarity
RawRecord = Dict[str, Any]
FlatRecord = Dict[str, Any]


@dataclass(frozen=True)
class RequestSpec:
    """
    Immutable description of one HTTP exchange.

    :param method: HTTP method, e.g. ``"GET"``.
    :type method: :class:`str`
    :param path: Path relative to the configured base URL.
    :type path: :class:`str`
    :param query: Query parameters. List or tuple values are sent as repeated keys.
        Stored as a read-only mapping.
    :type query: :class:`dict` | None
    :param body: JSON-serializable request body, or ``None`` for no body.
    :type body: Any
    """

    method: str
    path: str
    query: Mapping[str, Any] = field(default_factory=dict)
    body: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(self, "query", MappingProxyType(dict(self.query or {})))


@dataclass(frozen=True)
class Outcome:
    """
    Result of executing a :class:`RequestSpec`.

    :param status_code: HTTP response status code.
    :type status_code: :class:`int`
    :param body: Parsed JSON body, the raw text when the body is not JSON, or ``None`` when empty.
    :type body: Any
    :param headers: Response headers.
    :type headers: :class:`dict`
    """

    status_code: int
    body: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def has_body(self) -> bool:
        """True when the response carried a non-empty body."""
        return self.body is not None and self.body != ""


class PaginatedEnvelope(TypedDict, total=False):
    """
    Flattened page of a collection.

    ``hasMore``, ``offset`` and ``total`` are present only when the API reported them.
    ``offset`` is an opaque cursor (an integer or a structured object) to pass back
    unchanged when requesting the next page.
    """

    hasMore: bool
    offset: Any
    total: int
    results: Optional[List[FlatRecord]]


__all__ = ["RawRecord", "FlatRecord", "RequestSpec", "Outcome", "PaginatedEnvelope"]
