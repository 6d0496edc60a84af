# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Response interpretation: status-code dispatch and pagination envelope extraction.

Each function maps one :class:`~hubspot_connector.core.results.Outcome` to
exactly one of a value, an empty result, or an :class:`ApiError`. Nothing here
performs I/O or keeps state.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Union

from ..core.errors import ApiError
from ..core.results import FlatRecord, Outcome, PaginatedEnvelope, RawRecord
from ._codec import flatten as _flatten
from ._projectors import FieldProjector

HTTP_OK = 200
HTTP_NO_CONTENT = 204
HTTP_NOT_FOUND = 404

# Wire spellings of the "more pages" flag, in precedence order (last one wins).
_HAS_MORE_KEYS = ("hasMore", "has-more")


def _should_flatten(flatten: Optional[bool]) -> bool:
    return flatten is None or bool(flatten)


def interpret_single(
    outcome: Outcome,
    entity_name: str,
    flatten: Optional[bool] = None,
    projector: Optional[FieldProjector] = None,
) -> Union[FlatRecord, RawRecord, None]:
    """
    Interpret the response to a single-entity read.

    :param outcome: Executed exchange.
    :param entity_name: Entity display name used in errors.
    :param flatten: ``None`` or ``True`` flattens the body; ``False`` returns it verbatim.
    :param projector: Projector applied after flattening.
    :return: The flat (or raw) record; ``{}`` when the API reports 404.
    :raises ApiError: For any status other than 200 and 404.
    """
    if outcome.status_code == HTTP_OK:
        if _should_flatten(flatten):
            return _flatten(outcome.body, projector)
        return outcome.body
    if outcome.status_code == HTTP_NOT_FOUND:
        return {}
    raise ApiError(entity_name, outcome.status_code, outcome.body, action="getting")


def interpret_collection(
    outcome: Outcome,
    entity_name: str,
    flatten: Optional[bool] = None,
    collection_name: str = "results",
    projector: Optional[FieldProjector] = None,
) -> Union[PaginatedEnvelope, RawRecord, List[Any]]:
    """
    Interpret the response to a collection read.

    When flattening, the envelope carries ``hasMore`` (read from either ``hasMore`` or
    ``has-more``), ``offset`` and ``total`` only when the body has them, and ``results``
    holding the flattened ``body[collection_name]``.

    :param outcome: Executed exchange.
    :param entity_name: Entity display name used in errors.
    :param flatten: ``None`` or ``True`` builds an envelope; ``False`` returns the body verbatim.
    :param collection_name: Body key holding the record array.
    :param projector: Projector applied to each flattened record.
    :return: Envelope or raw body; ``[]`` when the API reports 404.
    :raises ApiError: For any status other than 200 and 404.
    """
    if outcome.status_code == HTTP_OK:
        if not _should_flatten(flatten):
            return outcome.body
        return build_envelope(outcome.body, collection_name, projector)
    if outcome.status_code == HTTP_NOT_FOUND:
        return []
    raise ApiError(f"{entity_name}(s)", outcome.status_code, outcome.body, action="getting")


def build_envelope(
    body: Any,
    collection_name: str = "results",
    projector: Optional[FieldProjector] = None,
) -> PaginatedEnvelope:
    """Build a :class:`PaginatedEnvelope` from a collection response body."""
    envelope: PaginatedEnvelope = {}
    if not body or not isinstance(body, dict):
        return envelope
    for key in _HAS_MORE_KEYS:
        if key in body:
            envelope["hasMore"] = body[key]
    if "offset" in body:
        envelope["offset"] = body["offset"]
    if "total" in body:
        envelope["total"] = body["total"]
    envelope["results"] = _flatten(body.get(collection_name), projector)
    return envelope


def interpret_create_or_update(
    outcome: Outcome,
    entity_name: str,
    action: str = "creating",
    success_codes: Iterable[int] = (HTTP_OK,),
    reason: Optional[str] = None,
) -> Union[RawRecord, Outcome]:
    """
    Interpret the response to a create or update.

    The body is never flattened here; callers that splayed their input flatten the
    returned record themselves.

    :param outcome: Executed exchange.
    :param entity_name: Entity display name used in errors.
    :param action: Verb phrase for the error text, e.g. ``"creating"`` or ``"updating"``.
    :param success_codes: Status codes that count as accepted.
    :param reason: Overrides the error reason taken from the body.
    :return: The response body when there is one, otherwise the ``outcome`` itself,
        meaning "accepted, no representation returned".
    :raises ApiError: For any status outside ``success_codes``.
    """
    if outcome.status_code in tuple(success_codes):
        if outcome.has_body:
            return outcome.body
        return outcome
    raise ApiError(entity_name, outcome.status_code, outcome.body, action=action, reason=reason)


__all__ = [
    "interpret_single",
    "interpret_collection",
    "interpret_create_or_update",
    "build_envelope",
    "HTTP_OK",
    "HTTP_NO_CONTENT",
    "HTTP_NOT_FOUND",
]
