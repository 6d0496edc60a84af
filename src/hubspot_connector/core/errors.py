# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Structured error types for the HubSpot connector.

Every failure path raises one of these rather than a bare exception:

- :class:`TransportError`: the HTTP exchange could not be completed.
- :class:`ApiError`: the API answered with a status outside the contract of the operation.
- :class:`ValidationError`: a required argument was missing; raised before any request is sent.
"""

from __future__ import annotations

import datetime as _dt
import json
from typing import Any, Dict, Optional

from ._error_codes import TRANSPORT_ERROR, http_subcode


class HubSpotError(Exception):
    """Base structured error for the HubSpot connector."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        source: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.subcode = subcode
        self.status_code = status_code
        self.details = details or {}
        self.source = source or "client"
        self.timestamp = _dt.datetime.now(_dt.timezone.utc).isoformat()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "subcode": self.subcode,
            "status_code": self.status_code,
            "details": self.details,
            "source": self.source,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(code={self.code!r}, subcode={self.subcode!r}, message={self.message!r})"


class ValidationError(HubSpotError):
    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="validation_error", subcode=subcode, details=details, source="client")


class TransportError(HubSpotError):
    """
    The request never produced an HTTP response (DNS, connection or timeout failure).

    The originating :class:`requests.exceptions.RequestException` is chained as ``__cause__``.

    :param message: Human readable description.
    :type message: :class:`str`
    :param method: HTTP method of the failed request.
    :type method: :class:`str` | None
    :param url: Target URL of the failed request.
    :type url: :class:`str` | None
    """

    def __init__(self, message: str, *, method: Optional[str] = None, url: Optional[str] = None) -> None:
        details: Dict[str, Any] = {}
        if method is not None:
            details["method"] = method
        if url is not None:
            details["url"] = url
        super().__init__(message, code="transport_error", subcode=TRANSPORT_ERROR, details=details, source="client")


class ApiError(HubSpotError):
    """
    The API replied with a status code the operation does not accept.

    :param entity_name: Display name of the entity involved, e.g. ``"Company"``.
    :type entity_name: :class:`str`
    :param status_code: HTTP status code of the response.
    :type status_code: :class:`int`
    :param raw_body: Response body as received (parsed JSON, text or ``None``).
    :type raw_body: Any
    :param action: Verb phrase used in the error text (``"getting"``, ``"creating"``, ...).
    :type action: :class:`str`
    :param reason: Overrides the reason extracted from ``raw_body``.
    :type reason: :class:`str` | None

    ``message`` holds the remote ``message`` field when the body has one and falls
    back to the raw body otherwise. ``str(err)`` names the action, entity, reason and
    HTTP status.

    Example::

        try:
            client.companies.create({"name": "Acme"}, splay=True)
        except ApiError as err:
            print(err.status_code, err.message)
    """

    def __init__(
        self,
        entity_name: str,
        status_code: int,
        raw_body: Any = None,
        *,
        action: str = "getting",
        reason: Optional[str] = None,
    ) -> None:
        self.entity_name = entity_name
        self.raw_body = raw_body
        self.action = action
        remote_message = reason if reason is not None else _remote_message(raw_body)
        text = (
            f"HubSpot error {action} {entity_name}. Reason: {remote_message}. "
            f"HTTP {status_code}\n{_dump(raw_body)}"
        )
        super().__init__(
            text,
            code="api_error",
            subcode=http_subcode(status_code),
            status_code=status_code,
            details={"entity_name": entity_name, "action": action},
            source="server",
        )
        # The structured message is the remote one; the formatted text stays in args.
        self.message = remote_message


def _remote_message(raw_body: Any) -> str:
    if isinstance(raw_body, dict) and raw_body.get("message") is not None:
        return str(raw_body["message"])
    if raw_body is None or raw_body == "":
        return "no response body"
    if isinstance(raw_body, (bytes, bytearray)):
        return raw_body.decode("utf-8", errors="replace")
    if isinstance(raw_body, str):
        return raw_body
    return _dump(raw_body)


def _dump(raw_body: Any) -> str:
    try:
        return json.dumps(raw_body)
    except (TypeError, ValueError):
        return repr(raw_body)


__all__ = ["HubSpotError", "ApiError", "TransportError", "ValidationError"]
