# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Request gateway: executes one :class:`RequestSpec` and returns its :class:`Outcome`.

The gateway appends the API key, serializes list-valued query parameters as
repeated keys, sends JSON bodies and parses JSON responses. It never retries and
never follows pagination; interpretation of the status code is left to
:mod:`hubspot_connector.data._interpreter`.
"""

from __future__ import annotations

import json
import logging
from typing import Any, List, Mapping, Optional, Tuple
from urllib.parse import quote_plus, urlencode

import requests

from ..core._http import _HttpClient
from ..core._logging import resolve_logger, safe_log
from ..core.config import HubSpotConfig
from ..core.errors import TransportError
from ..core.results import Outcome, RequestSpec

_API_KEY_PARAM = "hapikey"
_REDACTED = "***"


def query_pairs(query: Mapping[str, Any]) -> List[Tuple[str, Any]]:
    """
    Expand a query mapping into ``(key, value)`` pairs.

    List and tuple values become one pair per element, so ``{"properties": ["a", "b"]}``
    is sent as ``properties=a&properties=b``. ``None`` values are dropped.
    """
    pairs: List[Tuple[str, Any]] = []
    for key, value in query.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, item) for item in value if item is not None)
        else:
            pairs.append((key, _query_scalar(value)))
    return pairs


def _query_scalar(value: Any) -> Any:
    # requests would send True as "True"; the API expects lowercase.
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def encode_query(query: Mapping[str, Any]) -> str:
    """Return the query string the gateway sends for ``query`` (without the API key)."""
    return urlencode(query_pairs(query))


class RequestGateway:
    """
    Executes single HTTP exchanges against the HubSpot API.

    The gateway holds only read-only configuration, so one instance can serve
    concurrent calls.

    :param hapikey: HubSpot API key appended to every request.
    :type hapikey: :class:`str`
    :param config: Base URL and timeout settings.
    :type config: ~hubspot_connector.core.config.HubSpotConfig | None
    :param session: Optional session for connection pooling.
    :type session: :class:`requests.Session` | None
    :param logger: Optional logger; defaults to the ``hubspot_connector`` logger.
    """

    def __init__(
        self,
        hapikey: str,
        config: Optional[HubSpotConfig] = None,
        session: Optional[requests.Session] = None,
        logger: Optional[Any] = None,
    ) -> None:
        self._hapikey = hapikey
        self.config = config or HubSpotConfig()
        self.base_url = (self.config.base_url or "").rstrip("/")
        self.logger = resolve_logger(logger)
        self._http = _HttpClient(timeout=self.config.http_timeout, session=session)

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def execute(self, spec: RequestSpec) -> Outcome:
        """
        Perform exactly one exchange for ``spec``.

        :param spec: The request to send.
        :type spec: ~hubspot_connector.core.results.RequestSpec
        :return: Status code, parsed body and headers of the response.
        :rtype: ~hubspot_connector.core.results.Outcome
        :raises TransportError: If no HTTP response was received.
        """
        url = self.url_for(spec.path)
        params = query_pairs(spec.query)
        params.append((_API_KEY_PARAM, self._hapikey))
        kwargs: dict = {
            "params": params,
            "headers": {"Accept": "application/json"},
        }
        if spec.body is not None:
            kwargs["json"] = spec.body

        try:
            response = self._http._request(spec.method, url, **kwargs)
        except requests.exceptions.RequestException as exc:
            reason = self._redact(str(exc))
            safe_log(self.logger, logging.ERROR, "HubSpot %s %s failed: %s", spec.method, spec.path, reason)
            raise TransportError(
                f"HubSpot request {spec.method} {spec.path} failed: {reason}",
                method=spec.method,
                url=url,
            ) from exc

        outcome = Outcome(
            status_code=response.status_code,
            body=_parse_body(response),
            headers=dict(response.headers or {}),
        )
        safe_log(
            self.logger,
            logging.DEBUG,
            "HubSpot %s %s -> %s. Raw Response: %s",
            spec.method,
            spec.path,
            outcome.status_code,
            outcome.body,
        )
        return outcome

    def _redact(self, text: str) -> str:
        """Mask the API key in ``text``; requests errors quote the full URL."""
        for secret in {self._hapikey, quote_plus(self._hapikey)}:
            if secret:
                text = text.replace(secret, _REDACTED)
        return text

    def close(self) -> None:
        self._http.close()


def _parse_body(response: requests.Response) -> Any:
    text = response.text
    if not text or not text.strip():
        return None
    try:
        return json.loads(text)
    except ValueError:
        return text


__all__ = ["RequestGateway", "query_pairs", "encode_query"]
