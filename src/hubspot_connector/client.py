# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

from typing import Any, Optional

import requests

from .core._logging import resolve_logger
from .core.config import HubSpotConfig
from .data._gateway import RequestGateway
from .operations.companies import CompanyOperations
from .operations.contacts import ContactOperations


class HubSpotClient:
    """
    High-level client for the HubSpot CRM API.

    Every call performs a single HTTP exchange through a
    :class:`~hubspot_connector.data._gateway.RequestGateway` and normalizes the
    response: property wrappers are flattened into plain dictionaries, collection
    pages are returned as envelopes carrying ``hasMore``/``offset``/``total``, and
    failures raise :class:`~hubspot_connector.core.errors.ApiError`,
    :class:`~hubspot_connector.core.errors.TransportError` or
    :class:`~hubspot_connector.core.errors.ValidationError`.

    Operations are organized under namespaces:

    - ``client.companies``: company reads/writes and company property definitions
    - ``client.contacts``: contact reads/writes, search and contact property definitions

    The client holds only read-only configuration (base URL, API key, logger),
    so calls may be issued concurrently. Pagination is driven by the caller:
    pass the ``offset`` of one page to request the next.

    **Context Manager Support (Recommended)**:
        Using the client as a context manager enables connection pooling::

            with HubSpotClient(hapikey) as client:
                page = client.contacts.get_recently_created(count=50)

    :param hapikey: HubSpot API key.
    :type hapikey: :class:`str`
    :param config: Optional configuration. Defaults to :meth:`HubSpotConfig.from_env`.
    :type config: ~hubspot_connector.core.config.HubSpotConfig or None
    :param logger: Optional logger (a :class:`logging.Logger` or any object with
        ``debug``/``warning``/``error`` methods). Logging never affects results.

    :raises ValueError: If ``hapikey`` is missing or empty.

    Example::

        from hubspot_connector import HubSpotClient

        client = HubSpotClient("my-hapikey")
        try:
            company = client.companies.get(12345)
            print(company.get("name"), company["companyId"])
        finally:
            client.close()
    """

    def __init__(
        self,
        hapikey: str,
        config: Optional[HubSpotConfig] = None,
        logger: Optional[Any] = None,
    ) -> None:
        self._hapikey = (hapikey or "").strip()
        if not self._hapikey:
            raise ValueError("hapikey is required.")
        self._config = config or HubSpotConfig.from_env()
        self.logger = resolve_logger(logger)
        self._gateway: Optional[RequestGateway] = None
        self._session: Optional[requests.Session] = None
        self._owns_session: bool = False

        self.companies = CompanyOperations(self)
        self.contacts = ContactOperations(self)

    @property
    def config(self) -> HubSpotConfig:
        return self._config

    def __enter__(self) -> "HubSpotClient":
        """
        Enter the context manager.

        Creates an HTTP session so all operations within the context reuse connections.
        """
        if self._session is None:
            self._session = requests.Session()
            self._owns_session = True
            # Rebuild the gateway so it picks up the session.
            self._gateway = None
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit the context manager and release resources. Exceptions are not suppressed."""
        self.close()

    def close(self) -> None:
        """
        Close the client and release resources.

        Safe to call multiple times.
        """
        if self._gateway is not None:
            self._gateway.close()
            self._gateway = None
        if self._session is not None and self._owns_session:
            self._session.close()
        self._session = None
        self._owns_session = False

    def _get_gateway(self) -> RequestGateway:
        """Get or lazily create the request gateway."""
        if self._gateway is None:
            self._gateway = RequestGateway(
                self._hapikey,
                self._config,
                session=self._session,
                logger=self.logger,
            )
        return self._gateway


__all__ = ["HubSpotClient"]
