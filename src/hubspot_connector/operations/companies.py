# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Company operations namespace."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from ..common import endpoints
from ..core._error_codes import VALIDATION_DOMAIN_REQUIRED
from ..core._logging import safe_log
from ..core.results import FlatRecord, Outcome, PaginatedEnvelope, RawRecord
from ..data._codec import flatten as _flatten, splay as _splay
from ._base import _OperationsBase, _PropertyDefinitionsMixin, _require


class CompanyOperations(_PropertyDefinitionsMixin, _OperationsBase):
    """
    Company reads and writes.

    Accessed via ``client.companies``. Reads flatten HubSpot's property wrappers by
    default; pass ``flatten=False`` to get the raw API representation.

    Example:
        Page through all companies::

            offset = None
            while True:
                page = client.companies.get_all(offset=offset, limit=100, properties=["name", "domain"])
                for company in page.get("results") or []:
                    print(company["companyId"], company.get("name"))
                if not page.get("hasMore"):
                    break
                offset = page["offset"]

        Create from a flat record::

            company = client.companies.create({"name": "Acme", "domain": "acme.com"}, splay=True)
            print(company["companyId"])
    """

    _OBJECT_TYPE = "companies"

    def get_all(
        self,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
        properties: Optional[List[str]] = None,
        flatten: Optional[bool] = None,
    ) -> Union[PaginatedEnvelope, RawRecord, List[Any]]:
        """
        Get one page of all companies.

        :param offset: Cursor from the previous page's ``offset``.
        :type offset: int | None
        :param limit: Page size (the API caps it at 250).
        :type limit: int | None
        :param properties: Property names to include. Without them only the company id is returned.
        :type properties: list[str] | None
        :param flatten: Flatten property wrappers (default True).
        :type flatten: bool | None
        :return: Envelope with ``hasMore``, ``offset`` and ``results``.
        """
        query = {"offset": offset, "limit": limit, "properties": properties}
        return self._get_entities(endpoints.COMPANIES_PAGED, query, flatten)

    def get_recently_modified(
        self,
        offset: Optional[int] = None,
        count: Optional[int] = None,
        flatten: Optional[bool] = None,
    ) -> Union[PaginatedEnvelope, RawRecord, List[Any]]:
        """Get the most recently modified companies."""
        return self._get_entities(endpoints.COMPANIES_RECENTLY_MODIFIED, {"offset": offset, "count": count}, flatten)

    def get_recently_created(
        self,
        offset: Optional[int] = None,
        count: Optional[int] = None,
        flatten: Optional[bool] = None,
    ) -> Union[PaginatedEnvelope, RawRecord, List[Any]]:
        """Get the most recently created companies."""
        return self._get_entities(endpoints.COMPANIES_RECENTLY_CREATED, {"offset": offset, "count": count}, flatten)

    def get_by_domain(
        self,
        domain: str,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
        flatten: Optional[bool] = None,
    ) -> Union[PaginatedEnvelope, RawRecord, List[Any]]:
        """
        Find companies by domain.

        The returned ``offset`` is a structured cursor (``{"isPrimary": ..., "companyId": ...}``);
        pass its ``companyId`` back as ``offset`` for the next page.

        :param domain: Domain to look up, e.g. ``"acme.com"``.
        :type domain: str
        :param offset: Company id to continue from (default 0).
        :type offset: int | None
        :param limit: Page size (default 1).
        :type limit: int | None
        :raises ValidationError: If ``domain`` is None.
        """
        _require(domain, "A domain is required.", VALIDATION_DOMAIN_REQUIRED)
        body = {
            "limit": limit or 1,
            "requestOptions": {"properties": list(endpoints.DOMAIN_LOOKUP_PROPERTIES)},
            "offset": {"isPrimary": True, "companyId": offset or 0},
        }
        return self._get_entities(endpoints.COMPANIES_BY_DOMAIN, None, flatten, body=body, domain=domain)

    def get(self, company_id: Union[int, str], flatten: Optional[bool] = None) -> Union[FlatRecord, RawRecord, None]:
        """
        Get a company by id.

        :return: The company, or ``{}`` when it does not exist.
        :raises ValidationError: If ``company_id`` is None.
        """
        _require(company_id, "A company id is required.")
        return self._get_entity(endpoints.COMPANY_BY_ID, flatten, company_id=company_id)

    def create(self, record: Dict[str, Any], splay: bool = False) -> Union[FlatRecord, RawRecord, Outcome]:
        """
        Create a company.

        :param record: Company payload. With ``splay=True`` a flat ``{name: value}`` record,
            otherwise the API's ``{"properties": [...]}`` shape.
        :type record: dict
        :param splay: Splay ``record`` before sending and flatten the returned company.
        :type splay: bool
        :return: The created company, or the :class:`Outcome` when the API returned no body.
        """
        payload = record
        if splay:
            payload = _splay(record)
            safe_log(self._logger, logging.DEBUG, "After splay %s", payload)
        result = self._save(endpoints.COMPANY_CREATE, payload, "creating")
        return self._unsplay(result) if splay else result

    def update(
        self,
        company_id: Union[int, str],
        record: Dict[str, Any],
        splay: bool = False,
    ) -> Union[FlatRecord, RawRecord, Outcome]:
        """
        Update a company.

        :raises ValidationError: If ``company_id`` is None.
        """
        _require(company_id, "A company id is required.")
        payload = _splay(record) if splay else record
        result = self._save(endpoints.COMPANY_UPDATE, payload, "updating", company_id=company_id)
        return self._unsplay(result) if splay else result

    @staticmethod
    def _unsplay(result: Union[RawRecord, Outcome]) -> Union[FlatRecord, Outcome]:
        if isinstance(result, dict):
            return _flatten(result, endpoints.COMPANY_CREATE.projector)
        return result
