# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Contact operations namespace."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from ..common import endpoints
from ..core._error_codes import VALIDATION_SEARCH_TERM_REQUIRED
from ..core._logging import safe_log
from ..core.results import FlatRecord, Outcome, PaginatedEnvelope, RawRecord
from ..data._codec import flatten as _flatten, splay as _splay
from ..data._interpreter import HTTP_NO_CONTENT, HTTP_OK
from ._base import _OperationsBase, _PropertyDefinitionsMixin, _require

# Contacts name their splayed pairs with "property" rather than "name".
_CONTACT_NAME_KEY = "property"


class ContactOperations(_PropertyDefinitionsMixin, _OperationsBase):
    """
    Contact reads and writes.

    Accessed via ``client.contacts``.

    Example::

        page = client.contacts.search("acme.com", count=20)
        for contact in page.get("results") or []:
            print(contact["vid"], contact.get("email"))

        client.contacts.update(vid, {"lifecyclestage": "customer"}, splay=True)
    """

    _OBJECT_TYPE = "contacts"

    def get_recently_modified(
        self,
        offset: Optional[int] = None,
        count: Optional[int] = None,
        flatten: Optional[bool] = None,
    ) -> Union[PaginatedEnvelope, RawRecord, List[Any]]:
        """Get the most recently modified contacts."""
        return self._get_entities(endpoints.CONTACTS_RECENTLY_MODIFIED, {"offset": offset, "count": count}, flatten)

    def get_recently_created(
        self,
        offset: Optional[int] = None,
        count: Optional[int] = None,
        flatten: Optional[bool] = None,
    ) -> Union[PaginatedEnvelope, RawRecord, List[Any]]:
        """Get the most recently created contacts."""
        return self._get_entities(endpoints.CONTACTS_RECENTLY_CREATED, {"offset": offset, "count": count}, flatten)

    def search(
        self,
        search_term: str,
        offset: Optional[int] = None,
        count: Optional[int] = None,
        flatten: Optional[bool] = None,
    ) -> Union[PaginatedEnvelope, RawRecord, List[Any]]:
        """
        Search contacts by part of their name, company name or email address.

        :param search_term: Text to match.
        :type search_term: str
        :raises ValidationError: If ``search_term`` is None.
        """
        _require(search_term, "A search term is required for searching contacts.", VALIDATION_SEARCH_TERM_REQUIRED)
        query = {"q": search_term, "offset": offset, "count": count}
        return self._get_entities(endpoints.CONTACTS_SEARCH, query, flatten)

    def get(self, vid: Union[int, str], flatten: Optional[bool] = None) -> Union[FlatRecord, RawRecord, None]:
        """
        Get a contact by vid.

        :return: The contact, or ``{}`` when it does not exist.
        :raises ValidationError: If ``vid`` is None.
        """
        _require(vid, "A contact id is required.")
        return self._get_entity(endpoints.CONTACT_BY_ID, flatten, vid=vid)

    def create(self, record: Dict[str, Any], splay: bool = False) -> Union[FlatRecord, RawRecord, Outcome]:
        """
        Create a contact.

        :param record: Flat record when ``splay`` is True, otherwise the API's property-array shape.
        :param splay: Splay ``record`` before sending and flatten the returned contact.
        """
        payload = _splay(record, _CONTACT_NAME_KEY) if splay else record
        safe_log(self._logger, logging.DEBUG, "Contact payload %s", payload)
        result = self._save(endpoints.CONTACT_CREATE, payload, "creating")
        if splay and isinstance(result, dict):
            return _flatten(result, endpoints.CONTACT_CREATE.projector)
        return result

    def update(self, vid: Union[int, str], record: Dict[str, Any], splay: bool = False) -> Union[RawRecord, Outcome]:
        """
        Update a contact's profile.

        The API replies 204 with no body, so the updated contact is not returned; fetch it
        again with :meth:`get` for calculated fields.

        :return: The :class:`Outcome` of the exchange ("accepted, no representation").
        :raises ValidationError: If ``vid`` is None.
        """
        _require(vid, "A contact id is required.")
        payload = _splay(record, _CONTACT_NAME_KEY) if splay else record
        return self._save(
            endpoints.CONTACT_UPDATE,
            payload,
            "updating",
            success_codes=(HTTP_OK, HTTP_NO_CONTENT),
            vid=vid,
        )

    def assign_to_company(self, vid: Union[int, str], company_id: Union[int, str]) -> Union[RawRecord, Outcome]:
        """
        Assign a contact to a company, moving it if it already belongs to another.

        :raises ValidationError: If ``vid`` or ``company_id`` is None.
        """
        _require(vid, "A contact id is required.")
        _require(company_id, "A company id is required.")
        return self._save(
            endpoints.CONTACT_ASSIGN_TO_COMPANY,
            None,
            "assigning",
            entity_name=f"contact {vid} to company {company_id}",
            vid=vid,
            company_id=company_id,
        )
