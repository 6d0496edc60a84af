# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Shared request/interpret plumbing for the operation namespaces."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union, TYPE_CHECKING

from ..common.endpoints import PROPERTY_ENDPOINTS, Endpoint
from ..core._error_codes import VALIDATION_ID_REQUIRED
from ..core._logging import safe_log
from ..core.errors import ApiError, ValidationError
from ..core.results import FlatRecord, Outcome, PaginatedEnvelope, RawRecord
from ..data._interpreter import (
    HTTP_OK,
    interpret_collection,
    interpret_create_or_update,
    interpret_single,
)

if TYPE_CHECKING:
    from ..client import HubSpotClient


def _require(value: Any, message: str, subcode: str = VALIDATION_ID_REQUIRED) -> None:
    if value is None:
        raise ValidationError(message, subcode=subcode)


class _OperationsBase:
    """
    Base for operation namespaces.

    :param client: Parent HubSpotClient instance.
    :type client: HubSpotClient
    """

    def __init__(self, client: "HubSpotClient") -> None:
        self._client = client

    @property
    def _logger(self) -> Any:
        return self._client.logger

    def _execute(self, endpoint: Endpoint, query: Optional[Mapping[str, Any]] = None, body: Any = None, **path: Any) -> Outcome:
        spec = endpoint.build(query=query, body=body, **path)
        return self._client._get_gateway().execute(spec)

    def _log_api_error(self, err: ApiError) -> None:
        safe_log(self._logger, logging.WARNING, "%s", err)

    def _get_entity(
        self,
        endpoint: Endpoint,
        flatten: Optional[bool] = None,
        query: Optional[Mapping[str, Any]] = None,
        **path: Any,
    ) -> Union[FlatRecord, RawRecord, None]:
        outcome = self._execute(endpoint, query=query, **path)
        try:
            return interpret_single(outcome, endpoint.entity_name, flatten, endpoint.projector)
        except ApiError as err:
            self._log_api_error(err)
            raise

    def _get_entities(
        self,
        endpoint: Endpoint,
        query: Optional[Mapping[str, Any]] = None,
        flatten: Optional[bool] = None,
        body: Any = None,
        **path: Any,
    ) -> Union[PaginatedEnvelope, RawRecord, List[Any]]:
        outcome = self._execute(endpoint, query=query, body=body, **path)
        try:
            return interpret_collection(
                outcome,
                endpoint.entity_name,
                flatten,
                endpoint.collection_name or "results",
                endpoint.projector,
            )
        except ApiError as err:
            self._log_api_error(err)
            raise

    def _save(
        self,
        endpoint: Endpoint,
        body: Any,
        action: str,
        success_codes: Iterable[int] = (HTTP_OK,),
        entity_name: Optional[str] = None,
        **path: Any,
    ) -> Union[RawRecord, Outcome]:
        outcome = self._execute(endpoint, body=body, **path)
        try:
            return interpret_create_or_update(outcome, entity_name or endpoint.entity_name, action, success_codes)
        except ApiError as err:
            self._log_api_error(err)
            raise


class _PropertyDefinitionsMixin:
    """
    Property definition and property group operations.

    Requires ``_OBJECT_TYPE`` (``"companies"`` or ``"contacts"``) on the concrete class.
    Results are returned as the API sends them; definitions are never flattened.
    """

    _OBJECT_TYPE: str = ""

    def _property_endpoint(self, key: str) -> Endpoint:
        return PROPERTY_ENDPOINTS[self._OBJECT_TYPE][key]

    def get_properties(self) -> Union[RawRecord, List[Any]]:
        """List all property definitions."""
        return self._get_entities(self._property_endpoint("list"), flatten=False)

    def get_property(self, name: str) -> RawRecord:
        """
        Get one property definition by name.

        :raises ValidationError: If ``name`` is None.
        """
        _require(name, "A property name is required.")
        return self._get_entity(self._property_endpoint("get"), flatten=False, name=name)

    def create_property(self, definition: Dict[str, Any]) -> Union[RawRecord, Outcome]:
        """
        Create a property definition.

        Example::

            client.contacts.create_property({
                "name": "favorite_color",
                "label": "Favorite Color",
                "groupName": "contactinformation",
                "type": "string",
                "fieldType": "text",
            })
        """
        return self._save(self._property_endpoint("create"), definition, "creating")

    def get_property_groups(self) -> Union[RawRecord, List[Any]]:
        """List all property groups."""
        return self._get_entities(self._property_endpoint("list_groups"), flatten=False)

    def create_property_group(self, group: Dict[str, Any]) -> Union[RawRecord, Outcome]:
        """Create a property group, e.g. ``{"name": "custom", "displayName": "Custom"}``."""
        return self._save(self._property_endpoint("create_group"), group, "creating")
