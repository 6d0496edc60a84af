# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Endpoint descriptors for the HubSpot v1/v2 API.

Each :class:`Endpoint` names the HTTP method, the path template, the body key
holding collection results and the projector applied when flattening. The
operation namespaces build their requests from these descriptors; nothing else in the package knows endpoint paths.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional
from urllib.parse import quote

from ..core.results import RequestSpec
from ..data._projectors import COMPANY, CONTACT, FieldProjector


@dataclass(frozen=True)
class Endpoint:
    """
    Description of one logical HubSpot operation.

    :param entity_name: Display name used in error messages, e.g. ``"Company"``.
    :param method: HTTP method.
    :param path_template: Path with ``{placeholders}`` for path parameters.
    :param collection_name: Body key holding the result array, for collection reads.
    :param projector: Projector applied to flattened records.
    """

    entity_name: str
    method: str
    path_template: str
    collection_name: Optional[str] = None
    projector: Optional[FieldProjector] = None

    def path(self, **path_params: Any) -> str:
        """Render the path, URL-encoding every parameter."""
        encoded = {k: quote(str(v), safe="") for k, v in path_params.items()}
        return self.path_template.format(**encoded)

    def build(
        self,
        query: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        **path_params: Any,
    ) -> RequestSpec:
        """Build the :class:`RequestSpec` for this endpoint."""
        return RequestSpec(self.method, self.path(**path_params), query or {}, body)


# ----------------------------------------------------------------- companies

COMPANIES_PAGED = Endpoint(
    "Company", "GET", "/companies/v2/companies/paged",
    collection_name="companies", projector=COMPANY,
)
COMPANIES_RECENTLY_MODIFIED = Endpoint(
    "Company", "GET", "/companies/v2/companies/recent/modified",
    collection_name="results", projector=COMPANY,
)
COMPANIES_RECENTLY_CREATED = Endpoint(
    "Company", "GET", "/companies/v2/companies/recent/created",
    collection_name="results", projector=COMPANY,
)
COMPANIES_BY_DOMAIN = Endpoint(
    "Company", "POST", "/companies/v2/domains/{domain}/companies",
    collection_name="results", projector=COMPANY,
)
COMPANY_BY_ID = Endpoint("Company", "GET", "/companies/v2/companies/{company_id}", projector=COMPANY)
COMPANY_CREATE = Endpoint("Company", "POST", "/companies/v2/companies", projector=COMPANY)
COMPANY_UPDATE = Endpoint("Company", "PUT", "/companies/v2/companies/{company_id}", projector=COMPANY)

# ------------------------------------------------------------------ contacts

CONTACTS_RECENTLY_MODIFIED = Endpoint(
    "Contact", "GET", "/contacts/v1/lists/recently_updated/contacts/recent",
    collection_name="contacts", projector=CONTACT,
)
CONTACTS_RECENTLY_CREATED = Endpoint(
    "Contact", "GET", "/contacts/v1/lists/all/contacts/recent",
    collection_name="contacts", projector=CONTACT,
)
CONTACTS_SEARCH = Endpoint(
    "Contact", "GET", "/contacts/v1/search/query",
    collection_name="contacts", projector=CONTACT,
)
CONTACT_BY_ID = Endpoint("Contact", "GET", "/contacts/v1/contact/vid/{vid}/profile", projector=CONTACT)
CONTACT_CREATE = Endpoint("Contact", "POST", "/contacts/v1/contact", projector=CONTACT)
# Profile updates use POST, unlike other updates, and reply 204 with no body.
CONTACT_UPDATE = Endpoint("Contact", "POST", "/contacts/v1/contact/vid/{vid}/profile", projector=CONTACT)
CONTACT_ASSIGN_TO_COMPANY = Endpoint(
    "Contact", "PUT", "/companies/v2/companies/{company_id}/contacts/{vid}",
)

# ---------------------------------------------------- property definitions
# Keyed by object type ("companies" or "contacts"). Never flattened.


def _property_endpoints(object_type: str, label: str) -> Mapping[str, Endpoint]:
    base = f"/properties/v1/{object_type}"
    return {
        "list_groups": Endpoint(f"{label} Property Group", "GET", f"{base}/groups"),
        "create_group": Endpoint(f"{label} Property Group", "POST", f"{base}/groups"),
        "list": Endpoint(f"{label} Property", "GET", f"{base}/properties"),
        "get": Endpoint(f"{label} Property", "GET", f"{base}/properties/named/{{name}}"),
        "create": Endpoint(f"{label} Property", "POST", f"{base}/properties"),
    }


PROPERTY_ENDPOINTS: Mapping[str, Mapping[str, Endpoint]] = {
    "companies": _property_endpoints("companies", "Company"),
    "contacts": _property_endpoints("contacts", "Contact"),
}

# Properties requested by the domain lookup.
DOMAIN_LOOKUP_PROPERTIES = ("domain", "createdate", "name", "hs_lastmodifieddate")
