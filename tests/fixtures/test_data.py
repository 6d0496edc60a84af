# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Sample HubSpot wire payloads for connector tests.

This module contains reusable response bodies in the shapes the v1/v2 API
returns them.
"""

# Single contact profile
SAMPLE_CONTACT = {
    "vid": 101,
    "canonical-vid": 101,
    "is-contact": True,
    "properties": {
        "email": {"value": "ada@example.com", "versions": [{"value": "ada@example.com"}]},
        "firstname": {"value": "Ada"},
        "lastname": {"value": "Lovelace"},
    },
    "identity-profiles": [{"vid": 101, "identities": [{"type": "EMAIL", "value": "ada@example.com"}]}],
    "list-memberships": [{"static-list-id": 7}],
    "form-submissions": [],
    "associated-company": {"company-id": 9, "properties": {"name": {"value": "Acme"}}},
}

# Single company
SAMPLE_COMPANY = {
    "portalId": 62515,
    "companyId": 9,
    "isDeleted": False,
    "source": "API",
    "properties": {
        "name": {"value": "Acme", "timestamp": 1457513066540, "source": "API"},
        "domain": {"value": "acme.com"},
        "num_employees": {"value": 250},
    },
}

# Paged companies, "hasMore" spelling
SAMPLE_COMPANIES_PAGE = {
    "companies": [
        {"companyId": 1, "isDeleted": False, "properties": {"name": {"value": "A"}}},
        {"companyId": 2, "isDeleted": False, "properties": {"name": {"value": "B"}}},
    ],
    "hasMore": True,
    "offset": 2,
}

# Recent contacts, "has-more" spelling with a total
SAMPLE_CONTACTS_PAGE = {
    "contacts": [
        {"vid": 1, "canonical-vid": 1, "properties": {"email": {"value": "a@example.com"}}},
        {"vid": 2, "properties": {"email": {"value": "b@example.com"}}},
    ],
    "has-more": False,
    "vid-offset": 2,
    "offset": 1500000000000,
    "total": 2,
}

# Domain lookup, structured cursor
SAMPLE_DOMAIN_PAGE = {
    "results": [
        {"companyId": 5, "isDeleted": False, "properties": {"domain": {"value": "acme.com"}}},
    ],
    "hasMore": False,
    "offset": {"isPrimary": True, "companyId": 5},
}

# Error responses
SAMPLE_ERROR_RESPONSES = {
    "400": {"status": "error", "message": "Property values were not valid", "correlationId": "abc"},
    "409": {"status": "error", "message": "Contact already exists", "identityProfile": {"vid": 101}},
}

# Property definitions (never flattened)
SAMPLE_PROPERTY_DEFINITIONS = [
    {"name": "email", "label": "Email", "groupName": "contactinformation", "type": "string"},
    {"name": "lifecyclestage", "label": "Lifecycle Stage", "groupName": "contactinformation", "type": "enumeration"},
]
