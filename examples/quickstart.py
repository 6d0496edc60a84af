# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
HubSpot connector quickstart.

Walks through the company and contact operations against a real portal:
create a company from a flat record, page through companies, look one up
by domain, create a contact, assign it to the company and update it.

Prerequisites:
- ``pip install -e .`` from the repository root
- ``HUBSPOT_API_KEY`` set to a portal API key (use a test portal)

Usage:
    python examples/quickstart.py
"""

import logging
import os
import sys
import uuid

from hubspot_connector import ApiError, HubSpotClient, HubSpotError


def log_call(call: str) -> None:
    print({"call": call})


def page_companies(client: HubSpotClient, limit: int = 5, max_pages: int = 3) -> None:
    """Follow the offset cursor until hasMore is false or max_pages is reached."""
    offset = None
    for page_no in range(1, max_pages + 1):
        log_call(f"client.companies.get_all(offset={offset!r}, limit={limit})")
        page = client.companies.get_all(offset=offset, limit=limit, properties=["name", "domain"])
        results = page.get("results") or []
        print(f"Page {page_no}: {len(results)} companies")
        for company in results:
            print(f"  {company['companyId']}: {company.get('name')} ({company.get('domain')})")
        if not page.get("hasMore"):
            break
        offset = page["offset"]


def main() -> int:
    hapikey = os.environ.get("HUBSPOT_API_KEY", "").strip()
    if not hapikey:
        print("Set HUBSPOT_API_KEY to run this example.")
        return 1

    logging.basicConfig(level=logging.INFO)
    suffix = uuid.uuid4().hex[:8]
    domain = f"quickstart-{suffix}.example.com"

    with HubSpotClient(hapikey) as client:
        try:
            log_call("client.companies.create(..., splay=True)")
            company = client.companies.create({"name": f"Quickstart {suffix}", "domain": domain}, splay=True)
            company_id = company["companyId"]
            print(f"Created company {company_id}: {company.get('name')}")

            page_companies(client)

            log_call(f"client.companies.get_by_domain({domain!r})")
            found = client.companies.get_by_domain(domain)
            print(f"Domain lookup returned {len(found.get('results') or [])} result(s), cursor {found.get('offset')}")

            log_call("client.contacts.create(..., splay=True)")
            contact = client.contacts.create(
                {"email": f"ada-{suffix}@example.com", "firstname": "Ada", "lastname": "Lovelace"},
                splay=True,
            )
            vid = contact["vid"]
            print(f"Created contact {vid}")

            log_call(f"client.contacts.assign_to_company({vid}, {company_id})")
            client.contacts.assign_to_company(vid, company_id)

            log_call(f"client.contacts.update({vid}, ...)")
            outcome = client.contacts.update(vid, {"lifecyclestage": "customer"}, splay=True)
            print(f"Update accepted with HTTP {outcome.status_code}")

            refreshed = client.contacts.get(vid)
            print(f"Contact {vid} lifecycle stage: {refreshed.get('lifecyclestage')}")
        except ApiError as err:
            print(f"API error {err.status_code}: {err.message}")
            return 1
        except HubSpotError as err:
            print(f"Request failed: {err}")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
