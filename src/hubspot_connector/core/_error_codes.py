# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

# Transport subcode
TRANSPORT_ERROR = "transport_error"

# Validation subcodes
VALIDATION_ID_REQUIRED = "validation_id_required"
VALIDATION_SEARCH_TERM_REQUIRED = "validation_search_term_required"
VALIDATION_DOMAIN_REQUIRED = "validation_domain_required"
VALIDATION_UNKNOWN_PROJECTOR = "validation_unknown_projector"


def http_subcode(status_code: int) -> str:
    """Return the ``http_<status>`` subcode for a response status."""
    return f"http_{status_code}"
