# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Operation namespace classes for the HubSpot connector.

This module contains the operation namespace classes that organize
related operations under intuitive namespaces:
- CompanyOperations: company reads, writes and property definitions
- ContactOperations: contact reads, writes, search and property definitions
"""

__all__ = []
