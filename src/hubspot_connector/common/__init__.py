# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Common definitions for the HubSpot connector.

This module contains the endpoint descriptor table shared by the operation namespaces.
"""

__all__ = []
