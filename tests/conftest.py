# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared pytest fixtures and configuration for HubSpot connector tests.

This module provides common test fixtures, mock objects, and configuration
that can be used across all test modules.
"""

import copy
import logging

import pytest
from unittest.mock import Mock

from hubspot_connector.core.config import HubSpotConfig
from tests.fixtures.test_data import SAMPLE_COMPANY, SAMPLE_CONTACT


@pytest.fixture
def test_config():
    """Test configuration with safe defaults."""
    return HubSpotConfig(base_url="https://api.example.com", http_timeout=5)


@pytest.fixture
def mock_logger():
    """Mock logger recording every log call."""
    return Mock(spec=logging.Logger)


@pytest.fixture
def sample_contact():
    """Raw contact record (deep copy, safe to mutate)."""
    return copy.deepcopy(SAMPLE_CONTACT)


@pytest.fixture
def sample_company():
    """Raw company record (deep copy, safe to mutate)."""
    return copy.deepcopy(SAMPLE_COMPANY)


@pytest.fixture
def sample_flat_company():
    """Flat company data for splay tests."""
    return {
        "name": "Acme",
        "domain": "acme.com",
        "num_employees": 250,
    }
