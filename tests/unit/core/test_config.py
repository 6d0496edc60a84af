# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import dataclasses

import pytest

from hubspot_connector.core.config import DEFAULT_BASE_URL, HubSpotConfig


def test_defaults():
    config = HubSpotConfig()
    assert config.base_url == "https://api.hubapi.com"
    assert config.http_timeout is None


def test_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        HubSpotConfig().base_url = "https://other"


def test_from_env_defaults(monkeypatch):
    monkeypatch.delenv("HUBSPOT_BASE_URL", raising=False)
    monkeypatch.delenv("HUBSPOT_HTTP_TIMEOUT", raising=False)
    assert HubSpotConfig.from_env() == HubSpotConfig()


def test_from_env_reads_variables(monkeypatch):
    monkeypatch.setenv("HUBSPOT_BASE_URL", "https://sandbox.example.com")
    monkeypatch.setenv("HUBSPOT_HTTP_TIMEOUT", "12.5")
    config = HubSpotConfig.from_env()
    assert config.base_url == "https://sandbox.example.com"
    assert config.http_timeout == 12.5


def test_from_env_blank_values_fall_back(monkeypatch):
    monkeypatch.setenv("HUBSPOT_BASE_URL", "  ")
    monkeypatch.setenv("HUBSPOT_HTTP_TIMEOUT", "")
    config = HubSpotConfig.from_env()
    assert config.base_url == DEFAULT_BASE_URL
    assert config.http_timeout is None


def test_from_env_invalid_timeout(monkeypatch):
    monkeypatch.setenv("HUBSPOT_HTTP_TIMEOUT", "soon")
    with pytest.raises(ValueError):
        HubSpotConfig.from_env()
