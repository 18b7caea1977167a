"""Pytest configuration and fixtures."""

import httpx
import pytest

from country_browser.core.config import Settings
from country_browser.schemas.country import Country

API_URL = "https://countries.test/v3.1/all"

FRANCE = {
    "cca3": "FRA",
    "name": {"common": "France", "official": "French Republic"},
    "region": "Europe",
    "capital": ["Paris"],
    "population": 67000000,
    "flags": {"png": "https://flagcdn.com/w320/fr.png"},
}
BRAZIL = {
    "cca3": "BRA",
    "name": {"common": "Brazil", "official": "Federative Republic of Brazil"},
    "region": "Americas",
    "capital": ["Brasília"],
    "population": 213000000,
    "flags": {"png": "https://flagcdn.com/w320/br.png"},
}
SOUTH_AFRICA = {
    "cca3": "ZAF",
    "name": {"common": "South Africa"},
    "region": "Africa",
    "capital": ["Pretoria", "Bloemfontein", "Cape Town"],
    "population": 59308690,
    "flags": {"png": "https://flagcdn.com/w320/za.png"},
}
ANTARCTICA = {
    "cca3": "ATA",
    "name": {"common": "Antarctica"},
    "region": "Antarctic",
    "capital": [],
    "population": 1000,
    "flags": {"png": "https://flagcdn.com/w320/aq.png"},
}
MACAU = {
    "cca3": "MAC",
    "name": {"common": "Macau"},
    "region": "Asia",
    "population": 649342,
    "flags": {"png": "https://flagcdn.com/w320/mo.png"},
}

SCENARIO_PAYLOAD = [FRANCE, BRAZIL]
FULL_PAYLOAD = [FRANCE, BRAZIL, SOUTH_AFRICA, ANTARCTICA, MACAU]


def json_transport(payload, status_code=200, seen=None):
    """MockTransport answering every request with ``payload``."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, json=payload)

    return httpx.MockTransport(handler)


@pytest.fixture
def test_settings():
    return Settings(COUNTRIES_API_URL=API_URL, LOG_LEVEL="DEBUG")


@pytest.fixture
def scenario_records():
    return [Country.model_validate(c) for c in SCENARIO_PAYLOAD]


@pytest.fixture
def full_records():
    return [Country.model_validate(c) for c in FULL_PAYLOAD]
