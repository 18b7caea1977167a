import asyncio

import httpx
import pytest

from country_browser.core.errors import BrowserNotReady, RecordNotVisible
from country_browser.schemas.country import Region
from country_browser.services.browser import BrowserSession
from country_browser.services.country_loader import CountryLoader, Failed, Ready
from country_browser.services.selection import ViewMode
from conftest import API_URL, FULL_PAYLOAD, SCENARIO_PAYLOAD, json_transport

FIELDS = ["name", "region", "capital", "population", "flags", "cca3"]


def _session(transport):
    async def scenario():
        session = BrowserSession(CountryLoader(API_URL, FIELDS, transport=transport))
        session.start()
        await session.settled()
        return session

    return asyncio.run(scenario())


def test_filters_and_selection_are_inert_until_ready():
    session = BrowserSession(CountryLoader(API_URL, FIELDS))

    with pytest.raises(BrowserNotReady):
        session.set_filters(text="fra")
    with pytest.raises(BrowserNotReady):
        session.select("FRA")
    assert session.visible() == []
    assert session.view().status == "loading"


def test_failed_load_suppresses_list_and_detail():
    session = _session(json_transport([], status_code=500))

    assert isinstance(session.state, Failed)
    with pytest.raises(BrowserNotReady):
        session.set_filters(region=Region.EUROPE)
    view = session.view()
    assert view.status == "error"
    assert view.items is None and view.detail is None


def test_set_filters_only_changes_supplied_fields():
    session = _session(json_transport(FULL_PAYLOAD))

    session.set_filters(text="a")
    session.set_filters(region=Region.AFRICA)
    assert session.criteria.text == "a"
    assert [c.code for c in session.visible()] == ["ZAF"]

    session.set_filters(region=None)
    assert session.criteria.region is None
    assert session.criteria.text == "a"


def test_selection_survives_filter_changes():
    session = _session(json_transport(SCENARIO_PAYLOAD))

    brazil = session.select("bra")
    assert session.mode is ViewMode.DETAIL

    session.set_filters(text="zz")
    assert session.visible() == []
    assert session.selection.selected is brazil
    assert session.view().detail.name == "Brazil"

    session.go_back()
    assert session.mode is ViewMode.LIST
    view = session.view()
    assert view.items == [] and view.no_results is True


def test_only_visible_records_can_be_selected():
    session = _session(json_transport(SCENARIO_PAYLOAD))
    session.set_filters(text="fra")

    with pytest.raises(RecordNotVisible):
        session.select("BRA")
    assert session.mode is ViewMode.LIST


def test_dispose_before_resolution_keeps_loading():
    async def scenario():
        release = asyncio.Event()

        async def handler(request):
            await release.wait()
            return httpx.Response(200, json=SCENARIO_PAYLOAD)

        session = BrowserSession(
            CountryLoader(API_URL, FIELDS, transport=httpx.MockTransport(handler))
        )
        session.start()
        session.dispose()
        release.set()
        await session.settled()
        return session

    session = asyncio.run(scenario())
    assert not isinstance(session.state, Ready)
    assert session.view().status == "loading"
