from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from typing import List

from country_browser.api.deps import get_browser_session
from country_browser.core.errors import BrowserNotReady, RecordNotVisible
from country_browser.schemas.country import REGION_OPTIONS, FilterUpdate, RegionOption
from country_browser.schemas.view import BrowserView
from country_browser.services.browser import BrowserSession
from country_browser.services.presenter import render_text

router = APIRouter()


@router.get("/browser", response_model=BrowserView)
async def get_view(session: BrowserSession = Depends(get_browser_session)):
    return session.view()


@router.get("/browser/text", response_class=PlainTextResponse)
async def get_view_text(session: BrowserSession = Depends(get_browser_session)):
    """Same view as ``/browser``, rendered as plain text."""
    return render_text(session.view())


@router.get("/regions", response_model=List[RegionOption])
async def list_regions():
    return REGION_OPTIONS


@router.put("/browser/filters", response_model=BrowserView)
async def update_filters(
    body: FilterUpdate, session: BrowserSession = Depends(get_browser_session)
):
    kwargs = {"text": body.text}
    if "region" in body.model_fields_set:
        kwargs["region"] = body.region
    try:
        session.set_filters(**kwargs)
    except BrowserNotReady as e:
        raise HTTPException(status_code=409, detail=str(e))
    return session.view()


@router.post("/browser/selection/{code}", response_model=BrowserView)
async def select_country(
    code: str, session: BrowserSession = Depends(get_browser_session)
):
    try:
        session.select(code)
    except BrowserNotReady as e:
        raise HTTPException(status_code=409, detail=str(e))
    except RecordNotVisible:
        raise HTTPException(status_code=404, detail="Country not found")
    return session.view()


@router.delete("/browser/selection", response_model=BrowserView)
async def clear_selection(session: BrowserSession = Depends(get_browser_session)):
    """The "hide details" action: back to the list view."""
    session.go_back()
    return session.view()
