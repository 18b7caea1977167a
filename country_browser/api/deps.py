from fastapi import HTTPException, Request

from country_browser.services.browser import BrowserSession


def get_browser_session(request: Request) -> BrowserSession:
    session = getattr(request.app.state, "browser", None)
    if session is None:
        raise HTTPException(status_code=503, detail="Browser is not running")
    return session
