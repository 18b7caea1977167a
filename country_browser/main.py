from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from country_browser.api.v1 import browser
from country_browser.core.config import Settings, settings as default_settings
from country_browser.core.logging_config import setup_logging
from country_browser.services.browser import BrowserSession


def create_app(
    cfg: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    cfg = cfg or default_settings
    logger = setup_logging(cfg.LOG_LEVEL)

    app = FastAPI(
        title=cfg.SERVICE_NAME,
        description="Searchable, region-filterable country directory",
        version="1.0.0",
    )
    app.state.browser = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(browser.router, prefix="/v1", tags=["browser"])

    @app.get("/")
    async def root():
        return {"status": "ok", "service": cfg.SERVICE_NAME, "version": "1.0.0"}

    @app.get("/health")
    async def health(request: Request):
        session = request.app.state.browser
        load_status = session.state.status if session is not None else "stopped"
        return {"status": "healthy", "service": cfg.SERVICE_NAME, "load": load_status}

    @app.on_event("startup")
    async def startup_event():
        session = BrowserSession.from_settings(cfg, transport=transport)
        app.state.browser = session
        if cfg.AUTOLOAD:
            session.start()
        logger.info("🚀 %s started", cfg.SERVICE_NAME)

    @app.on_event("shutdown")
    async def shutdown_event():
        session = app.state.browser
        if session is not None:
            await session.aclose()
        logger.info("🛑 %s shutting down", cfg.SERVICE_NAME)

    return app


app = create_app()
