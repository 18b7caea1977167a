import logging
from typing import List, Optional

import httpx

from country_browser.core.config import Settings
from country_browser.core.errors import BrowserNotReady, RecordNotVisible
from country_browser.schemas.country import Country, FilterCriteria
from country_browser.schemas.view import BrowserView
from country_browser.services.country_loader import CountryLoader, LoadState, Ready
from country_browser.services import filter_engine
from country_browser.services.presenter import build_view
from country_browser.services.selection import SelectionController, ViewMode

logger = logging.getLogger(__name__)

_UNSET = object()


class BrowserSession:
    """Owns all browser state: load status, filters and selection."""

    def __init__(self, loader: CountryLoader):
        self.loader = loader
        self.criteria = FilterCriteria()
        self.selection = SelectionController()

    @classmethod
    def from_settings(
        cls, cfg: Settings, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "BrowserSession":
        return cls(CountryLoader.from_settings(cfg, transport=transport))

    @property
    def state(self) -> LoadState:
        return self.loader.state

    @property
    def mode(self) -> ViewMode:
        return self.selection.mode

    def start(self):
        self.loader.start()

    async def settled(self) -> LoadState:
        return await self.loader.settled()

    def dispose(self):
        self.loader.dispose()

    async def aclose(self):
        await self.loader.aclose()

    def _require_ready(self):
        state = self.loader.state
        if not isinstance(state, Ready):
            raise BrowserNotReady(f"Countries are not loaded (status: {state.status})")

    def visible(self) -> List[Country]:
        state = self.loader.state
        if not isinstance(state, Ready):
            return []
        return filter_engine.visible(state.records, self.criteria)

    def set_filters(self, text: Optional[str] = None, region=_UNSET) -> FilterCriteria:
        """Update the supplied filter fields; ``region=None`` or ``""`` means all regions."""
        self._require_ready()
        changes = {}
        if text is not None:
            changes["text"] = text
        if region is not _UNSET:
            changes["region"] = region
        if changes:
            self.criteria = FilterCriteria(**{**self.criteria.model_dump(), **changes})
            logger.debug("Filters set to %s", self.criteria)
        return self.criteria

    def select(self, code: str) -> Country:
        self._require_ready()
        wanted = code.upper()
        record = next((r for r in self.visible() if r.code.upper() == wanted), None)
        if record is None:
            raise RecordNotVisible(code)
        self.selection.choose(record)
        return record

    def go_back(self):
        self.selection.go_back()

    def view(self) -> BrowserView:
        return build_view(
            self.loader.state, self.criteria, self.visible(), self.selection.selected
        )
