from enum import Enum
from typing import Optional

from country_browser.schemas.country import Country


class ViewMode(str, Enum):
    LIST = "list"
    DETAIL = "detail"


class SelectionController:
    """Holds at most one focused country.

    Only ``choose`` and ``go_back`` move between list and detail view;
    filter or load changes never touch the selection.
    """

    def __init__(self):
        self._selected: Optional[Country] = None

    @property
    def selected(self) -> Optional[Country]:
        return self._selected

    @property
    def mode(self) -> ViewMode:
        return ViewMode.LIST if self._selected is None else ViewMode.DETAIL

    def choose(self, record: Country):
        self._selected = record

    def go_back(self):
        self._selected = None
