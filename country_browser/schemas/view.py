from pydantic import BaseModel
from typing import List, Literal, Optional

from country_browser.schemas.country import RegionOption

LOADING_MESSAGE = "Loading data..."
ERROR_PREFIX = "Something went wrong"
NO_RESULTS_MESSAGE = "No results to display"
SEARCH_PLACEHOLDER = "Search..."
NO_CAPITAL = "None"
NO_POPULATION = "N/A"
NO_FLAG = "N/A"
RETURN_LABEL = "Hide details"


class FilterControls(BaseModel):
    text: str
    region: str
    placeholder: str = SEARCH_PLACEHOLDER
    region_options: List[RegionOption]


class ListItem(BaseModel):
    code: str
    name: str
    region: str
    label: str


class CountryDetail(BaseModel):
    code: str
    name: str
    region: str
    capital: str
    population: str
    flag_url: Optional[str] = None
    return_label: str = RETURN_LABEL


class BrowserView(BaseModel):
    status: Literal["loading", "error", "ready"]
    loading_message: Optional[str] = None
    error_message: Optional[str] = None
    no_results: bool = False
    no_results_message: Optional[str] = None
    controls: Optional[FilterControls] = None
    items: Optional[List[ListItem]] = None
    detail: Optional[CountryDetail] = None
