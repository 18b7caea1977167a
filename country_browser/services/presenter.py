from typing import Optional, Sequence

from country_browser.schemas.country import (
    REGION_OPTIONS,
    Country,
    FilterCriteria,
)
from country_browser.schemas.view import (
    ERROR_PREFIX,
    LOADING_MESSAGE,
    NO_CAPITAL,
    NO_FLAG,
    NO_POPULATION,
    NO_RESULTS_MESSAGE,
    BrowserView,
    CountryDetail,
    FilterControls,
    ListItem,
)
from country_browser.services.country_loader import Failed, LoadState, Ready


def format_population(population: Optional[int]) -> str:
    if population is None:
        return NO_POPULATION
    return f"{population:,}"


def format_capital(capital: Optional[Sequence[str]]) -> str:
    if not capital or not capital[0]:
        return NO_CAPITAL
    return capital[0]


def list_item(record: Country) -> ListItem:
    return ListItem(
        code=record.code,
        name=record.display_name,
        region=record.region,
        label=f"{record.display_name} – {record.region}",
    )


def country_detail(record: Country) -> CountryDetail:
    return CountryDetail(
        code=record.code,
        name=record.display_name,
        region=record.region,
        capital=format_capital(record.capital),
        population=format_population(record.population),
        flag_url=record.flag_url,
    )


def build_view(
    state: LoadState,
    criteria: FilterCriteria,
    visible_records: Sequence[Country],
    selected: Optional[Country],
) -> BrowserView:
    """Turn the browser state into the render contract.

    Loading and error hide everything else. Once ready, the filter
    controls are always shown, and exactly one of list or detail is.
    """
    if isinstance(state, Failed):
        return BrowserView(
            status="error", error_message=f"{ERROR_PREFIX}: {state.reason}"
        )
    if not isinstance(state, Ready):
        return BrowserView(status="loading", loading_message=LOADING_MESSAGE)

    controls = FilterControls(
        text=criteria.text,
        region=criteria.region.value if criteria.region else "",
        region_options=REGION_OPTIONS,
    )
    if selected is not None:
        return BrowserView(
            status="ready", controls=controls, detail=country_detail(selected)
        )

    empty = len(visible_records) == 0
    return BrowserView(
        status="ready",
        controls=controls,
        no_results=empty,
        no_results_message=NO_RESULTS_MESSAGE if empty else None,
        items=[list_item(r) for r in visible_records],
    )


def render_text(view: BrowserView) -> str:
    """Plain-text rendering of a view, one line per entry."""
    if view.status == "loading":
        return view.loading_message or LOADING_MESSAGE
    if view.status == "error":
        return view.error_message or ERROR_PREFIX

    controls = view.controls
    region_label = next(
        (o.label for o in controls.region_options if o.value == controls.region),
        controls.region,
    )
    header = f"Search: {controls.text!r} | Region: {region_label}"

    if view.detail is not None:
        d = view.detail
        return f"""{header}

{d.name} [{d.code}]
- Flag: {d.flag_url or NO_FLAG}
- Region: {d.region}
- Capital: {d.capital}
- Population: {d.population}

[{d.return_label}]"""

    if view.no_results:
        return f"{header}\n\n{view.no_results_message}"
    lines = [f"- {item.label}" for item in view.items or []]
    return header + "\n\n" + "\n".join(lines)
