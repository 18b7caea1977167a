from typing import List, Optional, Sequence

from country_browser.schemas.country import Country, FilterCriteria, Region


def matches_text(record: Country, text: str) -> bool:
    """Case-insensitive substring match on the display name ("fra" matches "France")."""
    return text.lower() in record.display_name.lower()


def matches_region(record: Country, region: Optional[Region]) -> bool:
    if region is None:
        return True
    return record.region == region.value


def visible(records: Sequence[Country], criteria: FilterCriteria) -> List[Country]:
    """Stable filter: keeps the input order, never re-sorts."""
    return [
        r
        for r in records
        if matches_text(r, criteria.text) and matches_region(r, criteria.region)
    ]
