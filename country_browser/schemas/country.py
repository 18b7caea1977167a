import math
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Region(str, Enum):
    EUROPE = "Europe"
    ASIA = "Asia"
    AFRICA = "Africa"
    AMERICAS = "Americas"
    OCEANIA = "Oceania"


ALL_REGIONS_LABEL = "All regions"


class RegionOption(BaseModel):
    value: str
    label: str


# "All regions" first, then the fixed categories in display order
REGION_OPTIONS: List[RegionOption] = [RegionOption(value="", label=ALL_REGIONS_LABEL)] + [
    RegionOption(value=r.value, label=r.value) for r in Region
]


def _str_or_empty(v):
    return v if isinstance(v, str) else ""


class CountryName(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    common: str = ""

    @field_validator("common", mode="before")
    @classmethod
    def lenient_common(cls, v):
        return _str_or_empty(v)


class CountryFlags(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    png: Optional[str] = None

    @field_validator("png", mode="before")
    @classmethod
    def lenient_png(cls, v):
        return v if isinstance(v, str) and v else None


class Country(BaseModel):
    """One record from the REST Countries ``/all`` endpoint.

    Records are taken as the source sends them: a missing or mistyped
    field becomes an empty default instead of rejecting the record.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    cca3: str = ""
    name: Optional[CountryName] = None
    region: str = ""
    capital: Optional[List[str]] = None
    population: Optional[int] = None
    flags: Optional[CountryFlags] = None

    @model_validator(mode="before")
    @classmethod
    def non_object_is_blank(cls, data):
        if isinstance(data, (dict, BaseModel)):
            return data
        return {}

    @field_validator("cca3", "region", mode="before")
    @classmethod
    def lenient_text(cls, v):
        return _str_or_empty(v)

    @field_validator("name", "flags", mode="before")
    @classmethod
    def lenient_object(cls, v):
        return v if isinstance(v, dict) else None

    @field_validator("capital", mode="before")
    @classmethod
    def lenient_capital(cls, v):
        if not isinstance(v, list):
            return None
        return [c for c in v if isinstance(c, str)]

    @field_validator("population", mode="before")
    @classmethod
    def lenient_population(cls, v):
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            return None
        if not math.isfinite(v) or v != int(v) or v < 0:
            return None
        return int(v)

    @property
    def code(self) -> str:
        return self.cca3

    @property
    def display_name(self) -> str:
        return self.name.common if self.name is not None else ""

    @property
    def flag_url(self) -> Optional[str]:
        return self.flags.png if self.flags is not None else None


class FilterCriteria(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = ""
    region: Optional[Region] = None

    @field_validator("region", mode="before")
    @classmethod
    def blank_region_means_all(cls, v):
        # the "All regions" option submits an empty value
        if isinstance(v, str) and not v.strip():
            return None
        return v


class FilterUpdate(BaseModel):
    """Body of ``PUT /v1/browser/filters``; omitted fields stay unchanged."""

    text: Optional[str] = None
    region: Optional[str] = Field(
        default=None, description='Region name, or "" for all regions'
    )

    @field_validator("region")
    @classmethod
    def known_region(cls, v):
        if v is None or v == "":
            return v
        if v not in {r.value for r in Region}:
            raise ValueError(f"Unknown region: {v}")
        return v
