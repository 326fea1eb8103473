"""
City catalog: read-only reference data the engine looks cities up in.

Records are validated with pydantic on the way in (non-empty name, latitude
in [-90, 90], longitude in [-180, 180]) and names must be unique.  Lookup is
by exact name; nothing is normalised.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

from ticket_to_europe.domain.entities import City, Coordinate

from .european_cities import EUROPEAN_CITIES


class CatalogError(ValueError):
    """Raised when catalog data breaks the catalog contract."""


class CityRecord(BaseModel):
    name: str = Field(..., min_length=1)
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)

    model_config = {"frozen": True}

    def to_city(self) -> City:
        return City(self.name, Coordinate(self.lat, self.lng))


class CityCatalog:
    def __init__(self, cities: Iterable[City]):
        self._cities: tuple[City, ...] = tuple(cities)
        if not self._cities:
            raise CatalogError("City catalog is empty")

        self._by_name: dict[str, City] = {}
        for city in self._cities:
            if city.name in self._by_name:
                raise CatalogError(f"Duplicate city name: {city.name!r}")
            self._by_name[city.name] = city

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> CityCatalog:
        try:
            parsed = [CityRecord.model_validate(r) for r in records]
        except ValidationError as exc:
            raise CatalogError(f"Invalid city record: {exc}") from exc
        return cls(r.to_city() for r in parsed)

    def get(self, name: str) -> Optional[City]:
        return self._by_name.get(name)

    def names(self) -> list[str]:
        return [c.name for c in self._cities]

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[City]:
        return iter(self._cities)

    def __len__(self) -> int:
        return len(self._cities)


def load_default_catalog() -> CityCatalog:
    """Build the catalog from the bundled European city list."""
    return CityCatalog.from_records(EUROPEAN_CITIES)
