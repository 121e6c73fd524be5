"""ISO 3166-2 country subdivisions.

Defines the :class:`CountrySubdivision` value object, a read-only
:class:`SubdivisionCatalog` with case-insensitive lookups, and the default
``COUNTRY_SUBDIVISIONS`` catalog (United States states, district and outlying
territories).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from reflowkit.domain.errors import DuplicateSubdivisionError

# pylint: disable=too-few-public-methods


@dataclass(frozen=True)
class CountrySubdivision:
    """A single subdivision, e.g. ``US-CA``.

    Attributes:
        code: ISO 3166-2 code, country code first (``US-CA``).
        name: English short name.
        category: State, district, outlying territory, parish, emirate, etc.
    """

    code: str
    name: str
    category: str

    @property
    def country_code(self) -> str:
        """The two-letter country part of the code."""
        return self.code[:2]

    @property
    def subdivision_code(self) -> str:
        """The part of the code after the ``XX-`` country prefix."""
        return self.code[3:]


class SubdivisionCatalog:
    """Read-only collection of subdivisions keyed by code.

    Lookups by code, country and category are case-insensitive.
    """

    def __init__(self, subdivisions: Iterable[CountrySubdivision]) -> None:
        self._by_code: dict[str, CountrySubdivision] = {}
        for subdivision in subdivisions:
            key = subdivision.code.upper()
            if key in self._by_code:
                raise DuplicateSubdivisionError(key)
            self._by_code[key] = subdivision

    def get(self, code: str) -> CountrySubdivision | None:
        """Return the subdivision for ``code``, or None."""
        return self._by_code.get(code.upper())

    def __getitem__(self, code: str) -> CountrySubdivision:
        if (subdivision := self.get(code)) is None:
            raise KeyError(code)
        return subdivision

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.upper() in self._by_code

    def __iter__(self) -> Iterator[CountrySubdivision]:
        return iter(self._by_code.values())

    def __len__(self) -> int:
        return len(self._by_code)

    def by_country(self, country_code: str) -> list[CountrySubdivision]:
        """Return the subdivisions of one country, in catalog order."""
        wanted = country_code.upper()
        return [s for s in self if s.country_code == wanted]

    def by_category(self, category: str) -> list[CountrySubdivision]:
        """Return the subdivisions of one category, in catalog order."""
        wanted = category.lower()
        return [s for s in self if s.category.lower() == wanted]


_US = [
    ("US-AL", "Alabama", "state"),
    ("US-AK", "Alaska", "state"),
    ("US-AZ", "Arizona", "state"),
    ("US-AR", "Arkansas", "state"),
    ("US-CA", "California", "state"),
    ("US-CO", "Colorado", "state"),
    ("US-CT", "Connecticut", "state"),
    ("US-DE", "Delaware", "state"),
    ("US-FL", "Florida", "state"),
    ("US-GA", "Georgia", "state"),
    ("US-HI", "Hawaii", "state"),
    ("US-ID", "Idaho", "state"),
    ("US-IL", "Illinois", "state"),
    ("US-IN", "Indiana", "state"),
    ("US-IA", "Iowa", "state"),
    ("US-KS", "Kansas", "state"),
    ("US-KY", "Kentucky", "state"),
    ("US-LA", "Louisiana", "state"),
    ("US-ME", "Maine", "state"),
    ("US-MD", "Maryland", "state"),
    ("US-MA", "Massachusetts", "state"),
    ("US-MI", "Michigan", "state"),
    ("US-MN", "Minnesota", "state"),
    ("US-MS", "Mississippi", "state"),
    ("US-MO", "Missouri", "state"),
    ("US-MT", "Montana", "state"),
    ("US-NE", "Nebraska", "state"),
    ("US-NV", "Nevada", "state"),
    ("US-NH", "New Hampshire", "state"),
    ("US-NJ", "New Jersey", "state"),
    ("US-NM", "New Mexico", "state"),
    ("US-NY", "New York", "state"),
    ("US-NC", "North Carolina", "state"),
    ("US-ND", "North Dakota", "state"),
    ("US-OH", "Ohio", "state"),
    ("US-OK", "Oklahoma", "state"),
    ("US-OR", "Oregon", "state"),
    ("US-PA", "Pennsylvania", "state"),
    ("US-RI", "Rhode Island", "state"),
    ("US-SC", "South Carolina", "state"),
    ("US-SD", "South Dakota", "state"),
    ("US-TN", "Tennessee", "state"),
    ("US-TX", "Texas", "state"),
    ("US-UT", "Utah", "state"),
    ("US-VT", "Vermont", "state"),
    ("US-VA", "Virginia", "state"),
    ("US-WA", "Washington", "state"),
    ("US-WV", "West Virginia", "state"),
    ("US-WI", "Wisconsin", "state"),
    ("US-WY", "Wyoming", "state"),
    ("US-DC", "District of Columbia", "district"),
    ("US-AS", "American Samoa", "outlying territory"),
    ("US-GU", "Guam", "outlying territory"),
    ("US-MP", "Northern Mariana Islands", "outlying territory"),
    ("US-PR", "Puerto Rico", "outlying territory"),
    ("US-UM", "United States Minor Outlying Islands", "outlying territory"),
    ("US-VI", "Virgin Islands, U.S.", "outlying territory"),
]

COUNTRY_SUBDIVISIONS = SubdivisionCatalog(CountrySubdivision(*row) for row in _US)
