"""Static international reference data."""

from .subdivisions import COUNTRY_SUBDIVISIONS, CountrySubdivision, SubdivisionCatalog

__all__ = ["COUNTRY_SUBDIVISIONS", "CountrySubdivision", "SubdivisionCatalog"]
