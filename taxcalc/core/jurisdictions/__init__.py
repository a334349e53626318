from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping

from taxcalc.core.jurisdictions.base import (
    BracketTable,
    ContributionSchedule,
    Jurisdiction,
    TaxYearTables,
)
from taxcalc.core.jurisdictions.y2024 import TABLES_2024
from taxcalc.core.jurisdictions.y2025 import TABLES_2025
from taxcalc.errors import (
    ConfigurationError,
    UnknownJurisdictionError,
    UnknownTaxYearError,
)

FEDERAL_CODE = "FED"
DEFAULT_TAX_YEAR = 2025


class JurisdictionRegistry:
    """Read-only lookup of bracket tables keyed by tax year and jurisdiction code.

    Build one from any set of :class:`TaxYearTables` to swap in synthetic
    tables; the algorithms never reach into the registry themselves.
    """

    def __init__(
        self,
        tables: Iterable[TaxYearTables],
        default_year: int | None = None,
    ) -> None:
        by_year: dict[int, TaxYearTables] = {}
        for entry in tables:
            if entry.year in by_year:
                raise ConfigurationError(f"Tax year {entry.year} registered twice")
            by_year[entry.year] = entry
        if not by_year:
            raise ConfigurationError("Registry needs at least one tax year")
        resolved_default = default_year if default_year is not None else max(by_year)
        if resolved_default not in by_year:
            raise UnknownTaxYearError(resolved_default)
        self._by_year: Mapping[int, TaxYearTables] = MappingProxyType(by_year)
        self._default_year = resolved_default

    @property
    def default_year(self) -> int:
        return self._default_year

    @property
    def years(self) -> tuple[int, ...]:
        return tuple(sorted(self._by_year))

    def tables(self, year: int | str | None = None) -> TaxYearTables:
        key = self._default_year if year is None else _year_key(year)
        try:
            return self._by_year[key]
        except KeyError as exc:
            raise UnknownTaxYearError(key) from exc

    def jurisdiction(self, code: str, year: int | str | None = None) -> Jurisdiction:
        tables = self.tables(year)
        normalized = (code or "").strip().upper()
        if normalized == FEDERAL_CODE:
            return tables.federal
        return self.province(normalized, tables.year)

    def province(self, code: str, year: int | str | None = None) -> Jurisdiction:
        tables = self.tables(year)
        normalized = (code or "").strip().upper()
        try:
            return tables.provinces[normalized]
        except KeyError as exc:
            raise UnknownJurisdictionError(normalized, tables.year) from exc

    def brackets_for(self, code: str, year: int | str | None = None) -> BracketTable:
        return self.jurisdiction(code, year).table

    def rates_for(self, code: str, year: int | str | None = None) -> tuple[Decimal, ...]:
        return self.jurisdiction(code, year).table.rates

    def display_name_for(self, code: str, year: int | str | None = None) -> str:
        return self.jurisdiction(code, year).name

    def contribution_for(self, year: int | str | None = None) -> ContributionSchedule:
        return self.tables(year).contribution

    def provinces(self, year: int | str | None = None) -> list[Jurisdiction]:
        return list(self.tables(year).provinces.values())

    def supported_provinces(self, year: int | str | None = None) -> list[str]:
        return sorted(self.tables(year).provinces)

    def __contains__(self, code: object) -> bool:
        if not isinstance(code, str):
            return False
        try:
            self.jurisdiction(code)
        except ConfigurationError:
            return False
        return True


def _year_key(year: int | str) -> int:
    try:
        return int(year)
    except (TypeError, ValueError) as exc:
        raise UnknownTaxYearError(year) from exc


@lru_cache(maxsize=1)
def default_registry() -> JurisdictionRegistry:
    return JurisdictionRegistry((TABLES_2024, TABLES_2025), default_year=DEFAULT_TAX_YEAR)


__all__ = [
    "BracketTable",
    "ContributionSchedule",
    "DEFAULT_TAX_YEAR",
    "FEDERAL_CODE",
    "Jurisdiction",
    "JurisdictionRegistry",
    "TaxYearTables",
    "default_registry",
]
