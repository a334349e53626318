from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Iterable, Literal, Mapping

from taxcalc.errors import ConfigurationError

D = Decimal

JurisdictionKind = Literal["federal", "provincial"]


def _decimals(values: Iterable[D | int | str]) -> tuple[D, ...]:
    return tuple(v if isinstance(v, Decimal) else D(str(v)) for v in values)


def _check_rates(rates: tuple[D, ...]) -> None:
    for rate in rates:
        if rate < 0 or rate > 1:
            raise ConfigurationError(f"Rate {rate} outside [0, 1]")


def _check_widths(widths: tuple[D, ...]) -> None:
    for width in widths:
        if width <= 0:
            raise ConfigurationError(f"Bracket width {width} must be positive")


@dataclass(frozen=True)
class BracketTable:
    """Marginal brackets as widths, with one trailing rate for the open top bracket."""

    widths: tuple[D, ...]
    rates: tuple[D, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "widths", _decimals(self.widths))
        object.__setattr__(self, "rates", _decimals(self.rates))
        if not self.rates:
            raise ConfigurationError("Bracket table needs at least one rate")
        if len(self.rates) != len(self.widths) + 1:
            raise ConfigurationError(
                f"Expected {len(self.widths) + 1} rates for {len(self.widths)} widths, got {len(self.rates)}"
            )
        _check_widths(self.widths)
        _check_rates(self.rates)

    @classmethod
    def from_thresholds(
        cls, thresholds: Iterable[D | int | str], rates: Iterable[D | int | str]
    ) -> "BracketTable":
        # thresholds are cumulative upper bounds, the form CRA publishes
        uppers = _decimals(thresholds)
        widths: list[D] = []
        lower = D("0")
        for upper in uppers:
            widths.append(upper - lower)
            lower = upper
        return cls(widths=tuple(widths), rates=_decimals(rates))

    def __len__(self) -> int:
        return len(self.rates)

    @property
    def thresholds(self) -> tuple[D, ...]:
        running = D("0")
        out: list[D] = []
        for width in self.widths:
            running += width
            out.append(running)
        return tuple(out)


@dataclass(frozen=True)
class ContributionSchedule:
    """Capped contribution tiers above an exemption floor.

    There is no open top bracket: nothing is contributed past
    ``exemption + sum(widths)``.
    """

    exemption: D
    widths: tuple[D, ...]
    rates: tuple[D, ...]
    name: str = "Canada Pension Plan (CPP)"

    def __post_init__(self) -> None:
        object.__setattr__(self, "exemption", _decimals((self.exemption,))[0])
        object.__setattr__(self, "widths", _decimals(self.widths))
        object.__setattr__(self, "rates", _decimals(self.rates))
        if not self.widths:
            raise ConfigurationError("Contribution schedule needs at least one tier")
        if len(self.widths) != len(self.rates):
            raise ConfigurationError("Contribution widths and rates must be index-aligned")
        if self.exemption < 0:
            raise ConfigurationError("Contribution exemption cannot be negative")
        _check_widths(self.widths)
        _check_rates(self.rates)

    @property
    def ceiling(self) -> D:
        return self.exemption + sum(self.widths, D("0"))


@dataclass(frozen=True)
class Jurisdiction:
    code: str
    name: str
    table: BracketTable
    kind: JurisdictionKind = "provincial"


@dataclass(frozen=True)
class TaxYearTables:
    year: int
    federal: Jurisdiction
    contribution: ContributionSchedule
    provinces: Mapping[str, Jurisdiction] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # freeze the mapping so a registered year cannot be edited in place
        object.__setattr__(
            self,
            "provinces",
            MappingProxyType({code.upper(): j for code, j in self.provinces.items()}),
        )


def provincial(code: str, name: str, table: BracketTable) -> Jurisdiction:
    return Jurisdiction(code=code, name=name, table=table, kind="provincial")


def federal(table: BracketTable, name: str = "Federal") -> Jurisdiction:
    return Jurisdiction(code="FED", name=name, table=table, kind="federal")


__all__ = [
    "BracketTable",
    "ContributionSchedule",
    "Jurisdiction",
    "JurisdictionKind",
    "TaxYearTables",
    "federal",
    "provincial",
]
