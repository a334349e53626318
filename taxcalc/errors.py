from __future__ import annotations


class ConfigurationError(LookupError):
    """A bracket table or jurisdiction lookup that cannot be satisfied.

    The supported jurisdictions are a closed set fixed when the registry is
    built, so hitting this is a programming or configuration defect rather
    than something a caller should recover from.
    """


class UnknownJurisdictionError(ConfigurationError, KeyError):
    def __init__(self, code: str, year: int | str) -> None:
        self.code = code
        self.year = year
        super().__init__(f"No bracket table registered for {code} in {year}")

    def __str__(self) -> str:
        return self.args[0]


class UnknownTaxYearError(ConfigurationError, KeyError):
    def __init__(self, year: int | str) -> None:
        self.year = year
        super().__init__(f"No bracket tables registered for tax year {year}")

    def __str__(self) -> str:
        return self.args[0]


__all__ = [
    "ConfigurationError",
    "UnknownJurisdictionError",
    "UnknownTaxYearError",
]
