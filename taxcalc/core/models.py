from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from taxcalc.core.normalize import parse_amount


class CalculationInput(BaseModel):
    income: Decimal = Decimal("0")
    supplementary_income: Decimal = Decimal("0")
    province: str = ""
    tax_year: int | None = None

    model_config = ConfigDict(frozen=True)

    _normalize_amounts = field_validator(
        "income",
        "supplementary_income",
        mode="before",
    )(parse_amount)

    @field_validator("province", mode="before")
    @classmethod
    def _normalize_province(cls, value: str | None) -> str:
        return (value or "").strip().upper()

    @property
    def gross(self) -> Decimal:
        return self.income + self.supplementary_income


class BracketLine(BaseModel):
    label: str
    rate: Decimal
    amount: Decimal
    exempt: bool = False

    model_config = ConfigDict(frozen=True)


class SchemeBreakdown(BaseModel):
    code: str
    name: str
    lines: tuple[BracketLine, ...] = ()
    total: Decimal = Decimal("0")

    model_config = ConfigDict(frozen=True)


class Summary(BaseModel):
    gross: Decimal
    federal_tax: Decimal
    provincial_tax: Decimal
    cpp: Decimal
    net_income: Decimal = Field(description="Gross less federal and provincial tax")
    take_home: Decimal = Field(description="Net income less CPP contributions")

    model_config = ConfigDict(frozen=True)

    @property
    def total_tax(self) -> Decimal:
        return self.federal_tax + self.provincial_tax


class Calculation(BaseModel):
    tax_year: int
    province: str
    province_name: str
    income: Decimal
    supplementary_income: Decimal
    federal: SchemeBreakdown
    provincial: SchemeBreakdown
    cpp: SchemeBreakdown
    annual: Summary
    monthly: Summary
    periods_per_year: int = 12

    model_config = ConfigDict(frozen=True)
