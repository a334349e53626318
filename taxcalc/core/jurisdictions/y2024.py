from __future__ import annotations

from decimal import Decimal

from taxcalc.core.jurisdictions.base import (
    BracketTable,
    ContributionSchedule,
    TaxYearTables,
    federal,
    provincial,
)

D = Decimal

FEDERAL_2024 = BracketTable.from_thresholds(
    (55_867, 111_733, 173_205, 246_752),
    ("0.15", "0.205", "0.26", "0.29", "0.33"),
)

ON_2024 = BracketTable.from_thresholds(
    (51_446, 102_894, 150_000, 220_000),
    ("0.0505", "0.0915", "0.1116", "0.1216", "0.1316"),
)

SK_2024 = BracketTable.from_thresholds(
    (49_720, 142_058),
    ("0.105", "0.125", "0.145"),
)

NB_2024 = BracketTable.from_thresholds(
    (49_958, 99_916, 185_064),
    ("0.0940", "0.1400", "0.1600", "0.1900"),
)

NT_2024 = BracketTable.from_thresholds(
    (50_597, 101_198, 164_525),
    ("0.0590", "0.0860", "0.1220", "0.1405"),
)

NU_2024 = BracketTable.from_thresholds(
    (53_268, 106_537, 172_155),
    ("0.0400", "0.0700", "0.0900", "0.1150"),
)

PE_2024 = BracketTable.from_thresholds(
    (31_984, 63_969),
    ("0.0965", "0.1363", "0.1665"),
)

# YMPE 68,500 and YAMPE 73,200
CPP_2024 = ContributionSchedule(
    exemption=D("3500"),
    widths=(D("65000"), D("4700")),
    rates=(D("0.0595"), D("0.04")),
)

TABLES_2024 = TaxYearTables(
    year=2024,
    federal=federal(FEDERAL_2024),
    contribution=CPP_2024,
    provinces={
        "ON": provincial("ON", "Ontario", ON_2024),
        "SK": provincial("SK", "Saskatchewan", SK_2024),
        "NB": provincial("NB", "New Brunswick", NB_2024),
        "NT": provincial("NT", "Northwest Territories", NT_2024),
        "NU": provincial("NU", "Nunavut", NU_2024),
        "PE": provincial("PE", "Prince Edward Island", PE_2024),
    },
)
