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

# Federal brackets (2025), expressed as widths between thresholds
FEDERAL_2025 = BracketTable(
    widths=(D("57375"), D("57375"), D("63132"), D("75532")),
    rates=(D("0.15"), D("0.205"), D("0.26"), D("0.29"), D("0.33")),
)

ON_2025 = BracketTable(
    widths=(D("52886"), D("52889"), D("44225"), D("26752")),
    rates=(D("0.0505"), D("0.0915"), D("0.1116"), D("0.1216"), D("0.1316")),
)

MB_2025 = BracketTable(
    widths=(D("47564"), D("53636")),
    rates=(D("0.108"), D("0.1275"), D("0.174")),
)

SK_2025 = BracketTable(
    widths=(D("53463"), D("99287")),
    rates=(D("0.105"), D("0.125"), D("0.145")),
)

AB_2025 = BracketTable.from_thresholds(
    (148_269, 177_922, 237_230, 355_845),
    ("0.10", "0.12", "0.13", "0.14", "0.15"),
)

BC_2025 = BracketTable.from_thresholds(
    (47_937, 95_875, 110_076, 133_664, 181_232),
    ("0.0506", "0.0770", "0.1050", "0.1229", "0.1470", "0.1680"),
)

NB_2025 = BracketTable.from_thresholds(
    (49_958, 99_916, 185_064),
    ("0.0940", "0.1400", "0.1600", "0.1900"),
)

NL_2025 = BracketTable.from_thresholds(
    (43_198, 86_395, 154_244, 196_456, 275_862, 551_725),
    ("0.0870", "0.1250", "0.1330", "0.1530", "0.1730", "0.1830", "0.1980"),
)

NS_2025 = BracketTable.from_thresholds(
    (29_590, 59_180, 93_000, 150_000),
    ("0.0879", "0.1495", "0.1667", "0.1750", "0.2100"),
)

NT_2025 = BracketTable.from_thresholds(
    (50_597, 101_198, 164_525),
    ("0.0590", "0.0860", "0.1220", "0.1405"),
)

NU_2025 = BracketTable.from_thresholds(
    (53_268, 106_537, 172_155),
    ("0.0400", "0.0700", "0.0900", "0.1150"),
)

PE_2025 = BracketTable.from_thresholds(
    (35_812, 71_625),
    ("0.0965", "0.1363", "0.1665"),
)

YT_2025 = BracketTable.from_thresholds(
    (55_867, 111_733, 173_205, 500_000),
    ("0.0640", "0.0900", "0.1090", "0.1280", "0.1500"),
)

# CPP: base tier up to YMPE 71,300, CPP2 tier up to YAMPE 81,200
CPP_BASIC_EXEMPTION_2025 = D("3500")
CPP_2025 = ContributionSchedule(
    exemption=CPP_BASIC_EXEMPTION_2025,
    widths=(D("67800"), D("9900")),
    rates=(D("0.0595"), D("0.04")),
)

TABLES_2025 = TaxYearTables(
    year=2025,
    federal=federal(FEDERAL_2025),
    contribution=CPP_2025,
    provinces={
        "ON": provincial("ON", "Ontario", ON_2025),
        "MB": provincial("MB", "Manitoba", MB_2025),
        "SK": provincial("SK", "Saskatchewan", SK_2025),
        "AB": provincial("AB", "Alberta", AB_2025),
        "BC": provincial("BC", "British Columbia", BC_2025),
        "NB": provincial("NB", "New Brunswick", NB_2025),
        "NL": provincial("NL", "Newfoundland and Labrador", NL_2025),
        "NS": provincial("NS", "Nova Scotia", NS_2025),
        "NT": provincial("NT", "Northwest Territories", NT_2025),
        "NU": provincial("NU", "Nunavut", NU_2025),
        "PE": provincial("PE", "Prince Edward Island", PE_2025),
        "YT": provincial("YT", "Yukon", YT_2025),
    },
)
