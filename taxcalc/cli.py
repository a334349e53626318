from __future__ import annotations

import argparse
import json
import logging
import os
from typing import Literal, Sequence

import uvicorn
from rich.console import Console
from rich.table import Table

from taxcalc.config import Settings, get_settings
from taxcalc.core.engine import calculate
from taxcalc.core.jurisdictions import JurisdictionRegistry, default_registry
from taxcalc.core.labels import format_currency, format_rate
from taxcalc.core.models import Calculation, CalculationInput, SchemeBreakdown
from taxcalc.errors import ConfigurationError

ColorPreference = Literal["auto", "always", "never"]

logger = logging.getLogger("taxcalc.cli")


def _resolve_color_preference(pref: ColorPreference) -> ColorPreference:
    if pref == "auto" and os.getenv("NO_COLOR"):
        return "never"
    return pref


def _get_console(pref: ColorPreference) -> Console:
    resolved = _resolve_color_preference(pref)
    if resolved == "never":
        return Console(no_color=True, highlight=False)
    return Console(force_terminal=resolved == "always" or None)


def _build_table(title: str, columns: list[str]) -> Table:
    table = Table(title=title, expand=False)
    for column in columns:
        justify = "right" if column in {"Amount", "Annual", "Monthly"} else "left"
        table.add_column(column, justify=justify)
    return table


def _scheme_table(breakdown: SchemeBreakdown) -> Table:
    table = _build_table(breakdown.name, ["Range", "Rate", "Amount"])
    for line in breakdown.lines:
        if line.exempt:
            table.add_row(line.label, "", "Exempt")
            continue
        table.add_row(line.label, f"@ {format_rate(line.rate)}", format_currency(line.amount))
    table.add_section()
    table.add_row("Total", "", format_currency(breakdown.total))
    return table


def _summary_table(calc: Calculation, show_monthly: bool) -> Table:
    columns = ["Metric", "Annual"] + (["Monthly"] if show_monthly else [])
    table = _build_table("Summary", columns)
    fields = [
        ("Gross income", "gross"),
        ("Federal taxes", "federal_tax"),
        (f"Provincial taxes ({calc.province_name})", "provincial_tax"),
        ("Canada Pension Plan (CPP)", "cpp"),
        ("Net income", "net_income"),
        ("Take-home after CPP", "take_home"),
    ]
    for label, attr in fields:
        row = [label, format_currency(getattr(calc.annual, attr))]
        if show_monthly:
            row.append(format_currency(getattr(calc.monthly, attr)))
        table.add_row(*row)
    return table


def render_calculation(console: Console, calc: Calculation, show_monthly: bool = False) -> None:
    console.print(f"Canadian Income Tax Calculator ({calc.tax_year})", style="bold")
    for breakdown in (calc.federal, calc.provincial, calc.cpp):
        console.print(_scheme_table(breakdown))
    console.print(_summary_table(calc, show_monthly))


def _run_estimate(
    args: argparse.Namespace,
    console: Console,
    settings: Settings,
    registry: JurisdictionRegistry,
) -> int:
    inputs = CalculationInput(
        income=args.income,
        supplementary_income=args.supplementary,
        province=args.province or settings.default_province,
        tax_year=args.year or settings.default_tax_year,
    )
    try:
        calc = calculate(inputs, registry=registry, periods_per_year=settings.periods_per_year)
    except ConfigurationError as exc:
        console.print(f"ERROR: {exc}")
        return 2
    if args.json:
        # plain stdout so the output stays machine-readable
        print(json.dumps(calc.model_dump(mode="json"), indent=2))
        return 0
    render_calculation(console, calc, show_monthly=args.monthly)
    return 0


def _run_provinces(args: argparse.Namespace, console: Console, registry: JurisdictionRegistry) -> int:
    try:
        provinces = registry.provinces(args.year)
        year = registry.tables(args.year).year
    except ConfigurationError as exc:
        console.print(f"ERROR: {exc}")
        return 2
    table = _build_table(f"Provinces and territories ({year})", ["Code", "Name"])
    for jurisdiction in sorted(provinces, key=lambda j: j.code):
        table.add_row(jurisdiction.code, jurisdiction.name)
    console.print(table)
    return 0


def _run_serve(args: argparse.Namespace) -> int:
    logger.info("Starting API on %s:%s", args.host, args.port)
    uvicorn.run("taxcalc.api:app", host=args.host, port=args.port)
    return 0


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="taxcalc",
        description="Federal, provincial and CPP bracket breakdown for an annual income.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="estimate",
        choices=["estimate", "provinces", "serve"],
        help="Action to perform.",
    )
    parser.add_argument("--income", default="0", help="Gross annual employment income.")
    parser.add_argument(
        "--supplementary",
        default="0",
        help="Other taxable income (not pensionable for CPP).",
    )
    parser.add_argument("--province", help="Province or territory code, e.g. ON.")
    parser.add_argument("--year", type=int, help="Tax year (defaults to the latest registered year).")
    parser.add_argument("--monthly", action="store_true", help="Show monthly equivalents.")
    parser.add_argument("--json", action="store_true", help="Emit the calculation as JSON.")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address for serve.")
    parser.add_argument("--port", type=int, default=8000, help="Port for serve.")
    parser.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Color output preference (default: auto).",
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_const",
        const="never",
        help="Alias for --color never.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = get_settings()
    logging.basicConfig(
        level=settings.numeric_log_level(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    console = _get_console(args.color)
    registry = default_registry()
    if args.command == "provinces":
        return _run_provinces(args, console, registry)
    if args.command == "serve":
        return _run_serve(args)
    return _run_estimate(args, console, settings, registry)


if __name__ == "__main__":
    raise SystemExit(main())
