from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request

from taxcalc import __version__
from taxcalc.config import Settings, get_settings
from taxcalc.core.engine import calculate
from taxcalc.core.jurisdictions import FEDERAL_CODE, JurisdictionRegistry, default_registry
from taxcalc.core.models import CalculationInput
from taxcalc.lifespan import build_application_lifespan

logger = logging.getLogger("taxcalc.api")


async def _announce_defaults(app: FastAPI) -> None:
    settings = _settings(app)
    logger.info(
        "Tax calculator ready; default_province=%s default_tax_year=%s periods_per_year=%s",
        settings.default_province,
        settings.default_tax_year or _registry(app).default_year,
        settings.periods_per_year,
    )


app = FastAPI(
    title="Canadian Income Tax Calculator",
    version=__version__,
    description="Federal, provincial and CPP bracket breakdowns. Amounts are decimal strings.",
    lifespan=build_application_lifespan("api", startup_hook=_announce_defaults),
)


def _settings(app_: FastAPI) -> Settings:
    return getattr(app_.state, "settings", None) or get_settings()


def _registry(app_: FastAPI) -> JurisdictionRegistry:
    return getattr(app_.state, "registry", None) or default_registry()


def _resolve_request(
    registry: JurisdictionRegistry,
    settings: Settings,
    province: str | None,
    year: int | None,
) -> tuple[str, int]:
    # the selectable set is closed; reject anything outside it before computing
    resolved_year = year if year is not None else (settings.default_tax_year or registry.default_year)
    if resolved_year not in registry.years:
        raise HTTPException(status_code=400, detail=f"Unsupported tax year {resolved_year}")
    code = (province or settings.default_province).strip().upper()
    if code not in registry.supported_provinces(resolved_year):
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported province code '{code}' for tax year {resolved_year}",
        )
    return code, resolved_year


def _compute(request: Request, inputs: CalculationInput) -> dict:
    settings = _settings(request.app)
    registry = _registry(request.app)
    province, year = _resolve_request(registry, settings, inputs.province, inputs.tax_year)
    resolved = inputs.model_copy(update={"province": province, "tax_year": year})
    calc = calculate(resolved, registry=registry, periods_per_year=settings.periods_per_year)
    return calc.model_dump(mode="json")


@app.get("/health")
def health(request: Request):
    settings = _settings(request.app)
    registry = _registry(request.app)
    return {
        "ok": True,
        "default_tax_year": settings.default_tax_year or registry.default_year,
        "tax_years": list(registry.years),
        "build": {
            "version": settings.build_version,
            "sha": settings.build_sha,
        },
    }


@app.get("/jurisdictions")
def jurisdictions(request: Request, year: int | None = None):
    registry = _registry(request.app)
    if year is not None and year not in registry.years:
        raise HTTPException(status_code=400, detail=f"Unsupported tax year {year}")
    resolved_year = year if year is not None else registry.default_year
    federal = registry.jurisdiction(FEDERAL_CODE, resolved_year)
    return {
        "tax_year": resolved_year,
        "federal": {"code": federal.code, "name": federal.name},
        "provinces": [
            {"code": j.code, "name": j.name}
            for j in sorted(registry.provinces(resolved_year), key=lambda j: j.code)
        ],
    }


@app.get("/tax/estimate")
def estimate(
    request: Request,
    income: str = "0",
    supplementary: str = "0",
    province: str | None = None,
    year: int | None = None,
):
    inputs = CalculationInput(
        income=income,
        supplementary_income=supplementary,
        province=province or "",
        tax_year=year,
    )
    return _compute(request, inputs)


@app.post("/tax/calculate")
def calculate_endpoint(request: Request, payload: CalculationInput):
    return _compute(request, payload)
