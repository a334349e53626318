from decimal import Decimal as D

import pytest
from fastapi.testclient import TestClient

from taxcalc.api import app

client = TestClient(app)


def test_health_includes_build_meta(monkeypatch):
    monkeypatch.setenv("BUILD_VERSION", "1.2.3")
    monkeypatch.setenv("BUILD_SHA", "abc123")
    with TestClient(app) as scoped:
        body = scoped.get("/health").json()
    assert body["ok"] is True
    assert body["build"] == {"version": "1.2.3", "sha": "abc123"}
    assert body["tax_years"] == [2024, 2025]


def test_jurisdictions_lists_closed_set():
    body = client.get("/jurisdictions").json()
    assert body["tax_year"] == 2025
    assert body["federal"] == {"code": "FED", "name": "Federal"}
    codes = [p["code"] for p in body["provinces"]]
    assert codes == sorted(codes)
    assert {"ON", "MB", "SK"} <= set(codes)
    assert len(client.get("/jurisdictions", params={"year": 2024}).json()["provinces"]) == 6
    assert client.get("/jurisdictions", params={"year": 2031}).status_code == 400


def test_estimate_breakdown():
    resp = client.get("/tax/estimate", params={"income": "100000", "province": "on"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["province"] == "ON"
    assert D(body["annual"]["federal_tax"]) == D("17344.375")
    assert D(body["annual"]["provincial_tax"]) == D("6981.674")
    assert D(body["annual"]["cpp"]) == D("4430.10")
    assert body["federal"]["lines"][2]["label"] == "$114,750.00 – $177,882.00"
    assert D(body["monthly"]["gross"]) == D("100000") / 12


@pytest.mark.parametrize("raw", ["abc", "", "1..2", "-500", "1e999999999", "1e30"])
def test_malformed_income_is_zero_not_an_error(raw: str):
    resp = client.get("/tax/estimate", params={"income": raw, "province": "ON"})
    assert resp.status_code == 200
    body = resp.json()
    assert D(body["annual"]["gross"]) == 0
    assert D(body["annual"]["net_income"]) == 0


def test_default_province_from_settings(monkeypatch):
    monkeypatch.setenv("TAXCALC_DEFAULT_PROVINCE", "SK")
    body = client.get("/tax/estimate", params={"income": "60000"}).json()
    assert body["province"] == "SK"
    assert body["province_name"] == "Saskatchewan"


@pytest.mark.parametrize(
    "params",
    [
        {"income": "1000", "province": "ZZ"},
        {"income": "1000", "province": "FED"},
        {"income": "1000", "province": "MB", "year": 2024},
        {"income": "1000", "province": "ON", "year": 2026},
    ],
)
def test_unsupported_selection_rejected_at_boundary(params):
    resp = client.get("/tax/estimate", params=params)
    assert resp.status_code == 400
    assert "Unsupported" in resp.json()["detail"]


def test_calculate_post_body():
    resp = client.post(
        "/tax/calculate",
        json={"income": "60000", "supplementary_income": "$5,000", "province": "sk", "tax_year": 2024},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["tax_year"] == 2024
    assert body["province"] == "SK"
    assert D(body["annual"]["gross"]) == D("65000")
    assert len(body["cpp"]["lines"]) == 3
    assert body["cpp"]["lines"][0]["exempt"] is True


def test_calculate_post_uses_default_province(monkeypatch):
    monkeypatch.setenv("TAXCALC_DEFAULT_PROVINCE", "MB")
    resp = client.post("/tax/calculate", json={"income": "60000"})
    assert resp.status_code == 200
    assert resp.json()["province"] == "MB"
    assert resp.json()["province_name"] == "Manitoba"
