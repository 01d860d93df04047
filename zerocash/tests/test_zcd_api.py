from __future__ import annotations

from copy import deepcopy
from math import isclose

from flask.testing import FlaskClient

from zerocash.app import create_app


def zcd_payload() -> dict:
    return {
        "startingCapital": 1_000_000,
        "firstYearWithdrawal": 50_000,
        "inflationRate": 0.03,
        "growthRate": 0.07,
    }


def test_zcd_endpoint_returns_finite_result(client: FlaskClient):
    resp = client.post("/api/calc/zcd", json=zcd_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["isInfinite"] is False
    assert body["yearsToZero"] == 36
    assert isclose(body["spendingRatePercent"], 5.0, rel_tol=1e-9)
    assert isclose(body["sustainableRatePercent"], 3.7383, abs_tol=1e-4)
    assert isclose(body["criticalCapital"], 1_337_500.0, rel_tol=1e-9)
    assert set(body) == {
        "isInfinite",
        "yearsToZero",
        "realGrowthRatePercent",
        "spendingRatePercent",
        "sustainableRatePercent",
        "criticalCapital",
    }


def test_zcd_endpoint_reports_infinite(client: FlaskClient):
    payload = zcd_payload()
    payload["growthRate"] = 0.10

    resp = client.post("/api/calc/zcd", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["isInfinite"] is True
    assert body["yearsToZero"] is None
    assert body["criticalCapital"] is None


def test_zcd_endpoint_accepts_formatted_amounts(client: FlaskClient):
    payload = zcd_payload()
    payload["startingCapital"] = "1,000,000"
    payload["firstYearWithdrawal"] = "50,000"

    resp = client.post("/api/calc/zcd", json=payload)

    assert resp.status_code == 200
    assert resp.get_json()["yearsToZero"] == 36


def test_projection_endpoint_stops_at_depletion(client: FlaskClient):
    resp = client.post(
        "/api/calc/projection",
        json={"parameters": zcd_payload(), "horizonYears": 50},
    )

    assert resp.status_code == 200
    rows = resp.get_json()["projection"]
    assert len(rows) == 38
    assert rows[0] == {
        "year": 0,
        "withdrawal": 50_000.0,
        "capitalValue": 1_000_000.0,
        "netWorth": 1_000_000.0,
    }
    assert rows[-1]["year"] == 37
    assert rows[-1]["capitalValue"] == 0.0


def test_projection_endpoint_rejects_excessive_horizon(client: FlaskClient):
    resp = client.post(
        "/api/calc/projection",
        json={"parameters": zcd_payload(), "horizonYears": 10_000},
    )

    assert resp.status_code == 400
    assert "detail" in resp.get_json()


def test_plan_endpoint_uses_display_horizon(client: FlaskClient):
    payload = zcd_payload()
    payload.update({"startingCapital": 500_000, "firstYearWithdrawal": 80_000})
    payload.update({"contributionAmount": 75_000, "contributionYears": 10})

    resp = client.post("/api/calc/plan", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["result"]["yearsToZero"] == 18
    assert body["horizonYears"] == 23
    assert body["projection"][-1]["year"] == 19
    assert body["projection"][-1]["capitalValue"] == 0.0
    assert body["warnings"] == []


def test_plan_endpoint_infinite_uses_fixed_horizon(client: FlaskClient):
    payload = zcd_payload()
    payload["growthRate"] = 0.10

    resp = client.post("/api/calc/plan", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["result"]["isInfinite"] is True
    assert body["horizonYears"] == 50
    assert len(body["projection"]) == 51


def test_plan_endpoint_returns_warnings(client: FlaskClient):
    payload = zcd_payload()
    payload["growthRate"] = 0.03

    resp = client.post("/api/calc/plan", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["result"]["yearsToZero"] == 20
    assert body["result"]["criticalCapital"] is None
    assert any("linear" in warning for warning in body["warnings"])


def test_invalid_payload_returns_400(client: FlaskClient):
    resp = client.post("/api/calc/zcd", json={"startingCapital": 1_000})

    assert resp.status_code == 400
    body = resp.get_json()
    assert "detail" in body


def test_nonsensical_parameters_return_400(client: FlaskClient):
    bad = deepcopy(zcd_payload())
    bad["startingCapital"] = 0
    bad["growthRate"] = -1.5

    resp = client.post("/api/calc/zcd", json=bad)

    assert resp.status_code == 400
    body = resp.get_json()
    assert any("starting capital" in message for message in body["error"])
    assert any("growth rate" in message for message in body["error"])


def test_config_overrides_cap_display_horizon():
    app = create_app({"TESTING": True, "MAX_HORIZON_YEARS": 30})
    payload = zcd_payload()
    payload["growthRate"] = 0.10

    with app.test_client() as client:
        resp = client.post("/api/calc/plan", json=payload)

    assert resp.status_code == 200
    assert resp.get_json()["horizonYears"] == 30


def test_defaults_round_trip_through_plan(client: FlaskClient):
    defaults = client.get("/api/defaults")

    assert defaults.status_code == 200
    payload = defaults.get_json()
    assert payload["startingCapital"] == 1_000_000.0
    assert payload["contributionYears"] == 10

    resp = client.post("/api/calc/plan", json=payload)
    assert resp.status_code == 200
    body = resp.get_json()
    # ten years of contributions outgrow the spending, although the
    # reported rates (5% vs ~3.74%) describe the year-0 inputs
    assert body["result"]["isInfinite"] is True
    assert body["result"]["spendingRatePercent"] > body["result"]["sustainableRatePercent"]
    assert body["horizonYears"] == 50
