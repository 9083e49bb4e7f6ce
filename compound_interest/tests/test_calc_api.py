from __future__ import annotations

from math import isclose

from flask.testing import FlaskClient


def compound_payload() -> dict:
    return {
        "principal": 1000,
        "rate": 5,
        "time": 2,
        "frequency": "monthly",
        "startDate": "2024-01-15",
    }


def test_frequencies_lists_every_member(client: FlaskClient):
    resp = client.get("/api/frequencies")

    assert resp.status_code == 200
    body = resp.get_json()
    assert [item["value"] for item in body] == [
        "annually",
        "semi-annually",
        "quarterly",
        "monthly",
        "weekly",
        "daily",
        "continuously",
    ]
    by_value = {item["value"]: item for item in body}
    assert by_value["monthly"] == {"value": "monthly", "label": "Monthly", "periodsPerYear": 12}
    assert by_value["continuously"]["periodsPerYear"] is None


def test_compound_endpoint_returns_result_and_record(client: FlaskClient):
    resp = client.post("/api/calc/compound", json=compound_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert round(body["finalAmount"], 2) == 1104.94
    assert isclose(body["totalInterest"], body["finalAmount"] - 1000, rel_tol=1e-12)
    assert [row["year"] for row in body["yearlyBreakdown"]] == [1, 2]
    assert [row["date"] for row in body["yearlyBreakdown"]] == ["2025-01-15", "2026-01-15"]
    assert body["record"] == {
        "principal": 1000.0,
        "rate": 5.0,
        "time": 2.0,
        "frequency": "monthly",
        "finalAmount": body["finalAmount"],
        "solveFor": "finalAmount",
    }


def test_compound_endpoint_rejects_non_positive_inputs(client: FlaskClient):
    payload = compound_payload()
    payload["principal"] = 0

    resp = client.post("/api/calc/compound", json=payload)

    assert resp.status_code == 422
    assert resp.get_json()["detail"][0]["loc"] == ["principal"]


def test_compound_endpoint_requires_whole_years(client: FlaskClient):
    payload = compound_payload()
    payload["time"] = 2.5

    resp = client.post("/api/calc/compound", json=payload)

    assert resp.status_code == 422


def test_compound_endpoint_rejects_unknown_frequency(client: FlaskClient):
    payload = compound_payload()
    payload["frequency"] = "hourly"

    resp = client.post("/api/calc/compound", json=payload)

    assert resp.status_code == 422
    assert resp.get_json()["detail"][0]["loc"] == ["frequency"]


def test_solve_endpoint_principal(client: FlaskClient):
    resp = client.post(
        "/api/calc/solve",
        json={"solveFor": "principal", "rate": 5, "time": 2, "finalAmount": 1104.94, "frequency": "monthly"},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["solveFor"] == "principal"
    assert isclose(body["value"], 1000, abs_tol=0.01)
    assert body["record"]["solveFor"] == "principal"
    assert body["record"]["principal"] == body["value"]
    assert "createdAt" not in body["record"]


def test_solve_endpoint_time_with_breakdown(client: FlaskClient):
    resp = client.post(
        "/api/calc/solve",
        json={
            "solveFor": "time",
            "principal": 1000,
            "rate": 10,
            "finalAmount": 1210,
            "frequency": "annually",
            "includeBreakdown": True,
        },
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert isclose(body["time"], 2, rel_tol=1e-9)
    assert len(body["yearlyBreakdown"]) == 2


def test_solve_endpoint_rejects_withheld_value(client: FlaskClient):
    resp = client.post(
        "/api/calc/solve",
        json={
            "solveFor": "rate",
            "principal": 1000,
            "rate": 5,
            "time": 2,
            "finalAmount": 1100,
            "frequency": "monthly",
        },
    )

    assert resp.status_code == 422


def test_solve_endpoint_requires_known_values(client: FlaskClient):
    resp = client.post(
        "/api/calc/solve",
        json={"solveFor": "rate", "principal": 1000, "frequency": "monthly"},
    )

    assert resp.status_code == 422
    missing = {tuple(error["loc"]) for error in resp.get_json()["detail"]}
    assert ("rate", "time") in missing
    assert ("rate", "finalAmount") in missing


def test_solve_endpoint_reports_undefined_rate(client: FlaskClient):
    resp = client.post(
        "/api/calc/solve",
        json={"solveFor": "rate", "principal": 1000, "time": 2, "finalAmount": 900, "frequency": "monthly"},
    )

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["error"] == "mathematically_undefined"
    assert body["field"] == "finalAmount"


def test_solve_endpoint_reports_zero_principal(client: FlaskClient):
    resp = client.post(
        "/api/calc/solve",
        json={"solveFor": "time", "principal": 0, "rate": 5, "finalAmount": 900, "frequency": "daily"},
    )

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "mathematically_undefined"


def test_solve_endpoint_unknown_target(client: FlaskClient):
    resp = client.post(
        "/api/calc/solve",
        json={"solveFor": "inflation", "principal": 1000, "rate": 5, "time": 2, "frequency": "monthly"},
    )

    assert resp.status_code == 422


def test_compound_endpoint_rejects_horizon_past_the_year_limit(client: FlaskClient):
    payload = compound_payload()
    payload.update({"principal": 1, "rate": 1e-300, "time": 300000})

    resp = client.post("/api/calc/compound", json=payload)

    assert resp.status_code == 422
    assert resp.get_json()["detail"][0]["loc"] == ["time"]


def test_solve_endpoint_rejects_breakdown_past_the_year_limit(client: FlaskClient):
    payload = {
        "solveFor": "time",
        "principal": 1000,
        "rate": 1e-6,
        "finalAmount": 1001,
        "frequency": "continuously",
    }

    without_breakdown = client.post("/api/calc/solve", json=payload)
    with_breakdown = client.post("/api/calc/solve", json={**payload, "includeBreakdown": True})

    assert without_breakdown.status_code == 200
    assert with_breakdown.status_code == 400
    body = with_breakdown.get_json()
    assert body["error"] == "invalid_input"
    assert body["field"] == "time"
