from fastapi import Response
from fastapi.testclient import TestClient
from starlette.requests import Request

from liftlog import preferences as prefs
from liftlog.main import app
from liftlog.security import create_access_token
from liftlog.settings import Settings
from liftlog.utils.weights import WeightUnit

client = TestClient(app)

def H(user_id="user_a"):
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}

def request_with_cookie(header: str | None) -> Request:
    headers = [(b"cookie", header.encode())] if header else []
    return Request({"type": "http", "method": "GET", "path": "/", "headers": headers})

def test_default_is_lbs_when_never_set():
    assert prefs.get_weight_unit_preference(request_with_cookie(None)) == WeightUnit.lbs

def test_invalid_value_falls_back_to_lbs():
    assert prefs.get_weight_unit_preference(request_with_cookie("weight-unit=stone")) == WeightUnit.lbs
    assert prefs.get_weight_unit_preference(request_with_cookie("weight-unit=")) == WeightUnit.lbs

def test_valid_value_read():
    assert prefs.get_weight_unit_preference(request_with_cookie("weight-unit=kg")) == WeightUnit.kg

def test_cookie_attributes_outside_production():
    response = Response()
    prefs.set_weight_unit_preference_cookie(response, WeightUnit.kg)
    header = response.headers["set-cookie"]
    assert header.startswith("weight-unit=kg")
    assert "Max-Age=31536000" in header
    assert "Path=/" in header
    assert "samesite=lax" in header.lower()
    assert "secure" not in header.lower()

def test_cookie_secure_in_production(monkeypatch):
    monkeypatch.setattr(prefs, "get_settings", lambda: Settings(ENV="production"))
    response = Response()
    prefs.set_weight_unit_preference_cookie(response, WeightUnit.lbs)
    assert "secure" in response.headers["set-cookie"].lower()

def test_api_round_trip():
    r = client.get("/preferences/weight-unit", headers=H())
    assert r.json() == {"unit": "lbs"}

    r = client.put("/preferences/weight-unit", headers=H(), json={"unit": "kg"})
    assert r.status_code == 200
    assert r.json() == {"unit": "kg"}
    assert "weight-unit=kg" in r.headers["set-cookie"]
    client.cookies.clear()

def test_api_rejects_unknown_unit():
    r = client.put("/preferences/weight-unit", headers=H(), json={"unit": "stone"})
    assert r.status_code == 422

def test_next_dashboard_renders_in_new_unit(make_workout):
    make_workout("user_a", exercises=[("Squat", 0, [(1, 5, 100)])])
    params = {"date": "2025-09-01"}
    try:
        before = client.get("/dashboard", headers=H("user_a"), params=params).json()
        client.put("/preferences/weight-unit", headers=H("user_a"), json={"unit": "kg"})
        after = client.get("/dashboard", headers=H("user_a"), params=params).json()
    finally:
        client.cookies.clear()
    assert before["unit"] == "lbs"
    assert before["workouts"][0]["exercises"][0]["sets"][0]["weight"] == "100.0"
    assert after["unit"] == "kg"
    assert after["workouts"][0]["exercises"][0]["sets"][0]["weight"] == "45.4"
