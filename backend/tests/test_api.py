from fastapi.testclient import TestClient

from directions.main import app

client = TestClient(app)

def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}

def test_decode_current_step(current_step_json):
    r = client.post("/api/steps/decode", json=current_step_json, params={"generation": "v5"})
    assert r.status_code == 200
    body = r.json()
    assert body["maneuverType"] == "turn"
    assert body["maneuverDirection"] == "left"
    assert body["names"] == ["Main Street"]
    assert body["codes"] == ["NH 101"]
    assert len(body["coordinates"]) == 3

def test_decode_legacy_step(legacy_step_json):
    r = client.post("/api/steps/decode", json=legacy_step_json, params={"generation": "v4"})
    assert r.status_code == 200
    assert r.json()["maneuverDirection"] == "slight right"

def test_decode_step_missing_maneuver(current_step_json):
    del current_step_json["maneuver"]
    r = client.post("/api/steps/decode", json=current_step_json)
    assert r.status_code == 422
    assert r.json()["detail"]["field"] == "maneuver"

def test_decode_routes(current_step_json, rotary_step_json):
    payload = {"routes": [{"legs": [{"steps": [current_step_json, rotary_step_json]}]}]}
    r = client.post("/api/routes/decode", json=payload)
    assert r.status_code == 200
    steps = r.json()["routes"][0]["legs"][0]["steps"]
    assert [s["maneuverType"] for s in steps] == ["turn", "rotary"]

def test_decode_routes_without_routes():
    r = client.post("/api/routes/decode", json={"code": "NoRoute"})
    assert r.status_code == 422

def test_restore_step(rotary_step_json):
    record = client.post("/api/steps/decode", json=rotary_step_json).json()
    r = client.post("/api/steps/restore", json=record)
    assert r.status_code == 200
    assert r.json() == record

def test_restore_rejects_bad_record():
    r = client.post("/api/steps/restore", json={"instructions": 3})
    assert r.status_code == 422
