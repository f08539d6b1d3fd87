from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from liftlog.main import app
from liftlog import main as app_main
from liftlog.repositories.workout_repo import WorkoutRepository
from liftlog.security import create_access_token

client = TestClient(app)

def test_healthz_degraded(monkeypatch):
    # force SessionLocal to throw
    class Boom:
        def __enter__(self): raise RuntimeError("db down")
        def __exit__(self, *a): return False
    monkeypatch.setattr(app_main, "SessionLocal", lambda: Boom())
    r = client.get("/healthz")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "degraded"
    assert "db down" in body["error"]

def test_store_error_on_read_is_503_not_empty(monkeypatch):
    def boom(self, user_id, day):
        raise OperationalError("SELECT", {}, Exception("connection refused"))
    monkeypatch.setattr(WorkoutRepository, "list_for_user_on_date", boom)
    h = {"Authorization": f"Bearer {create_access_token('user_a')}"}
    r = client.get("/workouts?date=2025-09-01", headers=h)
    assert r.status_code == 503
    assert "try again" in r.json()["detail"].lower()
