from fastapi import FastAPI
from fastapi.testclient import TestClient

from clinic_dashboard.middleware import CSRFMiddleware, NoStoreMiddleware, RequestLogMiddleware


def _app():
    app = FastAPI()
    app.add_middleware(CSRFMiddleware, token="tok", header="X-CSRF-TOKEN")
    app.add_middleware(NoStoreMiddleware)
    app.add_middleware(RequestLogMiddleware)

    @app.get("/rooms")
    async def rooms():
        return {"success": True, "rooms": []}

    @app.post("/rooms")
    async def create_room():
        raise RuntimeError("database is locked")

    return app


def test_json_responses_are_not_cached():
    res = TestClient(_app()).get("/rooms")
    assert res.status_code == 200
    assert res.headers["cache-control"] == "no-store"
    assert res.headers["x-content-type-options"] == "nosniff"
    assert res.headers["x-response-time"].endswith("s")


def test_unhandled_route_errors_become_error_envelope():
    res = TestClient(_app()).post("/rooms", headers={"X-CSRF-TOKEN": "tok"}, json={})
    assert res.status_code == 500
    body = res.json()
    assert body["success"] is False
    assert body["message"].startswith("Internal server error")


def test_csrf_rejection_happens_before_the_route():
    res = TestClient(_app()).post("/rooms", json={})
    assert res.status_code == 419
    assert res.json()["message"] == "CSRF token mismatch."
