import asyncio
from typing import Any, Dict, List, Optional
import aiohttp
import pytest

from clinic_dashboard.application.ports.resource_gateway import RequestContext
from clinic_dashboard.config import Settings
from clinic_dashboard.exceptions import GatewayFailure, ValidationFailure
from clinic_dashboard.infrastructure.http.aiohttp_gateway import AiohttpResourceGateway
from clinic_dashboard.resources import LAB_RESULTS, STAFF
from clinic_dashboard.schemas import StaffMember


class FakeResponse:
    def __init__(self, status: int, payload: Any = None, raw_text: bool = False):
        self.status = status
        self._payload = payload
        self._raw_text = raw_text

    async def json(self, content_type=None):
        if self._raw_text:
            raise ValueError("not json")
        return self._payload

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[BaseException] = None):
        self.response = response
        self.error = error
        self.requests: List[Dict[str, Any]] = []

    def request(self, method, url, json=None, params=None, headers=None):
        self.requests.append({"method": method, "url": url, "json": json, "params": params, "headers": headers})
        if self.error is not None:
            raise self.error
        return self.response


def _gateway(session, definition=STAFF):
    return AiohttpResourceGateway(
        session,
        RequestContext(csrf_token="tok-123"),
        definition,
        base_url="http://clinic.test/",
        csrf_header="X-CSRF-TOKEN",
    )


STAFF_ROW = {"id": 1, "name": "Emily Chen", "email": "emily.chen@clinic.com", "role": "Receptionist",
             "department": "Front Desk", "status": "Active", "join_date": "2023-03-20", "extra": "ignored"}


@pytest.mark.asyncio
async def test_list_parses_entities_from_list_key():
    session = FakeSession(FakeResponse(200, {"success": True, "staff": [STAFF_ROW]}))
    items = await _gateway(session).list()
    assert items == [StaffMember.model_validate(STAFF_ROW)]
    req = session.requests[0]
    assert req["method"] == "GET"
    assert req["url"] == "http://clinic.test/staff"
    assert "X-CSRF-TOKEN" not in req["headers"]
    assert req["headers"]["Accept"] == "application/json"


@pytest.mark.asyncio
async def test_list_accepts_data_envelope_and_snake_case_key():
    session = FakeSession(FakeResponse(200, {"success": True, "data": {"lab_results": []}}))
    assert await _gateway(session, LAB_RESULTS).list() == []
    assert session.requests[0]["url"] == "http://clinic.test/lab-results"


@pytest.mark.asyncio
async def test_list_without_collection_is_a_failure():
    session = FakeSession(FakeResponse(200, {"success": True}))
    with pytest.raises(GatewayFailure):
        await _gateway(session).list()


@pytest.mark.asyncio
async def test_malformed_rows_are_a_failure():
    session = FakeSession(FakeResponse(200, {"success": True, "staff": [{"id": "x"}]}))
    with pytest.raises(GatewayFailure) as exc:
        await _gateway(session).list()
    assert not isinstance(exc.value, ValidationFailure)


@pytest.mark.asyncio
async def test_mutations_carry_csrf_header():
    session = FakeSession(FakeResponse(201, {"success": True, "message": "Staff member created successfully", "data": STAFF_ROW}))
    result = await _gateway(session).create({"name": "Emily Chen"})
    assert result.message == "Staff member created successfully"
    assert result.data["id"] == 1
    req = session.requests[0]
    assert req["method"] == "POST"
    assert req["json"] == {"name": "Emily Chen"}
    assert req["headers"]["X-CSRF-TOKEN"] == "tok-123"


@pytest.mark.asyncio
async def test_update_and_delete_target_item_path():
    session = FakeSession(FakeResponse(200, {"success": True, "message": "ok"}))
    gateway = _gateway(session)
    await gateway.update(7, {"status": "On Leave"})
    await gateway.delete(7)
    assert [(r["method"], r["url"]) for r in session.requests] == [
        ("PUT", "http://clinic.test/staff/7"),
        ("DELETE", "http://clinic.test/staff/7"),
    ]
    assert all(r["headers"]["X-CSRF-TOKEN"] == "tok-123" for r in session.requests)


@pytest.mark.asyncio
async def test_success_false_with_errors_is_validation_failure():
    body = {"success": False, "message": "Validation failed",
            "errors": {"email": ["The email has already been taken.", "second"], "name": "required", "phone": []}}
    session = FakeSession(FakeResponse(422, body))
    with pytest.raises(ValidationFailure) as exc:
        await _gateway(session).create({})
    assert exc.value.errors == {"email": "The email has already been taken.", "name": "required"}
    assert exc.value.status == 422


@pytest.mark.asyncio
async def test_success_false_on_http_200_is_still_a_failure():
    session = FakeSession(FakeResponse(200, {"success": False, "errors": {"name": "required"}}))
    with pytest.raises(ValidationFailure) as exc:
        await _gateway(session).update(1, {})
    assert exc.value.errors == {"name": "required"}


@pytest.mark.asyncio
async def test_success_false_without_errors_is_generic_failure():
    session = FakeSession(FakeResponse(419, {"success": False, "message": "CSRF token mismatch."}))
    with pytest.raises(GatewayFailure) as exc:
        await _gateway(session).delete(1)
    assert not isinstance(exc.value, ValidationFailure)
    assert exc.value.status == 419


@pytest.mark.asyncio
async def test_error_status_and_non_json_bodies_fail():
    with pytest.raises(GatewayFailure):
        await _gateway(FakeSession(FakeResponse(500, {"detail": "boom"}))).list()
    with pytest.raises(GatewayFailure) as exc:
        await _gateway(FakeSession(FakeResponse(502, raw_text=True))).list()
    assert exc.value.message == "Unexpected response from server"


@pytest.mark.asyncio
async def test_transport_errors_become_gateway_failures():
    with pytest.raises(GatewayFailure) as exc:
        await _gateway(FakeSession(error=aiohttp.ClientConnectionError("refused"))).list()
    assert exc.value.message == "Network error"
    with pytest.raises(GatewayFailure) as exc:
        await _gateway(FakeSession(error=asyncio.TimeoutError())).create({})
    assert exc.value.message == "Request timed out"


@pytest.mark.asyncio
async def test_fetch_drops_empty_params():
    session = FakeSession(FakeResponse(200, {"success": True, "appointments": []}))
    payload = await _gateway(session).fetch("/appointments/calendar/data", {"start": "2024-01-01", "doctor_id": None})
    assert payload["appointments"] == []
    assert session.requests[0]["params"] == {"start": "2024-01-01"}


def test_request_context_reads_csrf_meta_tag():
    html = '<html><head><meta charset="utf-8"><meta name="csrf-token" content="abc&amp;123"></head></html>'
    ctx = RequestContext.from_html(html)
    assert ctx.csrf_token == "abc&123"
    assert RequestContext.from_html("<html></html>").csrf_token == ""
    assert RequestContext.from_meta({"x-token": "t"}, meta_name="x-token").csrf_token == "t"


@pytest.mark.asyncio
async def test_gateway_from_settings_applies_configured_timeout():
    s = Settings(API_BASE_URL="http://clinic.test/api/", REQUEST_TIMEOUT_SECONDS=3, CSRF_HEADER="X-XSRF-TOKEN")
    gateway = AiohttpResourceGateway.from_settings(RequestContext(csrf_token="tok"), STAFF, s)
    try:
        assert isinstance(gateway.session, aiohttp.ClientSession)
        assert gateway.session.timeout.total == 3
        assert gateway.base_url == "http://clinic.test/api"
        assert gateway._headers("POST")["X-XSRF-TOKEN"] == "tok"
    finally:
        await gateway.session.close()
