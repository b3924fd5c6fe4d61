import asyncio
from typing import Any, Dict, List, Optional
import pytest

from clinic_dashboard.application.services.modal_manager import ModalMode
from clinic_dashboard.application.services.resource_page import ResourcePage
from clinic_dashboard.exceptions import GatewayFailure, ModalStateError, ValidationFailure
from clinic_dashboard.infrastructure.notify.log_notifier import LogNotifier
from clinic_dashboard.resources import MESSAGES, PATIENTS, ROOMS
from clinic_dashboard.schemas import Message, MutationResult, Patient, Room


class FakeGateway:
    """In-memory stand-in for one resource's endpoints"""

    def __init__(self, rows: List[Any]):
        self.rows = list(rows)
        self.calls: List[tuple] = []
        self.fail_with: Optional[Exception] = None
        self.list_fail_with: Optional[Exception] = None
        self.gate: Optional[asyncio.Event] = None

    async def list(self):
        self.calls.append(("list",))
        if self.list_fail_with:
            raise self.list_fail_with
        return list(self.rows)

    async def _mutate(self, call: tuple) -> None:
        self.calls.append(call)
        if self.gate is not None:
            await self.gate.wait()
        if self.fail_with:
            raise self.fail_with

    async def create(self, payload: Dict[str, Any]) -> MutationResult:
        await self._mutate(("create", payload))
        row = Room(id=max([r.id for r in self.rows] + [0]) + 1, **payload)
        self.rows.append(row)
        return MutationResult(message="Room created successfully", data=row.model_dump(mode="json"))

    async def update(self, entity_id: int, payload: Dict[str, Any]) -> MutationResult:
        await self._mutate(("update", entity_id, payload))
        self.rows = [r.model_copy(update=payload) if r.id == entity_id else r for r in self.rows]
        return MutationResult(message=None)

    async def delete(self, entity_id: int) -> MutationResult:
        await self._mutate(("delete", entity_id))
        self.rows = [r for r in self.rows if r.id != entity_id]
        return MutationResult(message="Room deleted successfully")

    async def fetch(self, path, params=None):
        return {}


def _rooms():
    return [
        Room(id=1, name="Room 101", type="Consultation", status="Available"),
        Room(id=2, name="Room 102", type="Examination", status="Occupied"),
        Room(id=3, name="Room 103", type="Procedure", status="Maintenance"),
    ]


def _page(rows=None):
    rows = _rooms() if rows is None else rows
    gateway = FakeGateway(rows)
    notifier = LogNotifier()
    return ResourcePage(ROOMS, gateway, notifier, items=rows), gateway, notifier


@pytest.mark.asyncio
async def test_submit_create_closes_modal_and_refreshes():
    page, gateway, notifier = _page()
    page.open_add()
    page.modal.set_field("name", "Room 105")
    page.modal.set_field("capacity", "3")
    page.modal.set_field("equipment", "Computer, Printer, Computer")

    assert await page.submit() is True
    assert gateway.calls[0] == ("create", {
        "name": "Room 105", "type": "Consultation", "capacity": 3, "status": "Available",
        "equipment": ["Computer", "Printer"],
    })
    assert gateway.calls[-1] == ("list",)
    assert page.modal.mode == ModalMode.CLOSED
    assert [r.name for r in page.list.items][-1] == "Room 105"
    assert notifier.last.level == "success"
    assert notifier.last.message == "Room created successfully"


@pytest.mark.asyncio
async def test_update_without_server_message_uses_default_toast():
    page, gateway, notifier = _page()
    page.open_edit(page.list.items[0])
    page.modal.set_field("status", "occupied")
    assert await page.submit() is True
    assert gateway.calls[0][0:2] == ("update", 1)
    assert gateway.calls[0][2]["status"] == "Occupied"
    assert notifier.last.message == "Room updated successfully"


@pytest.mark.asyncio
async def test_client_side_errors_keep_modal_open_without_request():
    page, gateway, notifier = _page()
    page.open_add()
    page.modal.set_field("capacity", "0")
    assert await page.submit() is False
    assert gateway.calls == []
    assert page.modal.mode == ModalMode.ADDING
    assert page.modal.error_for("name")
    assert page.modal.error_for("capacity")


@pytest.mark.asyncio
async def test_server_validation_failure_surfaces_under_field():
    page, gateway, notifier = _page()
    gateway.fail_with = ValidationFailure({"name": "required"})
    page.open_add()
    page.modal.set_field("name", "Room 101")
    draft_before = dict(page.modal.draft)

    assert await page.submit() is False
    assert page.modal.mode == ModalMode.ADDING
    assert page.modal.error_for("name") == "required"
    assert page.modal.draft == draft_before
    assert notifier.last.level == "error"
    assert page.loading is False


@pytest.mark.asyncio
async def test_transport_failure_shows_generic_message_and_keeps_state():
    page, gateway, notifier = _page()
    gateway.fail_with = GatewayFailure("Network error")
    page.open_edit(page.list.items[1])
    assert await page.submit() is False
    assert notifier.last.message == "Failed to update room"
    assert page.modal.mode == ModalMode.EDITING
    assert len(page.list.items) == 3


@pytest.mark.asyncio
async def test_delete_removes_exactly_target_after_refresh():
    page, gateway, notifier = _page()
    page.open_delete(page.list.items[1])
    assert await page.confirm_delete() is True
    assert [r.id for r in page.list.items] == [1, 3]
    assert page.modal.mode == ModalMode.CLOSED
    assert notifier.last.message == "Room deleted successfully"


@pytest.mark.asyncio
async def test_failed_delete_keeps_confirmation_open():
    page, gateway, notifier = _page()
    gateway.fail_with = GatewayFailure("Request failed with status 500", 500)
    page.open_delete(page.list.items[0])
    assert await page.confirm_delete() is False
    assert page.modal.mode == ModalMode.CONFIRMING_DELETE
    assert notifier.last.message == "Failed to delete room"
    assert [r.id for r in page.list.items] == [1, 2, 3]


@pytest.mark.asyncio
async def test_duplicate_submit_is_ignored_while_loading():
    page, gateway, notifier = _page()
    gateway.gate = asyncio.Event()
    page.open_add()
    page.modal.set_field("name", "Room 106")

    first = asyncio.ensure_future(page.submit())
    await asyncio.sleep(0)
    assert page.loading is True
    assert await page.submit() is False
    gateway.gate.set()
    assert await first is True
    assert [c[0] for c in gateway.calls].count("create") == 1


@pytest.mark.asyncio
async def test_response_for_replaced_modal_does_not_touch_new_one():
    page, gateway, notifier = _page()
    gateway.gate = asyncio.Event()
    gateway.fail_with = ValidationFailure({"name": "The name has already been taken."})
    page.open_add()
    page.modal.set_field("name", "Room 101")

    pending = asyncio.ensure_future(page.submit())
    await asyncio.sleep(0)
    page.cancel()
    page.open_view(page.list.items[0])
    gateway.gate.set()

    assert await pending is False
    assert page.modal.mode == ModalMode.VIEWING
    assert page.modal.errors == {}
    assert notifier.toasts == []


@pytest.mark.asyncio
async def test_unmounted_page_ignores_late_responses():
    page, gateway, notifier = _page()
    gateway.gate = asyncio.Event()
    page.open_add()
    page.modal.set_field("name", "Room 107")
    pending = asyncio.ensure_future(page.submit())
    await asyncio.sleep(0)
    page.unmount()
    gateway.gate.set()
    await pending
    assert notifier.toasts == []
    assert ("list",) not in gateway.calls


@pytest.mark.asyncio
async def test_last_refresh_wins():
    page, gateway, notifier = _page()
    release_first = asyncio.Event()
    responses = [[Room(id=1, name="stale")], [Room(id=2, name="fresh")]]

    async def ordered_list():
        rows = responses.pop(0)
        if rows[0].name == "stale":
            await release_first.wait()
        return rows

    gateway.list = ordered_list
    first = asyncio.ensure_future(page.refresh())
    await asyncio.sleep(0)
    assert await page.refresh() is True
    release_first.set()
    assert await first is False
    assert [r.name for r in page.list.items] == ["fresh"]


@pytest.mark.asyncio
async def test_refresh_failure_keeps_previous_items():
    page, gateway, notifier = _page()
    gateway.list_fail_with = GatewayFailure("Network error")
    assert await page.refresh() is False
    assert len(page.list.items) == 3
    assert notifier.last.message == "Failed to load rooms"


@pytest.mark.asyncio
async def test_change_status_sends_partial_update():
    page, gateway, notifier = _page()
    assert await page.change_status(page.list.items[2], "Available") is True
    assert gateway.calls[0] == ("update", 3, {"status": "Available"})
    assert page.list.items[2].status == "Available"


@pytest.mark.asyncio
async def test_submit_from_closed_modal_is_a_usage_error():
    page, gateway, notifier = _page()
    with pytest.raises(ModalStateError):
        await page.submit()


def test_read_only_resource_refuses_editing():
    page = ResourcePage(MESSAGES, FakeGateway([]), LogNotifier(), items=[Message(id=1, subject="Hello")])
    page.open_view(page.list.items[0])
    assert page.modal.mode == ModalMode.VIEWING
    with pytest.raises(ModalStateError):
        page.open_add()


def test_empty_state_messages():
    page = ResourcePage(PATIENTS, FakeGateway([]), LogNotifier())
    assert page.empty_state_message == "No patients yet"
    page.list.replace([Patient(id=1, name="John Doe")])
    assert page.empty_state_message is None
    page.list.set_search("zzz")
    assert page.empty_state_message == "No patients match your search or filters"
