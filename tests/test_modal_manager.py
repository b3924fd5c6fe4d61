from datetime import date, datetime
import pytest

from clinic_dashboard.application.services.modal_manager import ModalLifecycleManager, ModalMode, draft_from_entity
from clinic_dashboard.exceptions import ModalStateError
from clinic_dashboard.schemas import (
    Appointment,
    Doctor,
    Patient,
    default_appointment_draft,
    default_doctor_draft,
    default_patient_draft,
)


def test_add_then_cancel_resets_draft_and_errors():
    modal = ModalLifecycleManager(default_appointment_draft)
    modal.open_add()
    modal.set_field("reason", "Checkup")
    modal.set_errors({"patient_id": "The patient id field is required."})
    modal.cancel()
    assert modal.mode == ModalMode.CLOSED
    assert modal.draft == default_appointment_draft()
    assert modal.errors == {}

    modal.cancel()
    assert modal.draft == default_appointment_draft()


def test_edit_populates_draft_as_form_values():
    appt = Appointment(id=4, patient_id=2, doctor_id=3, start_at=datetime(2024, 1, 15, 9, 30), duration=45,
                       type="follow-up", status="confirmed", priority="high", reason="BP review")
    modal = ModalLifecycleManager(default_appointment_draft)
    modal.open_edit(appt)
    assert modal.mode == ModalMode.EDITING
    assert modal.target is appt
    assert modal.draft["patient_id"] == "2"
    assert modal.draft["start_at"] == "2024-01-15T09:30:00"
    assert modal.draft["duration"] == "45"
    # missing optional fields fall back to defaults
    assert modal.draft["room_id"] == ""
    assert modal.draft["notes"] == ""


def test_edit_then_cancel_leaves_entity_untouched():
    patient = Patient(id=1, name="John Doe", dob=date(1980, 1, 1), sex="male",
                      contact={"email": "jd@example.com"}, allergies=["Penicillin"])
    before = patient.model_dump()
    modal = ModalLifecycleManager(default_patient_draft)
    modal.open_edit(patient)
    modal.set_field("contact.email", "other@example.com")
    modal.draft["allergies"].append("Latex")
    modal.cancel()
    assert patient.model_dump() == before


def test_edit_draft_from_plain_dict_does_not_alias():
    entity = {"id": 1, "name": "Room 101", "equipment": ["Computer"], "capacity": 2}
    draft = draft_from_entity(entity, {"name": "", "capacity": "1", "equipment": []})
    draft["equipment"].append("Printer")
    assert entity["equipment"] == ["Computer"]
    assert draft["capacity"] == "2"


def test_doctor_availability_merges_over_defaults():
    doctor = Doctor(id=1, name="Dr. Lee", availability={"saturday": {"start": "10:00", "end": "14:00", "available": True}})
    modal = ModalLifecycleManager(default_doctor_draft)
    modal.open_edit(doctor)
    availability = modal.draft["availability"]
    assert len(availability) == 7
    assert availability["saturday"] == {"start": "10:00", "end": "14:00", "available": True}
    assert availability["monday"]["available"] is True


def test_view_and_delete_carry_no_draft():
    appt = Appointment(id=1)
    modal = ModalLifecycleManager(default_appointment_draft)
    modal.open_view(appt)
    assert modal.mode == ModalMode.VIEWING and modal.draft is None
    modal.open_delete(appt)
    assert modal.mode == ModalMode.CONFIRMING_DELETE and modal.target is appt


def test_set_field_outside_editable_modes_raises():
    modal = ModalLifecycleManager(default_appointment_draft)
    with pytest.raises(ModalStateError):
        modal.set_field("reason", "x")
    modal.open_view(Appointment(id=1))
    with pytest.raises(ModalStateError):
        modal.set_field("reason", "x")


def test_set_field_clears_that_fields_error_only():
    modal = ModalLifecycleManager(default_patient_draft)
    modal.open_add()
    modal.set_errors({"name": "required", "contact.email": "Invalid email address"})
    modal.set_field("contact.email", "jd@example.com")
    assert modal.draft["contact"]["email"] == "jd@example.com"
    assert modal.error_for("contact.email") is None
    assert modal.error_for("name") == "required"


def test_every_transition_bumps_session():
    modal = ModalLifecycleManager(default_appointment_draft)
    start = modal.session
    modal.open_add()
    modal.open_view(Appointment(id=1))
    modal.close()
    assert modal.session == start + 3
    assert not modal.is_open
