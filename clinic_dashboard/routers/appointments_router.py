from typing import Any, Dict, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session, select
from datetime import datetime
import logging

from .crud import add_list_route, add_mutation_routes, default_wire
from ..application.services.records_service import RecordsService, exists
from ..database import get_session
from ..db.models import AppointmentRow, DoctorRow, PatientRow, RoomRow
from ..infrastructure.persistence.sqlalchemy.repositories.record_store_sql import SqlRecordStore
from ..presentation.badges import calendar_color
from ..resources import APPOINTMENTS
from ..schemas import AppointmentForm

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/appointments", tags=["Appointments"])


def _names(session: Session, row: AppointmentRow) -> Dict[str, Optional[str]]:
    patient = session.get(PatientRow, row.patient_id)
    doctor = session.get(DoctorRow, row.doctor_id)
    room = session.get(RoomRow, row.room_id) if row.room_id else None
    return {
        "patient_name": patient.name if patient else "Unknown Patient",
        "doctor_name": doctor.name if doctor else "Unknown Doctor",
        "room_name": room.name if room else None,
    }


def appointment_to_wire(session: Session, row: AppointmentRow) -> Dict[str, Any]:
    data = default_wire(session, row)
    data.update(_names(session, row))
    return data


def appointments_service(session: Session) -> RecordsService:
    return RecordsService(
        label=APPOINTMENTS.label,
        form=AppointmentForm,
        store=SqlRecordStore(session, AppointmentRow),
        checks=(
            exists(SqlRecordStore(session, PatientRow), "patient_id", "patient"),
            exists(SqlRecordStore(session, DoctorRow), "doctor_id", "doctor"),
            exists(SqlRecordStore(session, RoomRow), "room_id", "room"),
        ),
        derive=lambda form: {"end_at": form.end_at},
    )


@router.get("/calendar/data")
def calendar_data(
    start: Optional[datetime] = Query(None),
    end: Optional[datetime] = Query(None),
    doctor_id: Optional[int] = Query(None),
    session: Session = Depends(get_session),
):
    try:
        query = select(AppointmentRow)
        if start is not None:
            query = query.where(AppointmentRow.start_at >= start)
        if end is not None:
            query = query.where(AppointmentRow.start_at <= end)
        if doctor_id is not None:
            query = query.where(AppointmentRow.doctor_id == doctor_id)
        rows = session.exec(query.order_by(AppointmentRow.start_at)).all()

        events = []
        for row in rows:
            names = _names(session, row)
            events.append({
                "id": row.id,
                "title": names["patient_name"],
                "start": row.start_at.isoformat(),
                "end": row.end_at.isoformat() if row.end_at else None,
                "status": row.status,
                "type": row.type,
                "doctor": names["doctor_name"],
                "room": names["room_name"],
                "color": calendar_color(row.status),
            })
        return {"success": True, "appointments": events}
    except Exception as e:
        logger.error(f"Error building appointment calendar: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to retrieve calendar events")


add_list_route(router, APPOINTMENTS, AppointmentRow, appointment_to_wire)
add_mutation_routes(router, APPOINTMENTS, appointments_service, appointment_to_wire)
