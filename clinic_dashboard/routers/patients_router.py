from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select
import logging

from .appointments_router import appointment_to_wire
from .crud import add_list_route, add_mutation_routes, default_wire
from ..application.services.records_service import RecordsService
from ..database import get_session
from ..db.models import AppointmentRow, EncounterRow, PatientRow, PrescriptionRow
from ..infrastructure.persistence.sqlalchemy.repositories.record_store_sql import SqlRecordStore
from ..resources import PATIENTS
from ..schemas import PatientForm

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/patients", tags=["Patients"])


def patients_service(session: Session) -> RecordsService:
    return RecordsService(label=PATIENTS.label, form=PatientForm, store=SqlRecordStore(session, PatientRow))


@router.get("/{patient_id}/health-records")
def health_records(patient_id: int, session: Session = Depends(get_session)):
    patient = session.get(PatientRow, patient_id)
    if not patient:
        raise HTTPException(status_code=404, detail="Patient not found")
    try:
        appointments = session.exec(
            select(AppointmentRow)
            .where(AppointmentRow.patient_id == patient_id)
            .order_by(AppointmentRow.start_at.desc())
        ).all()
        encounters = session.exec(
            select(EncounterRow)
            .where(EncounterRow.patient_id == patient_id)
            .order_by(EncounterRow.created_at.desc())
        ).all()
        prescriptions = session.exec(
            select(PrescriptionRow)
            .where(PrescriptionRow.patient_id == patient_id)
            .order_by(PrescriptionRow.issued_at.desc())
        ).all()
        return {
            "success": True,
            "patient": default_wire(session, patient),
            "appointments": [appointment_to_wire(session, a) for a in appointments],
            "encounters": [e.model_dump(mode="json") for e in encounters],
            "prescriptions": [p.model_dump(mode="json") for p in prescriptions],
        }
    except Exception as e:
        logger.error(f"Error retrieving health records for patient {patient_id}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to retrieve health records")


add_list_route(router, PATIENTS, PatientRow)
add_mutation_routes(router, PATIENTS, patients_service)
