from fastapi import APIRouter
from sqlmodel import Session

from .crud import add_list_route, add_mutation_routes
from ..application.services.records_service import RecordsService, unique
from ..db.models import DoctorRow
from ..infrastructure.persistence.sqlalchemy.repositories.record_store_sql import SqlRecordStore
from ..resources import DOCTORS
from ..schemas import DoctorForm

router = APIRouter(prefix="/doctors", tags=["Doctors"])


def doctors_service(session: Session) -> RecordsService:
    store = SqlRecordStore(session, DoctorRow)
    return RecordsService(
        label=DOCTORS.label,
        form=DoctorForm,
        store=store,
        checks=(
            unique(store, "email"),
            unique(store, "license_number"),
        ),
    )


add_list_route(router, DOCTORS, DoctorRow)
add_mutation_routes(router, DOCTORS, doctors_service)
