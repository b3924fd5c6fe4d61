from fastapi import APIRouter
from sqlmodel import Session

from .crud import add_list_route, add_mutation_routes
from ..application.services.records_service import RecordsService, unique
from ..db.models import StaffRow
from ..infrastructure.persistence.sqlalchemy.repositories.record_store_sql import SqlRecordStore
from ..resources import STAFF
from ..schemas import StaffForm

router = APIRouter(prefix="/staff", tags=["Staff"])


def staff_service(session: Session) -> RecordsService:
    store = SqlRecordStore(session, StaffRow)
    return RecordsService(label=STAFF.label, form=StaffForm, store=store, checks=(unique(store, "email"),))


add_list_route(router, STAFF, StaffRow)
add_mutation_routes(router, STAFF, staff_service)
