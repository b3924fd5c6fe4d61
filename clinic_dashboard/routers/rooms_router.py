from fastapi import APIRouter
from sqlmodel import Session

from .crud import add_list_route, add_mutation_routes
from ..application.services.records_service import RecordsService, unique
from ..db.models import RoomRow
from ..infrastructure.persistence.sqlalchemy.repositories.record_store_sql import SqlRecordStore
from ..resources import ROOMS
from ..schemas import RoomForm

router = APIRouter(prefix="/rooms", tags=["Rooms"])


def rooms_service(session: Session) -> RecordsService:
    store = SqlRecordStore(session, RoomRow)
    return RecordsService(label=ROOMS.label, form=RoomForm, store=store, checks=(unique(store, "name"),))


add_list_route(router, ROOMS, RoomRow)
add_mutation_routes(router, ROOMS, rooms_service)
