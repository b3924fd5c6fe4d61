# Shared list/create/update/delete endpoints; resource routers plug in their table,
# validation service and wire serializer.
from typing import Any, Callable, Dict
from fastapi import APIRouter, Body, Depends, HTTPException
from sqlmodel import Session, SQLModel
import logging

from ..application.services.records_service import RecordsService
from ..database import get_session
from ..exceptions import FieldValidationError, create_success_response
from ..infrastructure.persistence.sqlalchemy.repositories.record_store_sql import SqlRecordStore
from ..resources import ResourceDefinition

logger = logging.getLogger(__name__)

ToWire = Callable[[Session, Any], Dict[str, Any]]


def default_wire(session: Session, row: SQLModel) -> Dict[str, Any]:
    return row.model_dump(mode="json", exclude={"created_at"})


def add_list_route(router: APIRouter, definition: ResourceDefinition, model, to_wire: ToWire = default_wire) -> None:
    @router.get("", summary=f"List {definition.plural}")
    def list_records(session: Session = Depends(get_session)):
        try:
            rows = SqlRecordStore(session, model).list()
            return {"success": True, definition.list_key: [to_wire(session, row) for row in rows]}
        except Exception as e:
            logger.error(f"Error retrieving {definition.plural}: {str(e)}")
            raise HTTPException(status_code=500, detail=f"Failed to retrieve {definition.plural}")


def add_mutation_routes(router: APIRouter, definition: ResourceDefinition, build_service: Callable[[Session], RecordsService], to_wire: ToWire = default_wire) -> None:
    label = definition.label
    title = label[:1].upper() + label[1:]

    def get_service(session: Session = Depends(get_session)) -> RecordsService:
        return build_service(session)

    @router.post("", status_code=201, summary=f"Create {label}")
    def create_record(
        payload: Dict[str, Any] = Body(...),
        session: Session = Depends(get_session),
        service: RecordsService = Depends(get_service),
    ):
        try:
            row = service.create(payload)
        except (HTTPException, FieldValidationError):
            raise
        except Exception as e:
            logger.error(f"Error creating {label}: {str(e)}")
            raise HTTPException(status_code=500, detail=f"Failed to create {label}")
        logger.info(f"Created {label} {row.id}")
        return create_success_response(f"{title} created successfully", to_wire(session, row))

    @router.put("/{record_id}", summary=f"Update {label}")
    def update_record(
        record_id: int,
        payload: Dict[str, Any] = Body(...),
        session: Session = Depends(get_session),
        service: RecordsService = Depends(get_service),
    ):
        try:
            row = service.update(record_id, payload)
        except (HTTPException, FieldValidationError):
            raise
        except Exception as e:
            logger.error(f"Error updating {label} {record_id}: {str(e)}")
            raise HTTPException(status_code=500, detail=f"Failed to update {label}")
        logger.info(f"Updated {label} {record_id}")
        return create_success_response(f"{title} updated successfully", to_wire(session, row))

    @router.delete("/{record_id}", summary=f"Delete {label}")
    def delete_record(record_id: int, service: RecordsService = Depends(get_service)):
        try:
            service.delete(record_id)
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error deleting {label} {record_id}: {str(e)}")
            raise HTTPException(status_code=500, detail=f"Failed to delete {label}")
        logger.info(f"Deleted {label} {record_id}")
        return {"success": True, "message": f"{title} deleted successfully"}
