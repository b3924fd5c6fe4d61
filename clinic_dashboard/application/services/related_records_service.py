from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional
import logging

from pydantic import ValidationError

from ..ports.resource_gateway import ResourceGateway
from ...exceptions import GatewayFailure
from ...schemas.appointments.appointment import CalendarEvent
from ...schemas.patients.patient import PatientHealthRecords

logger = logging.getLogger(__name__)


@dataclass
class RelatedRecordsService:
    """Read-only lookups fetched on demand from a detail view"""
    gateway: ResourceGateway

    async def patient_health_records(self, patient_id: int) -> PatientHealthRecords:
        payload = await self.gateway.fetch(f"/patients/{patient_id}/health-records")
        try:
            return PatientHealthRecords.model_validate(payload)
        except ValidationError as e:
            logger.error(f"Malformed health records for patient {patient_id}: {e}")
            raise GatewayFailure("Received malformed health records")

    async def appointment_calendar(self, start: Optional[datetime] = None, end: Optional[datetime] = None, doctor_id: Optional[int] = None) -> List[CalendarEvent]:
        params = {
            "start": start.isoformat() if start else None,
            "end": end.isoformat() if end else None,
            "doctor_id": doctor_id,
        }
        payload = await self.gateway.fetch("/appointments/calendar/data", params)
        try:
            return [CalendarEvent.model_validate(row) for row in payload.get("appointments") or []]
        except ValidationError as e:
            logger.error(f"Malformed calendar data: {e}")
            raise GatewayFailure("Received malformed calendar data")
