# clinic_dashboard/schemas/rooms/room.py
from pydantic import Field, field_validator
from typing import Any, Dict, List, Optional

from ..common.common import Entity, FormModel, canonical_choice, split_tags

ROOM_TYPES = ["Consultation", "Examination", "Procedure", "Emergency", "Lab"]
ROOM_STATUSES = ["Available", "Occupied", "Maintenance"]


class Room(Entity):
    name: str
    type: str = "Consultation"
    capacity: int = 1
    status: str = "Available"
    equipment: List[str] = []
    doctor: Optional[str] = None


class RoomForm(FormModel):
    name: str = Field(min_length=1, max_length=100)
    type: str = "Consultation"
    capacity: int = Field(default=1, ge=1, le=50)
    status: str = "Available"
    equipment: List[str] = []

    @field_validator("type")
    @classmethod
    def validate_type(cls, v):
        return canonical_choice(v, ROOM_TYPES, "Type")

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        return canonical_choice(v, ROOM_STATUSES, "Status")

    @field_validator("equipment", mode="before")
    @classmethod
    def parse_equipment(cls, v):
        return split_tags(v)


def default_room_draft() -> Dict[str, Any]:
    return {
        "name": "",
        "type": "Consultation",
        "capacity": "1",
        "status": "Available",
        "equipment": [],
    }
