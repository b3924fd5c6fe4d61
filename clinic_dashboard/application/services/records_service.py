from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Type
import copy
import logging

from fastapi import HTTPException
from pydantic import ValidationError

from ..ports.record_store import RecordStore
from ...exceptions import FieldValidationError, validation_errors_from_pydantic
from ...schemas.common.common import FormModel

logger = logging.getLogger(__name__)

# (validated values, id of the row being updated or None) -> {field: [messages]}
Check = Callable[[Dict[str, Any], Optional[int]], Dict[str, List[str]]]


def merge_values(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Apply a partial update on top of stored values; nested objects merge key by key"""
    merged = copy.deepcopy(base)
    for key, value in overlay.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_values(merged[key], value)
        else:
            merged[key] = value
    return merged


def unique(store: RecordStore, field: str, message: Optional[str] = None) -> Check:
    def check(values: Dict[str, Any], record_id: Optional[int]) -> Dict[str, List[str]]:
        value = values.get(field)
        if value and store.find_by(field, value, exclude_id=record_id) is not None:
            return {field: [message or f"The {field.replace('_', ' ')} has already been taken."]}
        return {}
    return check


def exists(store: RecordStore, field: str, what: str) -> Check:
    def check(values: Dict[str, Any], record_id: Optional[int]) -> Dict[str, List[str]]:
        value = values.get(field)
        if value is not None and store.get(value) is None:
            return {field: [f"The selected {what} is invalid."]}
        return {}
    return check


@dataclass
class RecordsService:
    """Create/update/delete rules for one editable resource of the data service"""
    label: str
    form: Type[FormModel]
    store: RecordStore
    checks: Sequence[Check] = ()
    derive: Optional[Callable[[Any], Dict[str, Any]]] = None

    def get(self, record_id: int) -> Any:
        row = self.store.get(record_id)
        if row is None:
            raise HTTPException(status_code=404, detail=f"{self.label.capitalize()} not found")
        return row

    def _validated(self, data: Dict[str, Any], record_id: Optional[int] = None) -> Dict[str, Any]:
        try:
            form = self.form.model_validate(data)
        except ValidationError as e:
            raise FieldValidationError(validation_errors_from_pydantic(e.errors(), skip_prefixes=()))

        values = form.model_dump()
        if self.derive:
            values.update(self.derive(form))

        errors: Dict[str, List[str]] = {}
        for check in self.checks:
            for field, messages in check(values, record_id).items():
                errors.setdefault(field, []).extend(messages)
        if errors:
            logger.info(f"Rejected {self.label}: {sorted(errors)}")
            raise FieldValidationError(errors)
        return values

    def create(self, data: Dict[str, Any]) -> Any:
        return self.store.create(self._validated(data))

    def update(self, record_id: int, data: Dict[str, Any]) -> Any:
        row = self.get(record_id)
        current = row.model_dump(include=set(self.form.model_fields))
        values = self._validated(merge_values(current, data), record_id)
        return self.store.update(row, values)

    def delete(self, record_id: int) -> None:
        self.store.delete(self.get(record_id))
