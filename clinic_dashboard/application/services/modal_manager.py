import copy
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional

from pydantic import BaseModel

from ...exceptions import ModalStateError


class ModalMode(str, Enum):
    CLOSED = "closed"
    ADDING = "adding"
    EDITING = "editing"
    VIEWING = "viewing"
    CONFIRMING_DELETE = "confirming_delete"


EDITABLE_MODES = (ModalMode.ADDING, ModalMode.EDITING)


def _form_value(value: Any) -> str:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def draft_from_entity(entity: Any, defaults: Dict[str, Any]) -> Dict[str, Any]:
    """Build an edit draft from an entity without aliasing any of its data.

    Only keys present in the defaults are carried over. Missing or None values
    fall back to the default, and values whose default is a string are rendered
    the way a form input would hold them.
    """
    source = entity.model_dump() if isinstance(entity, BaseModel) else copy.deepcopy(dict(entity))
    draft: Dict[str, Any] = {}
    for key, default in defaults.items():
        value = source.get(key)
        if value is None:
            draft[key] = default
        elif isinstance(default, str):
            draft[key] = _form_value(value)
        elif isinstance(default, dict) and isinstance(value, dict):
            merged = copy.deepcopy(default)
            for sub_key, sub_value in value.items():
                if isinstance(merged.get(sub_key), dict) and isinstance(sub_value, dict):
                    merged[sub_key].update({k: v for k, v in sub_value.items() if v is not None})
                elif sub_value is not None:
                    merged[sub_key] = sub_value if not isinstance(merged.get(sub_key), str) else _form_value(sub_value)
            draft[key] = merged
        else:
            draft[key] = copy.deepcopy(value)
    return draft


class ModalLifecycleManager:
    """Tracks the single open modal of a page and its draft.

    Every open/close bumps `session`, which lets in-flight requests detect that
    the modal they were started from is gone.
    """

    def __init__(self, default_draft: Callable[[], Dict[str, Any]]):
        self._default_draft = default_draft
        self.mode = ModalMode.CLOSED
        self.target: Any = None
        self.draft: Optional[Dict[str, Any]] = default_draft()
        self.errors: Dict[str, str] = {}
        self.session = 0

    def _enter(self, mode: ModalMode, target: Any = None, draft: Optional[Dict[str, Any]] = None) -> None:
        self.mode = mode
        self.target = target
        self.draft = draft
        self.errors = {}
        self.session += 1

    @property
    def is_open(self) -> bool:
        return self.mode != ModalMode.CLOSED

    def open_add(self) -> None:
        self._enter(ModalMode.ADDING, draft=self._default_draft())

    def open_edit(self, entity: Any) -> None:
        self._enter(ModalMode.EDITING, target=entity, draft=draft_from_entity(entity, self._default_draft()))

    def open_view(self, entity: Any) -> None:
        self._enter(ModalMode.VIEWING, target=entity)

    def open_delete(self, entity: Any) -> None:
        self._enter(ModalMode.CONFIRMING_DELETE, target=entity)

    def close(self) -> None:
        # a closed modal holds a pristine draft so the next open starts clean
        self._enter(ModalMode.CLOSED, draft=self._default_draft())

    cancel = close

    def set_field(self, path: str, value: Any) -> None:
        if self.mode not in EDITABLE_MODES:
            raise ModalStateError(f"Cannot edit fields while modal is {self.mode.value}")
        parts = path.split(".")
        node = self.draft
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[parts[-1]] = value
        self.errors.pop(path, None)

    def set_errors(self, errors: Mapping[str, str]) -> None:
        self.errors = dict(errors)

    def merge_errors(self, errors: Mapping[str, str]) -> None:
        self.errors.update(errors)

    def clear_errors(self) -> None:
        self.errors = {}

    def error_for(self, field: str) -> Optional[str]:
        return self.errors.get(field)
