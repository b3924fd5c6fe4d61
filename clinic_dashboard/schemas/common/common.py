# clinic_dashboard/schemas/common/common.py
from pydantic import BaseModel, ConfigDict, model_validator
from typing import Any, Dict, List, Optional


class Entity(BaseModel):
    """Base for records received from the clinic API; unknown wire fields are ignored"""
    model_config = ConfigDict(extra="ignore")

    id: int


class FormModel(BaseModel):
    """Base for draft validation.

    Drafts come straight from form inputs, so every value may arrive as a string;
    blank strings mean "not provided" and are dropped before field validation.
    """
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    @model_validator(mode="before")
    @classmethod
    def drop_blank_inputs(cls, data):
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if not (isinstance(v, str) and v.strip() == "")}
        return data

    def payload(self, clear_blanks: bool = False) -> Dict[str, Any]:
        """JSON-ready body for create/update requests.

        Updates are merged over the stored record, so with `clear_blanks` the
        fields left blank go out as null instead of being omitted.
        """
        return self.model_dump(mode="json", exclude_none=not clear_blanks)


class MutationResult(BaseModel):
    """Outcome of a successful create/update/delete round-trip"""
    message: Optional[str] = None
    data: Optional[Dict[str, Any]] = None


def split_tags(v):
    """Accept comma separated text or a list; drop blanks and duplicates, keep order"""
    if v is None:
        return []
    if isinstance(v, str):
        v = v.split(",")
    out: List[str] = []
    for item in v:
        item = str(item).strip()
        if item and item not in out:
            out.append(item)
    return out


def canonical_choice(v: str, allowed: List[str], what: str) -> str:
    """Match a free-form input against the allowed options case-insensitively"""
    for option in allowed:
        if v.lower() == option.lower():
            return option
    raise ValueError(f"{what} must be one of: {', '.join(allowed)}")
