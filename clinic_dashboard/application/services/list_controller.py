from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

ALL = "all"


def resolve_field(item: Any, path: str) -> Any:
    """Read a dotted field path from a model or a plain dict; missing parts give None"""
    value = item
    for part in path.split("."):
        if value is None:
            return None
        if isinstance(value, dict):
            value = value.get(part)
        else:
            value = getattr(value, part, None)
    return value


def _as_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value)
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return date.fromisoformat(text[:10])


@dataclass(frozen=True)
class EqualsFilter:
    name: str
    field: str
    default: Any = ALL

    def is_active(self, value: Any) -> bool:
        return value is not None and value != ALL

    def matches(self, item: Any, value: Any) -> bool:
        return resolve_field(item, self.field) == value


@dataclass(frozen=True)
class DateFilter:
    """Selects items falling on one calendar day"""
    name: str
    field: str
    default: Any = None

    def is_active(self, value: Any) -> bool:
        return value is not None and value != ""

    def matches(self, item: Any, value: Any) -> bool:
        try:
            return _as_date(resolve_field(item, self.field)) == _as_date(value)
        except ValueError:
            return False


@dataclass(frozen=True)
class DateRangeFilter:
    """Inclusive (start, end) range; either bound may be None"""
    name: str
    field: str
    default: Any = None

    def is_active(self, value: Any) -> bool:
        if value is None or value == "":
            return False
        if not isinstance(value, (tuple, list)):
            return True
        return any(bound not in (None, "") for bound in value)

    def matches(self, item: Any, value: Any) -> bool:
        # anything other than a (start, end) pair matches nothing
        try:
            start, end = value
            day = _as_date(resolve_field(item, self.field))
            start, end = _as_date(start), _as_date(end)
        except (TypeError, ValueError):
            return False
        if day is None:
            return False
        if start is not None and day < start:
            return False
        if end is not None and day > end:
            return False
        return True


class ResourceListController:
    """Holds one page's collection plus its search and filter state.

    `visible_items` is recomputed on every read; lists are small enough that
    no indexing or caching is worth it.
    """

    def __init__(self, items: Iterable[Any] = (), search_fields: Sequence[str] = (), filters: Sequence[Any] = ()):
        self._items: Tuple[Any, ...] = tuple(items)
        self.search_fields = tuple(search_fields)
        self.filters = {f.name: f for f in filters}
        self.search_term = ""
        self.filter_values: Dict[str, Any] = {f.name: f.default for f in filters}

    @property
    def items(self) -> Tuple[Any, ...]:
        return self._items

    def replace(self, items: Iterable[Any]) -> None:
        self._items = tuple(items)

    def set_search(self, term: Optional[str]) -> None:
        self.search_term = term or ""

    def set_filter(self, name: str, value: Any) -> None:
        if name not in self.filters:
            raise KeyError(f"Unknown filter: {name}")
        self.filter_values[name] = value

    def reset(self) -> None:
        self.search_term = ""
        self.filter_values = {name: f.default for name, f in self.filters.items()}

    def _matches_search(self, item: Any, needle: str) -> bool:
        for path in self.search_fields:
            value = resolve_field(item, path)
            if value is not None and needle in str(value).lower():
                return True
        return False

    def matches(self, item: Any) -> bool:
        needle = self.search_term.strip().lower()
        if needle and not self._matches_search(item, needle):
            return False
        for name, f in self.filters.items():
            value = self.filter_values.get(name)
            if f.is_active(value) and not f.matches(item, value):
                return False
        return True

    @property
    def visible_items(self) -> List[Any]:
        return [item for item in self._items if self.matches(item)]

    @property
    def is_filtered(self) -> bool:
        if self.search_term.strip():
            return True
        return any(f.is_active(self.filter_values.get(name)) for name, f in self.filters.items())

    def count_where(self, field: str, value: Any) -> int:
        return sum(1 for item in self._items if resolve_field(item, field) == value)
