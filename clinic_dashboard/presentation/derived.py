from collections import Counter
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional, Union

from ..application.services.list_controller import resolve_field

DateLike = Union[date, datetime, str, None]


def _to_date(value: DateLike) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.fromisoformat(str(value)).date()


def is_expired(expiry: DateLike, today: Optional[date] = None) -> bool:
    expiry = _to_date(expiry)
    if expiry is None:
        return False
    return expiry < (today or date.today())


def is_expiring_soon(expiry: DateLike, today: Optional[date] = None, days: int = 30) -> bool:
    """True when expiry falls within the next `days` days (expired items excluded)"""
    expiry = _to_date(expiry)
    if expiry is None:
        return False
    remaining = (expiry - (today or date.today())).days
    return 0 < remaining <= days


def status_counts(items: Iterable[Any], field: str = "status") -> Dict[str, int]:
    return dict(Counter(str(resolve_field(item, field)) for item in items if resolve_field(item, field) is not None))


def scheduled_on(items: Iterable[Any], day: DateLike, field: str = "start_at") -> List[Any]:
    target = _to_date(day)
    return [item for item in items if _to_date(resolve_field(item, field)) == target]
