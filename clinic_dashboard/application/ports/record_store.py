from typing import Any, Dict, List, Optional, Protocol


class RecordStore(Protocol):
    """Row-level persistence for one table of the data service"""

    def list(self) -> List[Any]:
        ...

    def get(self, record_id: int) -> Optional[Any]:
        ...

    def find_by(self, field: str, value: Any, exclude_id: Optional[int] = None) -> Optional[Any]:
        ...

    def create(self, values: Dict[str, Any]) -> Any:
        ...

    def update(self, row: Any, values: Dict[str, Any]) -> Any:
        ...

    def delete(self, row: Any) -> None:
        ...
