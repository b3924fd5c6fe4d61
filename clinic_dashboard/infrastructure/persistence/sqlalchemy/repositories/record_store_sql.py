from typing import Any, Dict, List, Optional, Type
from sqlmodel import Session, SQLModel, select

from .....application.ports.record_store import RecordStore


class SqlRecordStore(RecordStore):
    def __init__(self, session: Session, model: Type[SQLModel]):
        self.session = session
        self.model = model

    def list(self) -> List[Any]:
        return list(self.session.exec(select(self.model).order_by(self.model.id)).all())

    def get(self, record_id: int) -> Optional[Any]:
        return self.session.get(self.model, record_id)

    def find_by(self, field: str, value: Any, exclude_id: Optional[int] = None) -> Optional[Any]:
        column = getattr(self.model, field)
        query = select(self.model).where(column == value)
        if exclude_id is not None:
            query = query.where(self.model.id != exclude_id)
        return self.session.exec(query).first()

    def create(self, values: Dict[str, Any]) -> Any:
        row = self.model(**values)
        self.session.add(row)
        self.session.commit()
        self.session.refresh(row)
        return row

    def update(self, row: Any, values: Dict[str, Any]) -> Any:
        for key, value in values.items():
            setattr(row, key, value)
        self.session.add(row)
        self.session.commit()
        self.session.refresh(row)
        return row

    def delete(self, row: Any) -> None:
        self.session.delete(row)
        self.session.commit()
