import operator
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from core.errors import NotFound, ValidationError

_QUERY_OPS = {
    '==': operator.eq,
    '!=': operator.ne,
    '<': operator.lt,
    '<=': operator.le,
    '>': operator.gt,
    '>=': operator.ge,
    'in': lambda column, value: column.in_(list(value)),
}


class BaseRepository:
    """
    Session-bound repository. Subclasses set `model` to get the generic
    document operations (get, get_many, query, add, update, count).
    """
    model = None

    def __init__(self, db: Session):
        self.db = db

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()

    def get(self, doc_id: Any):
        if doc_id is None:
            return None
        return self.db.get(self.model, doc_id)

    def get_or_404(self, doc_id: Any, what: Optional[str] = None):
        doc = self.get(doc_id)
        if doc is None:
            raise NotFound(f"{what or self.model.__name__} not found")
        return doc

    def list_all(self) -> List[Any]:
        stmt = select(self.model).order_by(self.model.id)
        return self.db.execute(stmt).scalars().all()

    def get_many(self, ids: Iterable[Any]) -> Dict[Any, Any]:
        """Batch-get by id set; missing ids are simply absent from the result."""
        unique_ids = {i for i in ids if i is not None}
        if not unique_ids:
            return {}
        stmt = select(self.model).where(self.model.id.in_(unique_ids))
        return {doc.id: doc for doc in self.db.execute(stmt).scalars().all()}

    def query(self, field: str, op: str, value: Any) -> List[Any]:
        if op not in _QUERY_OPS:
            raise ValidationError(f"Unsupported query operator: {op}")
        column = getattr(self.model, field, None)
        if column is None:
            raise ValidationError(f"Unknown field: {field}")
        stmt = select(self.model).where(_QUERY_OPS[op](column, value))
        return self.db.execute(stmt).scalars().all()

    def add(self, doc) -> Any:
        self.db.add(doc)
        self.db.flush()  # Generate ID
        return doc.id

    def update(self, doc_id: Any, partial: Dict[str, Any]):
        doc = self.get_or_404(doc_id)
        for key, value in partial.items():
            setattr(doc, key, value)
        self.db.flush()
        return doc

    def count(self, **filters) -> int:
        stmt = select(func.count()).select_from(self.model)
        for field, value in filters.items():
            stmt = stmt.where(getattr(self.model, field) == value)
        return self.db.execute(stmt).scalar_one()
