from typing import Any, Generic, Type, TypeVar, Optional, Protocol
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

class SQLAlchemyModel(Protocol):
    id: Any

ModelType = TypeVar("ModelType", bound=SQLAlchemyModel)

class BaseRepository(Generic[ModelType]):
    def __init__(self, model: Type[ModelType], db: Session):
        """
        Base class for data access repositories.
        Provides the default CRUD primitives over one session.
        """
        self.model = model
        self.db = db

    def find_by_id(self, id: Any) -> Optional[ModelType]:
        return self.db.get(self.model, id)

    def find_all(self) -> list[ModelType]:
        return self.db.query(self.model).all()

    def exists_by_id(self, id: Any) -> bool:
        return self.db.query(self.model.id).filter(self.model.id == id).first() is not None

    def save(self, obj: ModelType) -> ModelType:
        """
        Insert ``obj`` when it has no id, otherwise overwrite the stored row
        with every attribute set on ``obj``.
        """
        if obj.id is None:
            self.db.add(obj)
        else:
            obj = self.db.merge(obj)
        self._commit()
        self.db.refresh(obj)
        return obj

    def delete_by_id(self, id: Any) -> None:
        obj = self.db.get(self.model, id)
        if obj:
            self.db.delete(obj)
            self._commit()

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
