from typing import Optional, Protocol
from sqlalchemy.orm import Session

from cardealer.models import Vehicle
from .base_repository import BaseRepository


class VehicleRepositoryProtocol(Protocol):
    """Storage capability the vehicle service depends on."""

    def find_by_id(self, id: int) -> Optional[Vehicle]: ...

    def find_all(self) -> list[Vehicle]: ...

    def save(self, vehicle: Vehicle) -> Vehicle: ...

    def exists_by_id(self, id: int) -> bool: ...

    def delete_by_id(self, id: int) -> None: ...


class VehicleRepository(BaseRepository[Vehicle]):
    def __init__(self, db: Session):
        super().__init__(Vehicle, db)
