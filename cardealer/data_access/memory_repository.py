"""
Dict-backed vehicle repository.

Stores detached copies of each entity so that nothing handed out by the
repository aliases its internal state, the same way reads from a real
database return fresh objects.
"""

from typing import Optional

from cardealer.models import Vehicle


def _copy(vehicle: Vehicle) -> Vehicle:
    columns = [column.key for column in Vehicle.__table__.columns]
    return Vehicle(**{name: getattr(vehicle, name) for name in columns})


class InMemoryVehicleRepository:
    def __init__(self):
        self._rows: dict[int, Vehicle] = {}
        self._last_id = 0

    def find_by_id(self, id: int) -> Optional[Vehicle]:
        row = self._rows.get(id)
        return _copy(row) if row is not None else None

    def find_all(self) -> list[Vehicle]:
        return [_copy(row) for row in self._rows.values()]

    def exists_by_id(self, id: int) -> bool:
        return id in self._rows

    def save(self, vehicle: Vehicle) -> Vehicle:
        stored = _copy(vehicle)
        if stored.id is None:
            self._last_id += 1
            stored.id = self._last_id
        else:
            self._last_id = max(self._last_id, stored.id)
        self._rows[stored.id] = stored
        return _copy(stored)

    def delete_by_id(self, id: int) -> None:
        self._rows.pop(id, None)
