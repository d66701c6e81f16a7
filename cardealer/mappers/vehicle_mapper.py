"""
Conversions between the ``Vehicle`` entity and ``VehicleDto``.

Both directions copy the same explicit field list. Converting a DTO into
an entity always writes every field, so a field missing from the DTO ends
up as ``None`` on the entity. Saving that entity replaces the stored row.
"""

from typing import Optional

from cardealer.models import Vehicle
from cardealer.schemas.vehicle_schemas import VehicleDto

VEHICLE_FIELDS = ("make", "model", "variant", "colour", "year", "mileage", "price")


def parse_id(raw_id: Optional[str]) -> int:
    """Parse a DTO id; a missing or blank id parses as 0."""
    if raw_id is None or not str(raw_id).strip():
        return 0
    return int(raw_id)


def to_dto(vehicle: Vehicle) -> VehicleDto:
    return VehicleDto(
        id=str(vehicle.id) if vehicle.id is not None else None,
        **{field: getattr(vehicle, field) for field in VEHICLE_FIELDS},
    )


def to_entity(dto: VehicleDto, *, with_id: bool = True) -> Vehicle:
    """
    Build a Vehicle from a DTO.

    With ``with_id=False`` the DTO id is dropped so persistence assigns one.
    """
    vehicle = Vehicle(**{field: getattr(dto, field) for field in VEHICLE_FIELDS})
    if with_id and dto.id is not None:
        vehicle.id = parse_id(dto.id)
    return vehicle
