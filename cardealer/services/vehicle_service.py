"""
Service layer for the vehicle inventory.

Sits between the HTTP routes and the repository: DTOs come in, entities
go to the repository, DTOs go back out. Missing records and unusable ids
are raised as ``VehicleNotFoundError`` / ``MissingIdentifierError`` and
left for the caller to render.
"""

import logging

from cardealer.core.exceptions import MissingIdentifierError, VehicleNotFoundError
from cardealer.data_access.vehicle_repository import VehicleRepositoryProtocol
from cardealer.mappers import vehicle_mapper
from cardealer.schemas.vehicle_schemas import VehicleDto

logger = logging.getLogger(__name__)


class VehicleService:
    """CRUD operations on vehicles."""

    def __init__(self, repo: VehicleRepositoryProtocol):
        self.repo = repo

    def get_by_id(self, id: int) -> VehicleDto:
        """Return a single vehicle; raises ``VehicleNotFoundError``."""
        logger.debug("Fetching vehicle %s", id)
        vehicle = self.repo.find_by_id(id)
        if vehicle is None:
            raise VehicleNotFoundError(id)
        return vehicle_mapper.to_dto(vehicle)

    def list_all(self) -> list[VehicleDto]:
        """Return every vehicle in the order the repository yields them."""
        return [vehicle_mapper.to_dto(vehicle) for vehicle in self.repo.find_all()]

    def create(self, new_vehicle: VehicleDto) -> VehicleDto:
        """Save a new vehicle and return it with its assigned id."""
        unsaved = vehicle_mapper.to_entity(new_vehicle, with_id=False)
        saved = self.repo.save(unsaved)
        logger.info("Created vehicle %s", saved.id)
        return vehicle_mapper.to_dto(saved)

    def update(self, update_dto: VehicleDto) -> None:
        """
        Replace every value of an existing vehicle, for use with PUT requests.

        The id is checked before existence: a non-positive id raises
        ``MissingIdentifierError``, an unknown one ``VehicleNotFoundError``.
        Fields left out of ``update_dto`` are cleared.
        """
        id = vehicle_mapper.parse_id(update_dto.id)
        if id <= 0:
            raise MissingIdentifierError()
        if not self.repo.exists_by_id(id):
            raise VehicleNotFoundError(id)
        self.repo.save(vehicle_mapper.to_entity(update_dto))
        logger.info("Updated vehicle %s", id)

    def delete(self, id: int) -> None:
        """Delete a vehicle by id; raises ``VehicleNotFoundError``."""
        if not self.repo.exists_by_id(id):
            raise VehicleNotFoundError(id)
        self.repo.delete_by_id(id)
        logger.info("Deleted vehicle %s", id)
