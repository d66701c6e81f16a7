# This file makes the 'data_access' directory a Python package.
# It also makes it easier to import repositories from other modules.

from .base_repository import BaseRepository
from .vehicle_repository import VehicleRepository, VehicleRepositoryProtocol
from .memory_repository import InMemoryVehicleRepository
