from . import vehicle_schemas
from .vehicle_schemas import VehicleDto
