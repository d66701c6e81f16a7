from .vehicle_service import VehicleService
