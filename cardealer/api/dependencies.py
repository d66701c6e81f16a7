from fastapi import Depends
from sqlalchemy.orm import Session

from cardealer.data_access import VehicleRepository
from cardealer.db.session import get_db
from cardealer.services import VehicleService

def get_vehicle_service(db: Session = Depends(get_db)) -> VehicleService:
    """
    Dependency that builds a VehicleService over the request's DB session.
    Override it in tests to run the routes against another repository.
    """
    return VehicleService(VehicleRepository(db))
