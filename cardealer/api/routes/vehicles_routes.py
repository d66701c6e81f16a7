from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status

from cardealer.api import dependencies
from cardealer.schemas.vehicle_schemas import VehicleDto
from cardealer.services import VehicleService

router = APIRouter()

@router.get("/", response_model=List[VehicleDto])
async def get_vehicles(
    *,
    service: VehicleService = Depends(dependencies.get_vehicle_service),
):
    """
    Retrieve every vehicle.
    """
    return service.list_all()

@router.get("/{vehicle_id}", response_model=VehicleDto)
async def get_vehicle_by_id(
    *,
    service: VehicleService = Depends(dependencies.get_vehicle_service),
    vehicle_id: int,
):
    """
    Get a specific vehicle by ID.
    """
    return service.get_by_id(vehicle_id)

@router.post("/", response_model=VehicleDto, status_code=status.HTTP_201_CREATED)
async def create_vehicle(
    *,
    service: VehicleService = Depends(dependencies.get_vehicle_service),
    vehicle_in: VehicleDto,
):
    """
    Create a new vehicle. Any id in the body is ignored.
    """
    return service.create(vehicle_in)

@router.put("/", status_code=status.HTTP_204_NO_CONTENT)
async def update_vehicle(
    *,
    service: VehicleService = Depends(dependencies.get_vehicle_service),
    vehicle_update: VehicleDto,
):
    """
    Replace all values of the vehicle identified by the body's id.
    """
    try:
        service.update(vehicle_update)
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid vehicle id: {vehicle_update.id!r}"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/{vehicle_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vehicle(
    *,
    service: VehicleService = Depends(dependencies.get_vehicle_service),
    vehicle_id: int,
):
    """
    Delete a vehicle.
    """
    service.delete(vehicle_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
