from decimal import Decimal
from pydantic import BaseModel, Field, field_validator
from typing import Any, Optional

# --- Vehicle Schemas ---

class VehicleDto(BaseModel):
    """
    Client-facing representation of a Vehicle.

    The id travels as text and is parsed by the service where it matters.
    It is ignored on create and required (positive) on update.
    """
    id: Optional[str] = Field(None, description="Vehicle id, assigned by the server on create")
    make: Optional[str] = Field(None)
    model: Optional[str] = Field(None)
    variant: Optional[str] = Field(None)
    colour: Optional[str] = Field(None)
    year: Optional[int] = Field(None)
    mileage: Optional[int] = Field(None)
    price: Optional[Decimal] = Field(None)

    @field_validator("id", mode="before")
    @classmethod
    def id_as_text(cls, value: Any) -> Any:
        # JSON clients may send the id as a number.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    class Config:
        from_attributes = True
