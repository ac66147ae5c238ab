from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class OrderStatusUpdate(BaseModel):
    status: str = Field(min_length=1, max_length=50)


class DriverAssignment(BaseModel):
    vehicle_number_plate: str = Field(min_length=1, max_length=20)
    transport_mode: str = Field(min_length=1, max_length=50)
    pickup_location: str = Field(min_length=1, max_length=200)
    dropoff_location: str = Field(min_length=1, max_length=200)


class DriverResponse(BaseModel):
    user_id: int
    full_name: str
    email: str
    phone: Optional[str] = None
    role: str
    created_at: Optional[datetime] = None


class AdminMessageResponse(BaseModel):
    message: str
