from pydantic import BaseModel, Field
from typing import Optional


class LogisticsCreate(BaseModel):
    # presence of each field is checked by the service
    order_id: Optional[int] = None
    vehicle_number_plate: Optional[str] = Field(None, max_length=20)
    transport_mode: Optional[str] = Field(None, max_length=50)
    pickup_location: Optional[str] = Field(None, max_length=200)
    dropoff_location: Optional[str] = Field(None, max_length=200)
    delivered: bool = False


class LogisticsUpdate(BaseModel):
    vehicle_number_plate: Optional[str] = Field(None, max_length=20)
    transport_mode: Optional[str] = Field(None, max_length=50)
    pickup_location: Optional[str] = Field(None, max_length=200)
    dropoff_location: Optional[str] = Field(None, max_length=200)
    delivered: Optional[bool] = None


class LogisticsResponse(BaseModel):
    logistics_id: int
    order_id: int
    vehicle_number_plate: str
    transport_mode: str
    pickup_location: str
    dropoff_location: str
    delivered: bool


class LogisticsWithStatusResponse(LogisticsResponse):
    order_status: Optional[str] = None


class LogisticsCreatedResponse(BaseModel):
    message: str
    logistics_id: int


class LogisticsMessageResponse(BaseModel):
    message: str
