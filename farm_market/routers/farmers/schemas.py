from pydantic import BaseModel, Field
from typing import Optional


class FarmerCreate(BaseModel):
    full_name: Optional[str] = Field(None, max_length=150)
    phone_number: Optional[str] = Field(None, max_length=30)
    location: Optional[str] = Field(None, max_length=200)
    farm_name: Optional[str] = Field(None, max_length=200)


class FarmerUpdate(FarmerCreate):
    pass


class FarmerResponse(BaseModel):
    farmer_id: int
    full_name: str
    phone_number: Optional[str] = None
    location: Optional[str] = None
    farm_name: Optional[str] = None


class FarmerCreatedResponse(BaseModel):
    message: str
    farmer_id: int


class FarmerMessageResponse(BaseModel):
    message: str
