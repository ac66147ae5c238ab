from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class ProductCreate(BaseModel):
    # name and price are checked by the service so the caller gets its message
    product_name: Optional[str] = Field(None, max_length=200)
    category: Optional[str] = Field(None, max_length=100)
    stock_quantity: Optional[int] = Field(None, ge=0)
    price: Optional[float] = None
    description: Optional[str] = None
    farmer_id: Optional[int] = None


class ProductUpdate(BaseModel):
    product_name: Optional[str] = Field(None, max_length=200)
    category: Optional[str] = Field(None, max_length=100)
    stock_quantity: Optional[int] = Field(None, ge=0)
    price: Optional[float] = None
    description: Optional[str] = None


class ProductResponse(BaseModel):
    product_id: int
    farmer_id: int
    product_name: str
    category: Optional[str] = None
    stock_quantity: int
    price: float
    description: Optional[str] = None
    created_at: Optional[datetime] = None


class FarmerProductCreate(BaseModel):
    """Body accepted by the farmer dashboard"""
    name: Optional[str] = None
    price: Optional[float] = None
    quantity: Optional[int] = None
    description: Optional[str] = None
    category: Optional[str] = None


class ProductMessageResponse(BaseModel):
    message: str
