from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class OrderCreate(BaseModel):
    user_id: Optional[int] = Field(None, description="Buyer; defaults to the caller")
    product_id: int
    market_id: Optional[int] = None
    quantity: int = Field(gt=0)
    total_amount: float = Field(ge=0)
    order_date: Optional[datetime] = None
    status: Optional[str] = None


class OrderUpdate(BaseModel):
    status: Optional[str] = None
    quantity: Optional[int] = Field(None, gt=0)
    total_amount: Optional[float] = Field(None, ge=0)


class OrderResponse(BaseModel):
    order_id: int
    user_id: int
    product_id: int
    market_id: Optional[int] = None
    quantity: int
    total_amount: float
    order_date: datetime
    status: str


class OrderWithDetailsResponse(OrderResponse):
    product_name: Optional[str] = None
    customer_name: Optional[str] = None


class OrderCreatedResponse(BaseModel):
    message: str
    order_id: int


class OrderMessageResponse(BaseModel):
    message: str
