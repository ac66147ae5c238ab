from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class PaymentCreate(BaseModel):
    order_id: int
    payment_method: Optional[str] = None
    reference: Optional[str] = None
    payment_date: Optional[datetime] = None
    payment_status: Optional[str] = None


class PaymentUpdate(BaseModel):
    payment_method: Optional[str] = None
    reference: Optional[str] = None
    payment_date: Optional[datetime] = None
    payment_status: Optional[str] = None


class PaymentResponse(BaseModel):
    payment_id: int
    order_id: int
    payment_method: Optional[str] = None
    reference: Optional[str] = None
    payment_date: Optional[datetime] = None
    payment_status: Optional[str] = None


class PaymentMessageResponse(BaseModel):
    message: str
