from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from enum import Enum


class UserRole(str, Enum):
    FARMER = "farmer"
    CUSTOMER = "customer"
    ADMIN = "admin"
    DRIVER = "driver"


# Request schemas
class UserRegister(BaseModel):
    full_name: str = Field(min_length=1, max_length=150)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=30)
    role: UserRole = UserRole.CUSTOMER
    password: str = Field(min_length=1)


class UserLogin(BaseModel):
    email: EmailStr
    password: str


# Response schemas
class MessageResponse(BaseModel):
    message: str


class LoginUser(BaseModel):
    id: int
    email: str
    full_name: str
    role: str


class LoginResponse(BaseModel):
    message: str = "Login successful"
    token: str
    user: LoginUser


class CurrentUserResponse(BaseModel):
    user_id: Optional[int] = None
    email: Optional[str] = None
    role: Optional[str] = None
