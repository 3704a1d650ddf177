# app/schemas.py

from pydantic import BaseModel, Field
from enum import Enum
from datetime import datetime, date as Date
from typing import List, Optional


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class UserRole(str, Enum):
    customer = "customer"
    admin = "admin"


class AppointmentStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    canceled = "canceled"


class DisplayStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    canceled = "canceled"
    completed = "completed"


class UserPublic(BaseModel):
    id: int
    email: str
    name: str
    role: UserRole


class UserCreate(BaseModel):
    email: str
    name: str = ""
    password: str = Field(min_length=8, max_length=72)


class BarberCreate(BaseModel):
    name: str = Field(min_length=1)
    active: bool = True


class BarberUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    active: Optional[bool] = None


class BarberPublic(BaseModel):
    id: int
    name: str
    active: bool


class AppointmentCreate(BaseModel):
    # optional so a missing selection reaches the committer's own validation
    barber_id: Optional[int] = None
    date: Optional[Date] = None
    time: Optional[str] = None


class AppointmentPublic(BaseModel):
    id: int
    code: str
    customer_id: int
    barber_id: int
    date: Date
    time: str
    status: AppointmentStatus
    display_status: DisplayStatus
    created_at: datetime


class AvailabilityResponse(BaseModel):
    selected: bool
    barber_id: Optional[int] = None
    date: Optional[Date] = None
    times: Optional[List[str]] = None


class DateSelectableResponse(BaseModel):
    date: Date
    selectable: bool
