# app/models.py

from typing import Optional
from datetime import datetime, date as Date

from sqlalchemy import Index, text
from sqlmodel import SQLModel, Field

ACTIVE_SLOT_INDEX = "uq_barber_slot_active"


class Appointment(SQLModel, table=True):
    # one non-canceled booking per barber/date/time; canceled rows stay as history
    __table_args__ = (
        Index(
            ACTIVE_SLOT_INDEX,
            "barber_id",
            "date",
            "time",
            unique=True,
            sqlite_where=text("status != 'canceled'"),
            postgresql_where=text("status != 'canceled'"),
        ),
    )

    id: Optional[int] = Field(default=None, primary_key=True)

    customer_id: int = Field(foreign_key="user.id", index=True)
    barber_id: int = Field(foreign_key="barber.id", index=True)
    date: Date = Field(index=True)
    time: str  # grid value, "HH:MM"
    code: str = Field(index=True, unique=True)
    status: str = "pending"
    created_at: datetime = Field(default_factory=datetime.utcnow)


class User(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(index=True, unique=True)
    name: str = ""
    password_hash: str
    role: str  # customer or admin


class Barber(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    active: bool = True
