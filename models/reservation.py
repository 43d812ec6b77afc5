from pydantic import EmailStr, Field, TypeAdapter, field_validator
from typing import Literal
from datetime import date, datetime, timezone
from models.base import CamelModel

ReservationStatus = Literal["confirmed", "cancelled", "completed"]

def as_utc(value: datetime) -> datetime:
    # naive timestamps are taken as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)

class ReservationCreate(CamelModel):
    restaurant_id: int
    date: datetime
    party_size: int = Field(..., ge=1)
    name: str = Field(..., min_length=1)
    email: EmailStr
    phone: str = Field(..., min_length=10, description="At least 10 digits")

    @field_validator("date")
    @classmethod
    def date_in_future(cls, value: datetime) -> datetime:
        value = as_utc(value)
        if value <= datetime.now(timezone.utc):
            raise ValueError("Please select a future date and time")
        return value

class ReservationOut(CamelModel):
    id: int
    restaurant_id: int
    date: datetime
    party_size: int
    name: str
    email: str
    phone: str
    status: ReservationStatus
    created_at: datetime

_day_adapter = TypeAdapter(date)
_timestamp_adapter = TypeAdapter(datetime)

def parse_reservation_day(value: str) -> date:
    """
    Calendar day (UTC) for a listing query. Takes "YYYY-MM-DD" or a full
    timestamp whose time of day is ignored. Raises ValueError otherwise.
    """
    value = value.strip()
    if len(value) == 10:
        return _day_adapter.validate_python(value)
    return as_utc(_timestamp_adapter.validate_python(value)).date()
