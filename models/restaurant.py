# models/restaurant.py
from pydantic import Field
from models.base import CamelModel

class RestaurantCreate(CamelModel):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    hours: str = Field(..., min_length=1)
    image_url: str = Field(..., min_length=1)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    sustainability_info: str = Field(..., min_length=1)
    menu: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1, description="Free-text category, e.g. Restaurant or Food Cart")
    max_party_size: int = Field(10, ge=1, le=20)
    time_slot_interval: int = Field(30, ge=15, le=60, description="Minutes between reservation slots")

# PATCH is a full replace, so the update body carries every field
class RestaurantUpdate(RestaurantCreate):
    pass

class RestaurantOut(CamelModel):
    id: int
    name: str
    description: str
    address: str
    hours: str
    image_url: str
    latitude: float
    longitude: float
    sustainability_info: str
    menu: str
    type: str
    max_party_size: int
    time_slot_interval: int
