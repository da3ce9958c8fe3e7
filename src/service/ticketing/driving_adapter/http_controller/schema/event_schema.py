import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field

from src.service.ticketing.domain.entity.event_entity import MAX_AVAILABLE_SEATS
from src.service.ticketing.domain.enum.event_category import EventCategory


class EventCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    date: dt.date
    category: EventCategory
    available_seats: int = Field(..., ge=0, le=MAX_AVAILABLE_SEATS)
    description: str = Field(..., min_length=1, max_length=500)

    class Config:
        json_schema_extra = {
            'example': {
                'name': 'Summer Rock Night',
                'date': '2026-08-01',
                'category': 'Concert',
                'available_seats': 500,
                'description': 'Open-air rock concert',
            }
        }


class EventResponse(BaseModel):
    id: int
    name: str
    date: dt.date
    category: EventCategory
    available_seats: int
    description: str
    booked_seats: Optional[int] = None
    remaining_seats: Optional[int] = None

    class Config:
        from_attributes = True
        json_schema_extra = {
            'example': {
                'id': 1,
                'name': 'Summer Rock Night',
                'date': '2026-08-01',
                'category': 'Concert',
                'available_seats': 500,
                'description': 'Open-air rock concert',
                'booked_seats': 120,
                'remaining_seats': 380,
            }
        }
