from pydantic import BaseModel, Field


class TicketRequest(BaseModel):
    """Body of both booking and ticket update"""

    seat: str = Field(..., min_length=1, max_length=50)
    price: float = Field(..., ge=0)

    class Config:
        json_schema_extra = {'example': {'seat': 'A1', 'price': 1500}}


class TicketCreatedResponse(BaseModel):
    id: int


class TicketResponse(BaseModel):
    id: int
    event_id: int
    user_id: int
    seat: str
    price: float

    class Config:
        from_attributes = True
        json_schema_extra = {
            'example': {'id': 7, 'event_id': 1, 'user_id': 3, 'seat': 'A1', 'price': 1500}
        }


class ChangesResponse(BaseModel):
    """Rows affected by an update or delete"""

    changes: int
