from abc import ABC, abstractmethod
from typing import Optional


class IBookingStore(ABC):
    """
    Storage contract of the booking coordinator.

    An instance is bound to one unit of work: every call runs inside the same
    transaction, so the count read and the insert commit or roll back together.
    """

    @abstractmethod
    async def get_event_capacity(self, *, event_id: int) -> Optional[int]:
        """available_seats of the event, or None when it does not exist.

        Locks the event row for the rest of the transaction where the store supports it.
        """

    @abstractmethod
    async def count_tickets(self, *, event_id: int) -> int:
        pass

    @abstractmethod
    async def insert_ticket(self, *, event_id: int, user_id: int, seat: str, price: float) -> int:
        pass
