from abc import ABC, abstractmethod


class ITicketCommandRepo(ABC):
    """Ticket writes outside the booking path. None of them can raise the ticket count."""

    @abstractmethod
    async def update(self, *, event_id: int, ticket_id: int, seat: str, price: float) -> int:
        """Rows changed (0 or 1)."""

    @abstractmethod
    async def delete(self, *, ticket_id: int) -> int:
        pass

    @abstractmethod
    async def delete_by_event_and_user(self, *, event_id: int, user_id: int) -> int:
        pass
