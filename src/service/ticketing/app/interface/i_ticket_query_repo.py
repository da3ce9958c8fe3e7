from abc import ABC, abstractmethod
from typing import List

from src.service.ticketing.domain.entity.ticket_entity import TicketEntity


class ITicketQueryRepo(ABC):
    @abstractmethod
    async def list_by_event(self, *, event_id: int) -> List[TicketEntity]:
        pass
