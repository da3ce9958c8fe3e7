from abc import ABC, abstractmethod

from src.service.ticketing.domain.entity.event_entity import EventEntity


class IEventCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, event: EventEntity) -> EventEntity:
        pass
