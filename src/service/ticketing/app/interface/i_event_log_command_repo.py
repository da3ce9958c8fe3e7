from abc import ABC, abstractmethod

from src.service.ticketing.domain.entity.event_log_entity import EventLogEntity


class IEventLogCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, event_log: EventLogEntity) -> EventLogEntity:
        pass
