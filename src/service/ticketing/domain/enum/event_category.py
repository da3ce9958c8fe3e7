from enum import Enum


class EventCategory(str, Enum):
    CONCERT = 'Concert'
    CONFERENCE = 'Conference'
    GAME = 'Game'
