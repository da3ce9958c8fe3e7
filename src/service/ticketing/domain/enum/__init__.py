"""Ticketing Domain Enums"""

from src.service.ticketing.domain.enum.booking_error_code import BookingErrorCode
from src.service.ticketing.domain.enum.event_category import EventCategory

__all__ = ['BookingErrorCode', 'EventCategory']
