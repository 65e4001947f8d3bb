"""
Service layer helpers that bind configuration to the domain logic.
"""

from .calendar_service import CalendarService

__all__ = ["CalendarService"]
