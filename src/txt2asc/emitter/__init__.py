"""ASC output generation."""

from txt2asc.emitter.asc import AscDocument, AscEmitter
from txt2asc.emitter.calendar import Calendar, GregorianCalendar

__all__ = ["AscDocument", "AscEmitter", "Calendar", "GregorianCalendar"]
