"""Vector ASC text generation."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Optional, Sequence

from txt2asc.core.frame import FrameRecord
from txt2asc.core.timestamp import SECONDS_PER_DAY
from txt2asc.emitter.calendar import Calendar, GregorianCalendar, month_name, weekday_name


logger = logging.getLogger(__name__)

ASC_VERSION = "11.0.0"
PREVIEW_LINES = 5
TRUNCATION_MARKER = "..."


@dataclass
class AscDocument:
    """A rendered ASC file: header block plus one line per frame."""
    
    header_lines: list[str]
    body_lines: list[str] = field(default_factory=list)
    
    @property
    def frame_count(self) -> int:
        return len(self.body_lines)
    
    @property
    def text(self) -> str:
        """Full document, lines joined by ``\\n``."""
        return "\n".join(self.header_lines + self.body_lines)
    
    def preview(self, limit: int = PREVIEW_LINES) -> str:
        """Header plus the first ``limit`` body lines, marked if truncated."""
        lines = self.header_lines + self.body_lines[:limit]
        if len(self.body_lines) > limit:
            lines.append(TRUNCATION_MARKER)
        return "\n".join(lines)


class AscEmitter:
    """Renders frame records as a Vector ASC log.
    
    The header date takes its calendar day from the caller and its time of
    day from the first frame of the capture, so the log keeps the original
    wall-clock start on the day the user chose.
    """
    
    def __init__(self, calendar: Optional[Calendar] = None) -> None:
        self._calendar = calendar or GregorianCalendar()
    
    def start_datetime(self, base_date: date, start_reference: Optional[float]) -> datetime:
        """Combine the base day with the whole-second capture start."""
        day = base_date.date() if isinstance(base_date, datetime) else base_date
        midnight = datetime.combine(day, time())
        if start_reference is None:
            return midnight
        offset = math.floor(start_reference)
        try:
            return midnight + timedelta(seconds=offset)
        except OverflowError:
            logger.warning(
                "Capture start %r falls outside the calendar range; using its time of day on %s",
                start_reference,
                day,
            )
            return midnight + timedelta(seconds=offset % SECONDS_PER_DAY)
    
    def date_line(self, base_date: date, start_reference: Optional[float]) -> str:
        start = self.start_datetime(base_date, start_reference)
        return (
            f"date {weekday_name(self._calendar, start)} {month_name(self._calendar, start)} "
            f"{start.day} {start.hour:02d}:{start.minute:02d}:{start.second:02d} {start.year}"
        )
    
    def header(self, base_date: date, start_reference: Optional[float]) -> list[str]:
        return [
            self.date_line(base_date, start_reference),
            "base hex timestamps absolute",
            "internal events logged",
            f"// version {ASC_VERSION}",
            "",
        ]
    
    def format_record(self, record: FrameRecord) -> str:
        return record.to_asc_line()
    
    def emit(
        self,
        records: Sequence[FrameRecord],
        start_reference: Optional[float],
        base_date: date,
    ) -> AscDocument:
        """Render every record under a header for ``base_date``."""
        return AscDocument(
            header_lines=self.header(base_date, start_reference),
            body_lines=[self.format_record(r) for r in records],
        )
