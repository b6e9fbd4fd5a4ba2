"""Wall-clock timestamp parsing for capture rows."""

from __future__ import annotations

import logging


logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 3600
ROLLOVER_THRESHOLD = -SECONDS_PER_DAY / 2


def parse_timestamp(token: str) -> float:
    """Convert ``HH:MM:SS[.ms[.us]]`` into seconds since midnight.
    
    The dot-separated groups after the seconds are positional: the first is
    milliseconds and the second microseconds, so ``"49.1"`` is 49.001 s and
    ``"49.159.0"`` is 49.159 s. Extra groups are ignored.
    
    Returns 0.0 for tokens that cannot be parsed.
    """
    try:
        parts = token.strip().split(":")
        if len(parts) < 3:
            return 0.0
        
        hours = int(parts[0])
        minutes = int(parts[1])
        
        sec_parts = parts[2].split(".")
        seconds = int(sec_parts[0])
        milliseconds = int(sec_parts[1]) if len(sec_parts) > 1 else 0
        microseconds = int(sec_parts[2]) if len(sec_parts) > 2 else 0
    except (AttributeError, ValueError) as e:
        logger.debug("Unparseable timestamp %r: %s", token, e)
        return 0.0
    
    return (
        hours * 3600
        + minutes * 60
        + seconds
        + milliseconds / 1000
        + microseconds / 1_000_000
    )


def relative_seconds(absolute: float, start_reference: float) -> float:
    """Offset of ``absolute`` from the capture start.
    
    A difference more than twelve hours in the past is taken to be a
    midnight rollover and is shifted forward by one day.
    """
    delta = absolute - start_reference
    if delta < ROLLOVER_THRESHOLD:
        delta += SECONDS_PER_DAY
    return delta
