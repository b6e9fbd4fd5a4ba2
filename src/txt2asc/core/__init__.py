"""Core record types and timestamp handling."""

from txt2asc.core.frame import Direction, FrameKind, FrameRecord
from txt2asc.core.timestamp import parse_timestamp, relative_seconds

__all__ = ["Direction", "FrameKind", "FrameRecord", "parse_timestamp", "relative_seconds"]
