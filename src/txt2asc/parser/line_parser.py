"""Capture line parsing.

Each non-empty line of a capture export becomes at most one FrameRecord.
Header rows, short rows and rows without a numeric sequence column are
skipped silently; rows that fail during field extraction are skipped with a
warning. No line-level failure ever stops the parse.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from txt2asc.core.frame import ASC_CHANNEL, Direction, FrameKind, FrameRecord
from txt2asc.core.timestamp import parse_timestamp, relative_seconds
from txt2asc.parser.tokens import DEFAULT_TOKENS, TokenTable


logger = logging.getLogger(__name__)

MIN_COLUMNS = 7
PREVIEW_LINES = 5

_LINE_BREAK = re.compile(r"\r?\n")
_SEQUENCE_PREFIX = re.compile(r"[+-]?[0-9]+")


class SkipReason(Enum):
    """Why a line produced no record."""
    
    HEADER = "header"
    BAD_SEQUENCE = "bad_sequence"
    TOO_FEW_COLUMNS = "too_few_columns"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class ParsedLine:
    """Fields of one accepted capture row, before time normalization."""
    
    absolute_seconds: float
    id: str
    is_extended: bool
    direction: Direction
    kind: FrameKind
    dlc: int
    data_bytes: tuple[str, ...]
    raw_timestamp: str
    
    def to_record(self, start_reference: float) -> FrameRecord:
        """Build the record relative to the capture start."""
        return FrameRecord(
            timestamp=relative_seconds(self.absolute_seconds, start_reference),
            id=self.id,
            is_extended=self.is_extended,
            direction=self.direction,
            kind=self.kind,
            dlc=self.dlc,
            data_bytes=self.data_bytes,
            channel=ASC_CHANNEL,
            raw_timestamp=self.raw_timestamp,
        )


@dataclass
class ParseDiagnostics:
    """Line counters for one parse."""
    
    lines_seen: int = 0
    header_lines: int = 0
    bad_sequence_lines: int = 0
    short_lines: int = 0
    malformed_lines: int = 0
    records: int = 0
    
    @property
    def skipped(self) -> int:
        """Non-empty lines that produced no record."""
        return self.lines_seen - self.records
    
    def count_skip(self, reason: SkipReason) -> None:
        if reason is SkipReason.HEADER:
            self.header_lines += 1
        elif reason is SkipReason.BAD_SEQUENCE:
            self.bad_sequence_lines += 1
        elif reason is SkipReason.TOO_FEW_COLUMNS:
            self.short_lines += 1
        else:
            self.malformed_lines += 1


@dataclass
class ParseResult:
    """Output of parsing a whole capture."""
    
    records: list[FrameRecord] = field(default_factory=list)
    start_reference: Optional[float] = None
    preview_lines: list[str] = field(default_factory=list)
    diagnostics: ParseDiagnostics = field(default_factory=ParseDiagnostics)
    
    @property
    def frame_count(self) -> int:
        return len(self.records)


def split_lines(content: str) -> list[str]:
    """Split on ``\\n`` and ``\\r\\n`` line endings."""
    return _LINE_BREAK.split(content)


def _extract(columns: list[str], tokens: TokenTable) -> ParsedLine:
    id_token = columns[3].lower()
    if id_token.startswith("0x"):
        id_token = id_token[2:]
    
    return ParsedLine(
        absolute_seconds=parse_timestamp(columns[2]),
        id=id_token,
        is_extended=tokens.is_extended(columns[5]),
        direction=tokens.direction_of(columns[1]),
        kind=tokens.kind_of(columns[4]),
        dlc=int(columns[6]),
        data_bytes=tuple(columns[7:]),
        raw_timestamp=columns[2],
    )


def inspect_line(
    line: str,
    tokens: TokenTable = DEFAULT_TOKENS,
) -> tuple[Optional[ParsedLine], Optional[SkipReason]]:
    """Parse one line, reporting why it was rejected if it was.
    
    Exactly one element of the returned pair is not None.
    """
    trimmed = line.strip()
    if not trimmed:
        return None, SkipReason.TOO_FEW_COLUMNS
    if tokens.is_header(trimmed):
        return None, SkipReason.HEADER
    
    columns = trimmed.split()
    if not _SEQUENCE_PREFIX.match(columns[0]):
        return None, SkipReason.BAD_SEQUENCE
    
    if len(columns) < MIN_COLUMNS:
        return None, SkipReason.TOO_FEW_COLUMNS
    
    try:
        return _extract(columns, tokens), None
    except Exception as e:
        logger.warning("Skipping malformed line %r: %s", trimmed, e)
        return None, SkipReason.MALFORMED


def parse_line(line: str, tokens: TokenTable = DEFAULT_TOKENS) -> Optional[ParsedLine]:
    """Parse one line; None if it is not a frame row. Never raises."""
    parsed, _ = inspect_line(line, tokens)
    return parsed


class LineParser:
    """Folds capture lines into frame records.
    
    The first accepted line latches the start reference; every record's
    timestamp is measured from it.
    """
    
    def __init__(
        self,
        tokens: TokenTable = DEFAULT_TOKENS,
        preview_limit: int = PREVIEW_LINES,
    ) -> None:
        self._tokens = tokens
        self._preview_limit = preview_limit
        self._result = ParseResult()
    
    @property
    def start_reference(self) -> Optional[float]:
        """Absolute seconds of the first accepted frame, if any."""
        return self._result.start_reference
    
    @property
    def records(self) -> list[FrameRecord]:
        return self._result.records.copy()
    
    @property
    def diagnostics(self) -> ParseDiagnostics:
        return self._result.diagnostics
    
    def feed(self, line: str) -> Optional[FrameRecord]:
        """Consume one raw line, returning the record it produced."""
        trimmed = line.strip()
        if not trimmed:
            return None
        
        result = self._result
        result.diagnostics.lines_seen += 1
        if len(result.preview_lines) < self._preview_limit:
            result.preview_lines.append(trimmed)
        
        parsed, reason = inspect_line(trimmed, self._tokens)
        if parsed is None:
            result.diagnostics.count_skip(reason)
            return None
        
        if result.start_reference is None:
            result.start_reference = parsed.absolute_seconds
        
        record = parsed.to_record(result.start_reference)
        result.records.append(record)
        result.diagnostics.records += 1
        return record
    
    def feed_all(self, lines: Iterable[str]) -> ParseResult:
        for line in lines:
            self.feed(line)
        return self.result()
    
    def result(self) -> ParseResult:
        """Snapshot of everything parsed so far."""
        return ParseResult(
            records=self._result.records.copy(),
            start_reference=self._result.start_reference,
            preview_lines=self._result.preview_lines.copy(),
            diagnostics=ParseDiagnostics(**vars(self._result.diagnostics)),
        )


def parse_text(
    content: str,
    tokens: TokenTable = DEFAULT_TOKENS,
    preview_limit: int = PREVIEW_LINES,
) -> ParseResult:
    """Parse a whole capture export."""
    result = LineParser(tokens, preview_limit).feed_all(split_lines(content))
    diag = result.diagnostics
    logger.debug(
        "Parsed %d records from %d lines (%d headers, %d bad sequence, %d short, %d malformed)",
        diag.records,
        diag.lines_seen,
        diag.header_lines,
        diag.bad_sequence_lines,
        diag.short_lines,
        diag.malformed_lines,
    )
    return result
