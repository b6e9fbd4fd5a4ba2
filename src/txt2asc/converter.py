"""Capture-to-ASC conversion entry point."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from txt2asc.config import ConverterConfig
from txt2asc.emitter.asc import AscEmitter
from txt2asc.emitter.calendar import Calendar
from txt2asc.exceptions import ConversionError
from txt2asc.parser.line_parser import ParseDiagnostics, parse_text


logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Everything one conversion produces."""
    
    asc: str
    frame_count: int
    input_preview: str
    output_preview: str
    diagnostics: ParseDiagnostics = field(default_factory=ParseDiagnostics)


def convert(
    content: str,
    base_date: date,
    config: Optional[ConverterConfig] = None,
    calendar: Optional[Calendar] = None,
) -> ConversionResult:
    """Convert a capture export into ASC text.
    
    Lines that are not frame rows are skipped, so any text input succeeds;
    a capture with no frame rows yields ``frame_count == 0`` and a header-only
    document dated at midnight of ``base_date``.
    
    Raises:
        ConversionError: ``content`` is not text or ``base_date`` is not a date.
    """
    if not isinstance(content, str):
        raise ConversionError(f"Capture content must be text, got {type(content).__name__}")
    if not isinstance(base_date, date):
        raise ConversionError(f"Base date must be a date, got {type(base_date).__name__}")
    
    config = config or ConverterConfig()
    parsed = parse_text(content, tokens=config.tokens, preview_limit=config.preview_lines)
    document = AscEmitter(calendar).emit(parsed.records, parsed.start_reference, base_date)
    
    if parsed.diagnostics.skipped:
        logger.info(
            "Converted %d frames, skipped %d of %d lines",
            parsed.frame_count,
            parsed.diagnostics.skipped,
            parsed.diagnostics.lines_seen,
        )
    
    return ConversionResult(
        asc=document.text,
        frame_count=parsed.frame_count,
        input_preview="\n".join(parsed.preview_lines),
        output_preview=document.preview(config.preview_lines),
        diagnostics=parsed.diagnostics,
    )
