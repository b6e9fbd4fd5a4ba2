"""Capture export parsing."""

from txt2asc.parser.tokens import DEFAULT_TOKENS, TokenTable
from txt2asc.parser.line_parser import (
    LineParser,
    ParseDiagnostics,
    ParsedLine,
    ParseResult,
    SkipReason,
    inspect_line,
    parse_line,
    parse_text,
    split_lines,
)

__all__ = [
    "DEFAULT_TOKENS",
    "TokenTable",
    "LineParser",
    "ParseDiagnostics",
    "ParsedLine",
    "ParseResult",
    "SkipReason",
    "inspect_line",
    "parse_line",
    "parse_text",
    "split_lines",
]
