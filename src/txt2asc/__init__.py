"""txt2asc - CAN analyzer text export to Vector ASC transcoder."""

__version__ = "0.1.0"

from txt2asc.core.frame import Direction, FrameKind, FrameRecord
from txt2asc.core.timestamp import parse_timestamp
from txt2asc.parser.line_parser import LineParser, parse_line, parse_text
from txt2asc.parser.tokens import TokenTable
from txt2asc.emitter.asc import AscEmitter
from txt2asc.config import ConverterConfig, load_config
from txt2asc.converter import ConversionResult, convert

__all__ = [
    "Direction",
    "FrameKind",
    "FrameRecord",
    "parse_timestamp",
    "LineParser",
    "parse_line",
    "parse_text",
    "TokenTable",
    "AscEmitter",
    "ConverterConfig",
    "load_config",
    "ConversionResult",
    "convert",
]
