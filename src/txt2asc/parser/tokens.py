"""Localized column tokens used by capture exports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from txt2asc.core.frame import Direction, FrameKind


@dataclass(frozen=True)
class TokenTable:
    """Maps the literal words of a capture export onto frame attributes.
    
    Tokens not present in a table fall back to the defaults: transmit,
    data frame, standard identifier.
    """
    
    header_prefixes: tuple[str, ...] = ("序号", "Text:")
    direction: Mapping[str, Direction] = field(
        default_factory=lambda: {"接收": Direction.RX, "发送": Direction.TX}
    )
    frame_format: Mapping[str, FrameKind] = field(
        default_factory=lambda: {"数据帧": FrameKind.DATA, "远程帧": FrameKind.REMOTE}
    )
    frame_type: Mapping[str, bool] = field(
        default_factory=lambda: {"标准帧": False, "扩展帧": True}
    )
    
    def is_header(self, line: str) -> bool:
        """Check whether a trimmed line is a column-label row."""
        return line.startswith(self.header_prefixes)
    
    def direction_of(self, token: str) -> Direction:
        return self.direction.get(token, Direction.TX)
    
    def kind_of(self, token: str) -> FrameKind:
        return self.frame_format.get(token, FrameKind.DATA)
    
    def is_extended(self, token: str) -> bool:
        return self.frame_type.get(token, False)
    
    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> TokenTable:
        """Build a table from JSON-style data.
        
        Variants are given by value (``"Rx"``, ``"r"``) or name (``"RX"``,
        ``"remote"``); frame types map to ``"standard"``/``"extended"`` or a
        boolean. Missing sections keep their defaults. Raises ValueError on
        unknown variants.
        """
        default = cls()
        return cls(
            header_prefixes=tuple(d.get("header_prefixes", default.header_prefixes)),
            direction={
                token: _lookup_enum(Direction, value)
                for token, value in d.get("direction", {}).items()
            } or default.direction,
            frame_format={
                token: _lookup_enum(FrameKind, value)
                for token, value in d.get("frame_format", {}).items()
            } or default.frame_format,
            frame_type={
                token: _lookup_extended(value)
                for token, value in d.get("frame_type", {}).items()
            } or default.frame_type,
        )


def _lookup_enum(enum_cls: Any, value: Any) -> Any:
    text = str(value)
    for member in enum_cls:
        if text == member.value or text.upper() == member.name:
            return member
    raise ValueError(f"Unknown {enum_cls.__name__} variant: {value!r}")


def _lookup_extended(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).lower()
    if text in ("extended", "ext"):
        return True
    if text in ("standard", "std"):
        return False
    raise ValueError(f"Unknown frame type variant: {value!r}")


DEFAULT_TOKENS = TokenTable()
