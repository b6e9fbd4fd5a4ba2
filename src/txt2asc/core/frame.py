"""CAN frame record representation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


ASC_CHANNEL = 1


class Direction(Enum):
    """Bus direction as written in the ASC body."""
    
    RX = "Rx"
    TX = "Tx"


class FrameKind(Enum):
    """Frame format as written in the ASC body."""
    
    DATA = "d"
    REMOTE = "r"


@dataclass(frozen=True)
class FrameRecord:
    """Represents a single parsed bus message.
    
    Attributes:
        timestamp: Seconds relative to the first accepted frame of the capture.
        id: Lowercase hex arbitration ID without a ``0x`` prefix.
        is_extended: True if the source row marked a 29-bit identifier.
        direction: Receive or transmit.
        kind: Data or remote frame.
        dlc: Declared data length, taken verbatim from the source.
        data_bytes: Payload tokens exactly as written in the source.
        channel: Bus channel, always 1 for this capture format.
        raw_timestamp: Source timestamp token (debugging only).
    """
    
    timestamp: float
    id: str
    is_extended: bool = False
    direction: Direction = Direction.TX
    kind: FrameKind = FrameKind.DATA
    dlc: int = 0
    data_bytes: tuple[str, ...] = ()
    channel: int = ASC_CHANNEL
    raw_timestamp: str = field(default="", compare=False)
    
    @property
    def asc_id(self) -> str:
        """Arbitration ID with the ASC extended-ID suffix."""
        return f"{self.id}x" if self.is_extended else self.id
    
    def to_asc_line(self) -> str:
        """Render this record as one ASC body line."""
        return (
            f"{self.timestamp:.6f} {self.channel} {self.asc_id} "
            f"{self.direction.value} {self.kind.value} {self.dlc} "
            f"{' '.join(self.data_bytes)}"
        )
    
    def __repr__(self) -> str:
        return (
            f"FrameRecord(id={self.asc_id}, {self.direction.value}/{self.kind.value}, "
            f"dlc={self.dlc}, data={' '.join(self.data_bytes)}, ts={self.timestamp:.6f})"
        )
