"""Exception types for txt2asc.

Line-level problems in a capture never raise; these cover failures of a
whole call: unusable input, unreadable files and bad configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class Txt2AscError(Exception):
    """Base exception for all txt2asc errors."""


class ConversionError(Txt2AscError):
    """Raised when a conversion call cannot run at all."""


class ConfigError(Txt2AscError):
    """Raised for invalid or unreadable configuration."""


class CaptureError(Txt2AscError):
    """Raised when a capture or artifact file cannot be read or written.
    
    Attributes:
        path: File that failed.
        original_error: Underlying exception, if any.
    """
    
    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.original_error = original_error
