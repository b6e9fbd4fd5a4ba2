"""Reading capture exports and writing ASC artifacts."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from txt2asc.config import DEFAULT_ENCODINGS
from txt2asc.exceptions import CaptureError


logger = logging.getLogger(__name__)

PLAINTEXT_SUFFIXES = {".txt"}
ASC_SUFFIX = ".asc"


def is_plaintext(path: Path | str) -> bool:
    """Check that a capture has a plaintext export extension."""
    return Path(path).suffix.lower() in PLAINTEXT_SUFFIXES


def output_name(filename: str) -> str:
    """Replace the last extension of ``filename`` with ``.asc``."""
    return Path(filename).with_suffix(ASC_SUFFIX).name


def read_capture(path: Path | str, encodings: Sequence[str] = DEFAULT_ENCODINGS) -> str:
    """Read a capture file, trying each encoding in turn."""
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise CaptureError(f"Cannot read capture {path}: {e}", path=path, original_error=e) from e
    
    for encoding in encodings:
        try:
            text = raw.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            continue
        logger.debug("Decoded %s as %s", path, encoding)
        return text
    
    raise CaptureError(
        f"Cannot decode capture {path} with any of: {', '.join(encodings)}",
        path=path,
    )


def write_asc(path: Path | str, text: str, encoding: str = "utf-8") -> Path:
    """Write an ASC artifact, creating parent directories."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding=encoding)
    except (OSError, UnicodeEncodeError) as e:
        raise CaptureError(f"Cannot write {path}: {e}", path=path, original_error=e) from e
    logger.info("Wrote %s", path)
    return path
