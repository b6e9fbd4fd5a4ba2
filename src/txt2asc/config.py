"""Converter configuration.

Settings come from, in order of precedence:
1. An explicit JSON file path
2. The file named by the ``TXT2ASC_CONFIG`` environment variable
3. Built-in defaults
"""

from __future__ import annotations

import codecs
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from txt2asc.exceptions import ConfigError
from txt2asc.parser.tokens import TokenTable


logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TXT2ASC_CONFIG"
DEFAULT_ENCODINGS = ("utf-8", "gbk", "gb2312", "latin-1")


@dataclass
class ConverterConfig:
    """Configuration for a conversion run."""
    
    tokens: TokenTable = field(default_factory=TokenTable)
    preview_lines: int = 5
    encodings: tuple[str, ...] = DEFAULT_ENCODINGS
    output_encoding: str = "utf-8"
    output_dir: Optional[Path] = None
    
    def validate(self) -> None:
        """Raise ConfigError if any setting is unusable."""
        if self.preview_lines < 0:
            raise ConfigError(f"preview_lines must be >= 0, got {self.preview_lines}")
        if not self.encodings:
            raise ConfigError("encodings must not be empty")
        for name in (*self.encodings, self.output_encoding):
            try:
                codecs.lookup(name)
            except LookupError as e:
                raise ConfigError(f"Unknown encoding: {name}") from e
    
    @classmethod
    def from_dict(cls, d: dict[str, Any], base_dir: Optional[Path] = None) -> ConverterConfig:
        """Build a config from parsed JSON; relative paths resolve against ``base_dir``."""
        try:
            output_dir = d.get("output_dir")
            if output_dir:
                output_dir = Path(output_dir)
                if base_dir is not None and not output_dir.is_absolute():
                    output_dir = base_dir / output_dir
            
            config = cls(
                tokens=TokenTable.from_dict(d.get("tokens", {})),
                preview_lines=int(d.get("preview_lines", 5)),
                encodings=tuple(d.get("encodings", DEFAULT_ENCODINGS)),
                output_encoding=str(d.get("output_encoding", "utf-8")),
                output_dir=output_dir or None,
            )
        except (TypeError, ValueError, AttributeError) as e:
            raise ConfigError(f"Invalid configuration value: {e}") from e
        
        config.validate()
        return config


def get_config_path() -> Optional[Path]:
    """Config file named by the environment, if it exists."""
    env_config = os.environ.get(CONFIG_ENV_VAR)
    if env_config and Path(env_config).exists():
        return Path(env_config)
    return None


def load_config(path: Optional[Path | str] = None) -> ConverterConfig:
    """Load configuration from ``path``, the environment, or defaults."""
    config_path = Path(path) if path is not None else get_config_path()
    if config_path is None:
        return ConverterConfig()
    
    logger.info("Loading config file: %s", config_path)
    try:
        with open(config_path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Malformed config file {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
    
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a JSON object")
    
    return ConverterConfig.from_dict(data, base_dir=config_path.parent)
