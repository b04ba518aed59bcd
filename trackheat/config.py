"""Heatmap configuration: defaults, YAML loading, and validation."""

import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Union

import yaml

DEFAULT_CONFIG_FILE = "trackheat.yaml"

DEFAULTS: Dict[str, Any] = {
    "width": 80,
    "height": 24,
    "alphabet": " .:-=+*#%@",
    "bucket_size": 1,
}


class ConfigurationError(ValueError):
    """Raised for heatmap settings that cannot produce a grid."""


@dataclass
class HeatmapConfig:
    """Parameters for one heatmap render.

    ``alphabet`` is ordered sparsest to densest. A string is treated as a
    sequence of single-character symbols.
    """
    width: float
    height: float
    alphabet: Union[str, Sequence[str]]
    bucket_size: int

    def validate(self) -> "HeatmapConfig":
        """Fail fast on settings that would leave the grid or scale ill-defined."""
        if not math.isfinite(self.width) or not math.isfinite(self.height):
            raise ConfigurationError(f"Width and height must be finite numbers, got {self.width} x {self.height}")
        if self.width <= 0:
            raise ConfigurationError(f"Width must be positive, got {self.width}")
        if self.height <= 0:
            raise ConfigurationError(f"Height must be positive, got {self.height}")
        validate_scale(self.alphabet, self.bucket_size)
        return self


def validate_scale(alphabet: Union[str, Sequence[str]], bucket_size: int) -> None:
    if not isinstance(alphabet, (str, list, tuple)):
        raise ConfigurationError(f"Alphabet must be a string or list of symbols, got {alphabet!r}")
    if not alphabet:
        raise ConfigurationError("Alphabet must contain at least one symbol")
    if isinstance(bucket_size, bool) or not isinstance(bucket_size, int):
        raise ConfigurationError(f"Bucket size must be an integer, got {bucket_size!r}")
    if bucket_size <= 0:
        raise ConfigurationError(f"Bucket size must be positive, got {bucket_size}")


def load_config(config_path: str = DEFAULT_CONFIG_FILE) -> Dict[str, Any]:
    """Load heatmap defaults from a YAML file.

    Values live under a ``heatmap`` key. Missing keys (or a missing file) fall
    back to the built-in defaults.
    """
    config = dict(DEFAULTS)
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file, 'r') as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {config_path} must contain a mapping")
        section = data.get('heatmap') or {}
        if not isinstance(section, dict):
            raise ConfigurationError(f"'heatmap' section in {config_path} must be a mapping")
        for key in DEFAULTS:
            if section.get(key) is not None:
                config[key] = section[key]
    return config


def parse_dimension(value: Union[str, float, int], terminal_size: int) -> float:
    """Parse a dimension that can be a number or a percentage of the terminal.

    Args:
        value: Value like "60", "40.5", "80%", or a number
        terminal_size: The terminal dimension to use for percentage calculation

    Returns:
        Requested size as a float
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        size = float(value)
    else:
        text = str(value).strip()
        if text.endswith('%'):
            try:
                percentage = float(text[:-1])
            except ValueError:
                raise ConfigurationError(f"Invalid percentage value: {value}")
            if not 0 < percentage <= 100:
                raise ConfigurationError(f"Percentage must be between 0 and 100, got {percentage}%")
            return terminal_size * percentage / 100
        try:
            size = float(text)
        except ValueError:
            raise ConfigurationError(f"Invalid size value: {value}")

    if not math.isfinite(size):
        raise ConfigurationError(f"Size must be a finite number, got {value}")
    if size <= 0:
        raise ConfigurationError(f"Size must be positive, got {size}")
    return size


def parse_bucket_size(value: Union[str, int]) -> int:
    """Parse the bucket size; "2" and "2.0" are accepted, "2.5" is not."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    try:
        number = float(str(value).strip())
    except ValueError:
        raise ConfigurationError(f"Invalid bucket size: {value}")
    if not number.is_integer():
        raise ConfigurationError(f"Bucket size must be a whole number, got {value}")
    return int(number)


def terminal_size():
    """Current terminal (columns, lines), or 80x24 when not attached to one."""
    try:
        size = os.get_terminal_size()
        return size.columns, size.lines
    except OSError:
        return 80, 24


def resolve_config(width: Optional[str] = None,
                   height: Optional[str] = None,
                   alphabet: Optional[str] = None,
                   bucket_size: Optional[str] = None,
                   config_path: str = DEFAULT_CONFIG_FILE) -> HeatmapConfig:
    """Merge command-line values over the YAML/default settings and validate."""
    settings = load_config(config_path)
    term_width, term_height = terminal_size()

    config = HeatmapConfig(
        width=parse_dimension(width if width is not None else settings['width'], term_width),
        height=parse_dimension(height if height is not None else settings['height'], term_height),
        alphabet=alphabet if alphabet is not None else settings['alphabet'],
        bucket_size=parse_bucket_size(bucket_size if bucket_size is not None else settings['bucket_size']),
    )
    return config.validate()
