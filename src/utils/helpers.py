"""
Helper utilities for the environmental data API
Common functions used across modules
"""

import re
import yaml
from datetime import datetime, timezone
from typing import Any, Dict, Optional


NUMERIC_PREFIX = re.compile(r"\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def load_yaml(file_path: str) -> Dict[str, Any]:
    """
    Load YAML configuration file

    Args:
        file_path: Path to YAML file

    Returns:
        Dictionary with configuration
    """
    with open(file_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f)


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def from_unix_timestamp(value: Optional[float]) -> Optional[datetime]:
    """
    Convert Unix epoch seconds to a UTC datetime

    Args:
        value: Seconds since the epoch, or None

    Returns:
        Timezone-aware datetime, or None when value is None
    """
    if value is None:
        return None
    return datetime.fromtimestamp(value, tz=timezone.utc)


def to_float(value: Any) -> float:
    """
    Loosely convert a value to float

    Strings give their leading numeric part, or 0.0 when there is none.
    Other non-numeric values give 1.0 when truthy and 0.0 otherwise.

    Args:
        value: Number, string or any decoded JSON value

    Returns:
        Float value
    """
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        match = NUMERIC_PREFIX.match(value)
        return float(match.group(0)) if match else 0.0
    return float(bool(value))
