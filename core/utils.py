"""Input coercion helpers for ADM1 state handling."""

import json
from typing import Any, Dict, Optional, Union


def to_float(value: Union[float, int, str, None]) -> Optional[float]:
    """
    Convert value to float, tolerating surrounding whitespace.

    Digit-group underscores ("1_000") are not accepted.

    Args:
        value: Input value to convert

    Returns:
        Float value or None if conversion fails
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value or "_" in value:
            return None
    try:
        return float(value)
    except (ValueError, TypeError):
        return None


def coerce_to_dict(value: Optional[Any]) -> Optional[Dict[str, Any]]:
    """Coerce snapshot inputs to a plain dict.

    Supports:
    - dict
    - JSON string
    - Pydantic model (via ``model_dump``)
    """
    if value is None:
        return None
    if isinstance(value, dict):
        return value
    if isinstance(value, str):
        try:
            data = json.loads(value)
        except json.JSONDecodeError:
            return None
        return data if isinstance(data, dict) else None
    if hasattr(value, "model_dump"):
        return value.model_dump()
    return None
