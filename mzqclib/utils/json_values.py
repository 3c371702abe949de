# mzqclib/utils/json_values.py
"""Normalisation of metric payloads to native JSON types."""

import math
from typing import Any

import numpy as np


def reject_constant(name: str) -> Any:
    """parse_constant hook for json.load(s): NaN and Infinity are not JSON."""
    raise ValueError(f"Invalid JSON constant: {name}")


def _finite(number: float) -> float:
    if not math.isfinite(number):
        raise ValueError(f"Metric value {number!r} cannot be written as JSON")
    return number


def to_json_value(value: Any) -> Any:
    """
    Convert a metric payload into plain JSON types.

    Native JSON values (None, bool, int, float, str, list, dict) are returned
    with the same types, so an int stays an int and a float stays a float.
    numpy scalars and arrays are converted to their Python equivalents and
    tuples become lists. Mapping keys are converted to strings.

    Args:
        value: Any JSON-representable payload, possibly containing numpy data.

    Returns:
        The payload expressed only with JSON-native Python types.

    Raises:
        TypeError: If the payload contains a value with no JSON equivalent.
        ValueError: If the payload contains NaN or an infinite float.
    """
    if isinstance(value, float):
        return _finite(value)
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, np.ndarray):
        return to_json_value(value.tolist())
    if isinstance(value, np.bool_):
        return bool(value)
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, np.floating):
        return _finite(float(value))
    if isinstance(value, np.str_):
        return str(value)
    if isinstance(value, (list, tuple)):
        return [to_json_value(item) for item in value]
    if isinstance(value, dict):
        return {str(key): to_json_value(item) for key, item in value.items()}
    raise TypeError(
        f"Metric value of type {type(value).__name__} is not JSON-representable"
    )
