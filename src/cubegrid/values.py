"""
Rendering of raw cube values as cell text.
"""

import math
from typing import Any

import numpy as np


def is_missing(value: Any) -> bool:
    """True for None and float NaN."""
    if value is None:
        return True
    if isinstance(value, (float, np.floating)):
        return math.isnan(value)
    return False


def format_value(value: Any, missing_text: str = "") -> str:
    """Rendered text of a raw value; None and NaN become missing_text."""
    if is_missing(value):
        return missing_text
    return str(value)
