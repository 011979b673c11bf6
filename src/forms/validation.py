"""Presence and numeric checks run before any core computation."""

import math
import re
from typing import Any, Optional

from src.utils import clean

# Plain decimal notation as typed into a number input; no digit separators.
_NUMBER_PATTERN = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)


def is_blank(value: Any) -> bool:
    return not clean(value)


def parse_size(value: Any) -> Optional[float]:
    """Parse the size field, None unless a positive finite number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        size = float(value)
    else:
        text = clean(value)
        if not _NUMBER_PATTERN.match(text):
            return None
        size = float(text)
    if not math.isfinite(size) or size <= 0:
        return None
    return size


def missing_fields(**fields: Any) -> list[str]:
    """Return the names of blank fields, in the order given."""
    return [name for name, value in fields.items() if is_blank(value)]
