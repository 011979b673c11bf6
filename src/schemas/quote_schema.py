"""Quote request and estimate data models."""

import math
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class PropertyType(str, Enum):
    """Property categories offered on the quote form.

    ``UNKNOWN`` covers any value the form sends that is not one of the
    listed categories. It is priced with the neutral multiplier.
    """

    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    ABANDONED = "abandoned"
    CONSTRUCTION = "construction"
    UNKNOWN = "unknown"

    @classmethod
    def from_key(cls, key: Optional[str]) -> "PropertyType":
        """Map a raw form key to a member, falling back to UNKNOWN.

        Keys match exactly after trimming; ``"Commercial"`` is UNKNOWN.
        """
        if isinstance(key, cls):
            return key
        normalized = str(key or "").strip()
        try:
            return cls(normalized)
        except ValueError:
            return cls.UNKNOWN


class QuoteRequest(BaseModel):
    """Validated input for a single quote estimate."""
    size: float = Field(gt=0)
    property_type: PropertyType = PropertyType.RESIDENTIAL
    has_hazard: bool = False
    has_lawn: bool = False

    @field_validator("size")
    @classmethod
    def _size_is_finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("size must be a finite number")
        return value

    @field_validator("property_type", mode="before")
    @classmethod
    def _coerce_property_type(cls, value):
        return PropertyType.from_key(value)


class QuoteResult(BaseModel):
    """Computed estimate plus the text shown to the customer."""
    amount: float
    formatted_amount: str
    property_type: PropertyType
    multiplier: float
    hazard_fee: float = 0.0
    lawn_fee: float = 0.0
    detail: str = ""
