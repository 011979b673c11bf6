"""
Cleanout quote estimator.

Price = size * base rate * property multiplier, plus flat fees for
hazardous waste handling and the lawn cut promotion. The numeric result
carries no currency symbol; formatting happens in ``build_quote_detail``.
"""

import logging
from typing import Optional, TypedDict, Union

from src.config import settings
from src.schemas.quote_schema import PropertyType, QuoteRequest, QuoteResult
from src.utils import format_currency

logger = logging.getLogger(__name__)


class PropertyTypeInfo(TypedDict):
    """Entry for the quote form's property type select box."""

    id: str
    label: str
    multiplier: float


PROPERTY_MULTIPLIERS: dict[PropertyType, float] = {
    PropertyType.RESIDENTIAL: 1.0,
    PropertyType.COMMERCIAL: 1.2,
    PropertyType.ABANDONED: 1.5,
    PropertyType.CONSTRUCTION: 0.8,
    PropertyType.UNKNOWN: 1.0,
}

PROPERTY_LABELS: dict[PropertyType, str] = {
    PropertyType.RESIDENTIAL: "Residential",
    PropertyType.COMMERCIAL: "Commercial",
    PropertyType.ABANDONED: "Abandoned Property",
    PropertyType.CONSTRUCTION: "Construction Site",
}

DISCLAIMER = "Final pricing may vary based on on-site assessment."


def get_multiplier(property_type: Union[PropertyType, str, None]) -> float:
    """Return the complexity multiplier, 1.0 for unrecognized types."""
    return PROPERTY_MULTIPLIERS[PropertyType.from_key(property_type)]


def get_property_types() -> list[PropertyTypeInfo]:
    """Return the selectable property types with their multipliers."""
    return [
        {"id": ptype.value, "label": label, "multiplier": PROPERTY_MULTIPLIERS[ptype]}
        for ptype, label in PROPERTY_LABELS.items()
    ]


def estimate(
    size: float,
    property_type: Union[PropertyType, str, None],
    has_hazard: bool = False,
    has_lawn: bool = False,
) -> float:
    """
    Compute the estimated cleanout cost.

    Inputs are assumed validated by the caller; this never raises for an
    unknown property type.
    """
    amount = size * settings.pricing.base_rate * get_multiplier(property_type)
    if has_hazard:
        amount += settings.pricing.hazard_fee
    if has_lawn:
        amount += settings.pricing.lawn_fee
    return amount


def build_quote_detail(
    name: Optional[str], amount: float, has_hazard: bool = False, has_lawn: bool = False
) -> str:
    """Compose the customer-facing estimate text with fee disclosures."""
    cost = f"estimated cleanout cost is {format_currency(amount)}."
    detail = f"{name}, your {cost}" if name else f"Your {cost}"
    if has_hazard:
        fee = format_currency(settings.pricing.hazard_fee).replace(".00", "")
        detail += f" This includes a {fee} hazardous waste handling fee."
    if has_lawn:
        fee = format_currency(settings.pricing.lawn_fee).replace(".00", "")
        detail += f" This includes our limited-time {fee} lawn cut special."
    return f"{detail} {DISCLAIMER}"


def quote(request: QuoteRequest, name: Optional[str] = None) -> QuoteResult:
    """Estimate a validated request and build the display result."""
    amount = estimate(
        request.size, request.property_type, request.has_hazard, request.has_lawn
    )
    if request.property_type is PropertyType.UNKNOWN:
        logger.info("Unrecognized property type priced at neutral multiplier")
    logger.debug(
        "Estimate %.2f for size=%s type=%s hazard=%s lawn=%s",
        amount, request.size, request.property_type.value,
        request.has_hazard, request.has_lawn,
    )
    return QuoteResult(
        amount=amount,
        formatted_amount=format_currency(amount),
        property_type=request.property_type,
        multiplier=get_multiplier(request.property_type),
        hazard_fee=settings.pricing.hazard_fee if request.has_hazard else 0.0,
        lawn_fee=settings.pricing.lawn_fee if request.has_lawn else 0.0,
        detail=build_quote_detail(
            name, amount, request.has_hazard, request.has_lawn
        ),
    )
