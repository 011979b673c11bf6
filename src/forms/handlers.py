"""
Submit handlers for the contact, quote and schedule forms.

Each handler receives already-extracted field values, validates presence,
calls the core estimator or availability checker, and returns a
FormResponse whose message is written into the page's result region.
"""

from typing import Any

from src.forms import hooks
from src.forms.validation import missing_fields, parse_size
from src.logging_context import get_submission_logger, new_submission_id
from src.schemas.appointment_schema import AppointmentRequest, AvailabilityQuery
from src.schemas.form_schema import ContactMessage, FormResponse
from src.schemas.quote_schema import QuoteRequest
from src.tools.availability import describe_window, is_available, parse_date
from src.tools.quote_estimator import quote
from src.utils import clean, format_long_date

logger = get_submission_logger(__name__)

CONTACT_MISSING_MESSAGE = "Please complete all fields."
QUOTE_MISSING_MESSAGE = "Please provide all required fields."
SCHEDULE_MISSING_MESSAGE = "Please fill out your name, date and time."


def _rejected(form: str, submission_id: str, message: str, **data: Any) -> FormResponse:
    return FormResponse(
        form=form, success=False, message=message,
        submission_id=submission_id, data=data,
    )


def handle_contact(name: str, email: str, message: str) -> FormResponse:
    """Handle the contact form."""
    submission_id = new_submission_id("contact")
    name, email, message = clean(name), clean(email), clean(message)

    missing = missing_fields(name=name, email=email, message=message)
    if missing:
        logger.info("Contact form rejected, missing: %s", ", ".join(missing))
        return _rejected("contact", submission_id, CONTACT_MISSING_MESSAGE, missing=missing)

    contact = ContactMessage(name=name, email=email, message=message)
    hooks.dispatch("contact", contact.model_dump())
    logger.info("Contact message accepted from %s", name)
    return FormResponse(
        form="contact",
        success=True,
        message=f"Thank you, {name}! Your message has been sent.",
        submission_id=submission_id,
    )


def handle_quote(
    name: str,
    property_type: str,
    size: Any,
    has_hazard: bool = False,
    has_lawn: bool = False,
) -> FormResponse:
    """Handle the quote request form."""
    submission_id = new_submission_id("quote")
    name, property_type = clean(name), clean(property_type)

    missing = missing_fields(name=name, type=property_type)
    parsed_size = parse_size(size)
    if parsed_size is None:
        missing.append("size")
    if missing:
        logger.info("Quote form rejected, missing or invalid: %s", ", ".join(missing))
        return _rejected("quote", submission_id, QUOTE_MISSING_MESSAGE, missing=missing)

    request = QuoteRequest(
        size=parsed_size,
        property_type=property_type,
        has_hazard=bool(has_hazard),
        has_lawn=bool(has_lawn),
    )
    result = quote(request, name=name)
    hooks.dispatch("quote", {"name": name, **request.model_dump(mode="json"),
                             "amount": result.amount})
    logger.info("Quote estimated at %s", result.formatted_amount)
    return FormResponse(
        form="quote",
        success=True,
        message=result.detail,
        submission_id=submission_id,
        data={
            "amount": result.amount,
            "formatted_amount": result.formatted_amount,
            "property_type": result.property_type.value,
        },
    )


def handle_schedule(name: str, date: str, time: str) -> FormResponse:
    """Handle the appointment scheduling form."""
    submission_id = new_submission_id("schedule")
    name, date, time = clean(name), clean(date), clean(time)

    missing = missing_fields(name=name, date=date, time=time)
    if missing:
        logger.info("Schedule form rejected, missing: %s", ", ".join(missing))
        return _rejected("schedule", submission_id, SCHEDULE_MISSING_MESSAGE, missing=missing)

    query = AvailabilityQuery(date=date, time=time)
    if not is_available(query.date, query.time):
        logger.info("Schedule request outside window: %s %s", date, time)
        return _rejected(
            "schedule",
            submission_id,
            f"Selected date/time is outside our booking window ({describe_window()}). "
            "Please choose another time.",
            date=date,
            time=time,
        )

    # is_available guarantees the date parses
    formatted_date = format_long_date(parse_date(date))
    appointment = AppointmentRequest(
        name=name, date=date, time=time, formatted_date=formatted_date
    )
    hooks.dispatch("schedule", appointment.model_dump())
    logger.info("Appointment request accepted for %s at %s", date, time)
    return FormResponse(
        form="schedule",
        success=True,
        message=(
            f"Thank you, {name}! Your appointment request for {formatted_date} "
            f"at {time} has been received. We will contact you to confirm."
        ),
        submission_id=submission_id,
        data={"date": date, "time": time, "formatted_date": formatted_date},
    )
