"""Appointment scheduling data models."""

from pydantic import BaseModel


class AvailabilityQuery(BaseModel):
    """Raw date/time pair as submitted by the schedule form.

    Not validated on construction: the availability checker fails closed
    on anything it cannot parse.
    """
    date: str
    time: str


class AppointmentRequest(BaseModel):
    """Accepted appointment request passed on to submission hooks."""
    name: str
    date: str
    time: str
    formatted_date: str
