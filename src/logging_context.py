"""Submission ID logging context for tracing a single form submission.

Provides a submission_id-aware logger that attaches a correlation ID to
every log record, so validation, estimation and hook calls made for one
form submit can be grouped together.

Usage:
    from src.logging_context import get_submission_logger, set_submission_id

    set_submission_id("QUOTE-1a2b3c")
    logger = get_submission_logger(__name__)
    logger.info("Estimating")  # record.submission_id == "QUOTE-1a2b3c"
"""

import logging
import uuid
from contextvars import ContextVar

_submission_id: ContextVar[str] = ContextVar("submission_id", default="NO_SUBMISSION_ID")


def set_submission_id(submission_id: str) -> None:
    """Set the correlation ID for the current context."""
    _submission_id.set(submission_id)


def get_submission_id() -> str:
    """Retrieve the current correlation ID."""
    return _submission_id.get()


def new_submission_id(form: str) -> str:
    """Generate and set a fresh ID such as ``QUOTE-1A2B3C``."""
    submission_id = f"{form.upper()}-{uuid.uuid4().hex[:6].upper()}"
    set_submission_id(submission_id)
    return submission_id


class SubmissionIdFilter(logging.Filter):
    """Injects submission_id into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.submission_id = _submission_id.get()  # type: ignore[attr-defined]
        return True


def get_submission_logger(name: str) -> logging.Logger:
    """Return a logger with the SubmissionIdFilter attached.

    The filter adds ``submission_id`` to each record so formatters can
    include ``%(submission_id)s`` in their format string.
    """
    logger = logging.getLogger(name)
    if not any(isinstance(f, SubmissionIdFilter) for f in logger.filters):
        logger.addFilter(SubmissionIdFilter())
    return logger
