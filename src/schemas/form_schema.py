"""Form payloads and the response shown back to the visitor."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class ContactMessage(BaseModel):
    """Contact form submission."""
    name: str
    email: str
    message: str


class FormResponse(BaseModel):
    """Outcome of handling a form submit.

    ``message`` is plain text for the page's result region.
    """
    form: str
    success: bool
    message: str
    submission_id: Optional[str] = None
    data: dict[str, Any] = Field(default_factory=dict)
