from src.forms.handlers import handle_contact, handle_quote, handle_schedule
from src.forms.hooks import clear_hooks, get_registered_hooks, register_submission_hook

__all__ = [
    "handle_contact",
    "handle_quote",
    "handle_schedule",
    "register_submission_hook",
    "get_registered_hooks",
    "clear_hooks",
]
