"""
Submission hooks: the extension point for backend integration.

Nothing is sent anywhere by default. Email, CRM or storage integrations
register a callable per form and receive the accepted payload after a
successful submit.
"""

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

FORMS = ("contact", "quote", "schedule")

SubmissionHook = Callable[[dict[str, Any]], None]

_HOOKS: dict[str, list[SubmissionHook]] = {form: [] for form in FORMS}


def register_submission_hook(form: str, hook: SubmissionHook) -> None:
    """Register a hook for a form.

    Raises:
        KeyError: If the form name is not known.
    """
    if form not in _HOOKS:
        raise KeyError(f"Form '{form}' not known. Available: {list(FORMS)}")
    _HOOKS[form].append(hook)
    logger.debug("Submission hook registered for %s: %r", form, hook)


def get_registered_hooks(form: str) -> list[SubmissionHook]:
    """Return hooks registered for a form (empty for unknown forms)."""
    return list(_HOOKS.get(form, []))


def dispatch(form: str, payload: dict[str, Any]) -> int:
    """Call every hook for a form, returning how many succeeded.

    A failing hook is logged and skipped so the visitor still sees the
    normal confirmation.
    """
    delivered = 0
    for hook in _HOOKS.get(form, []):
        try:
            hook(payload)
        except Exception:
            logger.exception("Submission hook %r failed for %s form", hook, form)
            continue
        delivered += 1
    return delivered


def clear_hooks() -> None:
    """Remove all hooks. Used by test fixtures for isolation."""
    for hooks in _HOOKS.values():
        hooks.clear()
