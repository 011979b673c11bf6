"""Shared test fixtures and helpers."""

from typing import Any

import pytest

from src.forms import clear_hooks, register_submission_hook


@pytest.fixture(autouse=True)
def _isolated_hooks():
    clear_hooks()
    yield
    clear_hooks()


@pytest.fixture
def captured_submissions():
    """Register a recording hook on every form and return the record list."""
    captured: list[tuple[str, dict[str, Any]]] = []
    for form in ("contact", "quote", "schedule"):
        register_submission_hook(
            form, lambda payload, form=form: captured.append((form, payload))
        )
    return captured


# 2024-06-10 is a Monday
MONDAY = "2024-06-10"
FRIDAY = "2024-06-14"
SATURDAY = "2024-06-08"
SUNDAY = "2024-06-09"
