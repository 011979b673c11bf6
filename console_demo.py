"""
Offline console demo: replays scripted form submissions.

Runs each scenario through the real validation, estimator, availability
checker and submission hooks, printing what the page would display.

Usage:
    python console_demo.py
    python console_demo.py --scenario quote
    python console_demo.py --scenario schedule
"""

import argparse
import sys
from typing import Any

from src.config import settings
from src.forms import (
    clear_hooks,
    handle_contact,
    handle_quote,
    handle_schedule,
    register_submission_hook,
)
from src.schemas.form_schema import FormResponse
from src.tools.availability import describe_window

BLUE = "\033[94m"
GREEN = "\033[92m"
RED = "\033[91m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"


class ConsoleSession:
    """Replays form submissions and shows the page's result text."""

    # Pre-scripted submissions for --scenario flag
    SCENARIOS: dict[str, list[tuple[str, dict[str, Any]]]] = {
        "quote": [
            ("quote", {"name": "Jane", "property_type": "commercial", "size": "1000"}),
            ("quote", {"name": "Sam", "property_type": "abandoned", "size": "500",
                       "has_hazard": True, "has_lawn": True}),
            ("quote", {"name": "Lee", "property_type": "barn", "size": "200"}),
            ("quote", {"name": "", "property_type": "residential", "size": "abc"}),
        ],
        "schedule": [
            ("schedule", {"name": "Jane", "date": "2024-06-10", "time": "08:00"}),
            ("schedule", {"name": "Jane", "date": "2024-06-10", "time": "17:01"}),
            ("schedule", {"name": "Jane", "date": "2024-06-08", "time": "10:00"}),
            ("schedule", {"name": "Jane", "date": "2024-02-30", "time": "10:00"}),
        ],
        "contact": [
            ("contact", {"name": "Jane", "email": "jane@example.com",
                         "message": "Do you haul pianos?"}),
            ("contact", {"name": "Jane", "email": "", "message": "Hello"}),
        ],
    }

    HANDLERS = {
        "contact": handle_contact,
        "quote": handle_quote,
        "schedule": handle_schedule,
    }

    def __init__(self) -> None:
        self.delivered: list[tuple[str, dict[str, Any]]] = []

    def system_log(self, text: str) -> None:
        print(f"{DIM}  >> {text}{RESET}")

    def show(self, response: FormResponse) -> None:
        colour = GREEN if response.success else RED
        print(f"{colour}{BOLD}[{response.form}]{RESET} {colour}{response.message}{RESET}")

    def _install_hooks(self) -> None:
        for form in self.HANDLERS:
            register_submission_hook(
                form, lambda payload, form=form: self.delivered.append((form, payload))
            )

    def submit(self, form: str, fields: dict[str, Any]) -> FormResponse:
        print(f"\n{BLUE}[Visitor] {RESET}{form}: {fields}")
        response = self.HANDLERS[form](**fields)
        self.show(response)
        self.system_log(f"Submission: {response.submission_id}")
        return response

    def run_scenario(self, scenario: str) -> None:
        """Auto-play a pre-scripted scenario for demo purposes."""
        steps = self.SCENARIOS.get(scenario)
        if not steps:
            print(f"{RED}Unknown scenario: {scenario}{RESET}")
            return

        print()
        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  SITE FORMS - Scenario: {scenario}{RESET}")
        print(f"{BOLD}  Business: {settings.business.name}{RESET}")
        print(f"{BOLD}  Booking window: {describe_window()}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")

        clear_hooks()
        self._install_hooks()
        for form, fields in steps:
            self.submit(form, fields)

        print(f"\n{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  Scenario '{scenario}' complete.{RESET}")
        print(f"{DIM}  Hook deliveries: {len(self.delivered)}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Site forms console demo")
    parser.add_argument(
        "--scenario",
        choices=[*ConsoleSession.SCENARIOS, "all"],
        default="all",
        help="Which scripted scenario to replay",
    )
    args = parser.parse_args()

    session = ConsoleSession()
    scenarios = list(ConsoleSession.SCENARIOS) if args.scenario == "all" else [args.scenario]
    for scenario in scenarios:
        session.run_scenario(scenario)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print(f"\n{DIM}Demo interrupted.{RESET}")
        sys.exit(130)
