"""
Command-line entry point for the site's form logic.

Runs a single form submission through the same handlers the web page
uses and prints the message the visitor would see.

Usage:
    python main.py quote --name Jane --type commercial --size 1000 --hazard
    python main.py schedule --name Jane --date 2024-06-10 --time 09:30
    python main.py contact --name Jane --email jane@example.com --message "Hi"
    python main.py types
"""

import argparse
import sys
from typing import Optional

from src.config import settings
from src.forms import handle_contact, handle_quote, handle_schedule
from src.tools.quote_estimator import get_property_types


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=f"{settings.business.name} form processing"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    quote = sub.add_parser("quote", help="Estimate a cleanout quote")
    quote.add_argument("--name", default="")
    quote.add_argument("--type", dest="property_type", default="")
    quote.add_argument("--size", default="")
    quote.add_argument("--hazard", action="store_true", help="Hazardous materials present")
    quote.add_argument("--lawn", action="store_true", help="Add the lawn cut special")

    schedule = sub.add_parser("schedule", help="Request an appointment")
    schedule.add_argument("--name", default="")
    schedule.add_argument("--date", default="", help="YYYY-MM-DD")
    schedule.add_argument("--time", default="", help="HH:MM")

    contact = sub.add_parser("contact", help="Send a contact message")
    contact.add_argument("--name", default="")
    contact.add_argument("--email", default="")
    contact.add_argument("--message", default="")

    sub.add_parser("types", help="List property types and multipliers")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.command == "types":
        for info in get_property_types():
            print(f"{info['id']:<14} {info['label']:<20} x{info['multiplier']}")
        return 0

    if args.command == "quote":
        response = handle_quote(
            args.name, args.property_type, args.size, args.hazard, args.lawn
        )
    elif args.command == "schedule":
        response = handle_schedule(args.name, args.date, args.time)
    else:
        response = handle_contact(args.name, args.email, args.message)

    print(response.message)
    return 0 if response.success else 1


if __name__ == "__main__":
    sys.exit(main())
