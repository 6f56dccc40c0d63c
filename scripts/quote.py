#!/usr/bin/env python3
"""Print a price quote for a stay.

Usage:
    PYTHONPATH=. python scripts/quote.py casa-luna 2025-07-10 2025-07-12
    PYTHONPATH=. python scripts/quote.py la-casita 2025-01-02 2025-01-05 --pets 1
    PYTHONPATH=. python scripts/quote.py --list
"""
from __future__ import annotations

import argparse
import sys
from datetime import date
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv
load_dotenv()

from casaluna.services.catalog import AccommodationNotFound, list_accommodations
from casaluna.services.quote_service import build_quote, format_quote_lines


def _parse_day(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}") from exc


def main() -> None:
    p = argparse.ArgumentParser(description="Price a stay at one of the accommodations.")
    p.add_argument("accommodation", nargs="?", help="Accommodation id or slug")
    p.add_argument("check_in", nargs="?", type=_parse_day)
    p.add_argument("check_out", nargs="?", type=_parse_day)
    p.add_argument("--pets", type=int, default=0)
    p.add_argument("--list", action="store_true", help="List accommodations and their rates")
    args = p.parse_args()

    if args.list:
        for a in list_accommodations():
            rc = a.rate_card
            print(f"- {a.id}: {a.title} ({a.capacity} guests) {rc.weekday}/{rc.weekend}/{rc.high_season} €")
        return

    if not (args.accommodation and args.check_in and args.check_out):
        p.error("accommodation, check_in and check_out are required")
    if args.pets < 0:
        p.error("--pets must be >= 0")

    try:
        quote = build_quote(args.accommodation, args.check_in, args.check_out, args.pets)
    except AccommodationNotFound as exc:
        raise SystemExit(str(exc)) from exc

    print(f"{quote.accommodation_id}: {quote.check_in} -> {quote.check_out}")
    for line in format_quote_lines(quote):
        print(f"- {line}")
    if not quote.is_valid:
        raise SystemExit("No nights in the selected range.")


if __name__ == "__main__":
    main()
