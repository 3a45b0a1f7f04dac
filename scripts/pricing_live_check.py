"""Manual live check for a lot's advanced pricing.

Run from the repository root with:
  PYTHONPATH=src PRICING_BASE_URL=http://localhost:8085 PRICING_API_URI=ParkingWithParallel \
  PRICING_TOKEN=... PRICING_LOT_ID=... \
  python scripts/pricing_live_check.py

Optional environment variables:
  PRICING_API_URI
  PRICING_TOKEN

The script only reads data; nothing is written back to the backend.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys

from pyparkingpricing import Client
from pyparkingpricing.exceptions import PyParkingPricingError
from pyparkingpricing.models import BlockMode, DayOfWeek, DayScheduleBlock
from pyparkingpricing.resolver import MODE_LABELS
from pyparkingpricing.util import format_time_of_day


def _require_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        print(f"Missing required environment variable: {name}", file=sys.stderr)
        raise SystemExit(2)
    return value


def _format_block(block: DayScheduleBlock) -> str:
    label = MODE_LABELS[block.mode]
    if block.mode in (BlockMode.NEW_BLOCK, BlockMode.NO_TIME):
        return label
    window = ""
    if block.mode is BlockMode.SET_TIME:
        start = format_time_of_day(block.start_time) if block.start_time is not None else "--:--"
        end = format_time_of_day(block.end_time) if block.end_time is not None else "--:--"
        window = f" {start}-{end}"
    return f"{label}{window} rate={block.rate} max={block.max_amount}"


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    parser.add_argument("--payload", action="store_true", help="print the save payload")
    return parser.parse_args()


async def main() -> int:
    args = _parse_args()
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    base_url = _require_env("PRICING_BASE_URL")
    lot_id = _require_env("PRICING_LOT_ID")
    api_uri = os.getenv("PRICING_API_URI")
    token = os.getenv("PRICING_TOKEN")

    try:
        async with Client(base_url=base_url, api_uri=api_uri, token=token) as client:
            editor = client.advanced_editor(lot_id)
            await editor.load()
    except PyParkingPricingError as exc:
        print(f"Error: {exc.__class__.__name__}: {exc}", file=sys.stderr)
        return 1

    print(f"Lot: {editor.lot_id}")
    print(f"Global rate: {editor.global_rate} | daily max: {editor.global_max}")
    print(f"Advanced pricing: {'enabled' if editor.enabled else 'disabled'}")
    for day in DayOfWeek:
        print(f"{day.label}:")
        for index, block in enumerate(editor.schedule(day)):
            print(f"  {index}: {_format_block(block)}")
    if args.payload:
        for record in editor.payload():
            print(record)
    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
