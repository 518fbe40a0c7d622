"""Compute training targets and write the weekly projection to intervals.icu.

Meant to be triggered by a scheduler (cron, systemd timer, CI schedule).

Usage:
    python -m scripts.run_targets                     # Run for today
    python -m scripts.run_targets --date 2025-03-10   # Run for a given day
    python -m scripts.run_targets --weeks 8           # Project 8 weeks
    python -m scripts.run_targets --json              # Print the raw report
"""

import argparse
import asyncio
import json
import sys
from dataclasses import replace
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from web.config import get_settings
from web.logger import setup_logger
from web.services.targets import run_targets


def print_report(body: dict) -> None:
    """Print a human-readable run summary."""
    if "progression" not in body:
        print(body.get("message") or body.get("error"))
        return

    print()
    print("=" * 50)
    print(f"Training Targets {body['date']}")
    print("=" * 50)
    print(f"CTL (Fitness): {body['ctl']:.1f}")
    print(f"ATL (Fatigue): {body['atl']:.1f}")
    print(f"TSB (Form): {body['tsb']:.1f}")
    print(f"State: {body['state']}")
    print(f"Phase: {body['phase']}")
    print(f"Daily target TSS: {body['daily_target']}")
    print(f"Weekly target TSS: {body['weekly_target']}")
    print()
    print("Projection:")
    for week in body["progression"]:
        mark = "" if week["written"] else f"  (not written: {week['error']})"
        print(f"  W{week['week_offset']} {week['monday']}: {week['state']:<9} {week['phase']:<9} {week['weekly_target']}{mark}")

    if body["failed_writes"]:
        print(f"\nWrite errors: {body['failed_writes']}")


def main():
    parser = argparse.ArgumentParser(
        description="Compute daily/weekly training targets from intervals.icu wellness data"
    )
    parser.add_argument(
        "--date",
        help="Day to compute for, YYYY-MM-DD (default: today, UTC)",
    )
    parser.add_argument(
        "--weeks",
        type=int,
        help="Number of weeks to project (default: SIMULATION_WEEKS)",
    )
    parser.add_argument(
        "--write-daily",
        action="store_true",
        help="Also write today's daily target and status comment",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the raw JSON report",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only log warnings and errors",
    )

    args = parser.parse_args()

    settings = get_settings()
    setup_logger("WARNING" if args.quiet else settings.log_level)

    config = settings.to_target_config()
    if args.write_daily:
        config = replace(config, write_daily_target=True)

    result = asyncio.run(run_targets(config, today=args.date, weeks=args.weeks))

    if args.json:
        print(json.dumps(result.body, indent=2, ensure_ascii=False))
    elif not args.quiet:
        print_report(result.body)

    sys.exit(0 if result.ok else 1)


if __name__ == "__main__":
    main()
