"""Run the due reminder sweep once, for cron jobs that do not go through HTTP."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from datetime import date

from duewise.application.use_cases.notifications import (
    DueReminderSweepError,
    SweepAlreadyRunningError,
    run_scheduled_due_reminder_sweep,
)
from duewise.infrastructure.database import SessionLocal, initialize_database
from duewise.infrastructure.web_push import PushConfigurationError, WebPushSender


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the sweep."""

    parser = argparse.ArgumentParser(
        description="Send push reminders for bills due today, tomorrow or in two days.",
    )
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Evaluate due dates as if today were this YYYY-MM-DD date (default: today)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    return parser.parse_args()


def main() -> None:
    """Run one sweep and print its counters as JSON."""

    args = parse_args()
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        sender = WebPushSender()
    except PushConfigurationError as exc:
        raise SystemExit(f"Cannot send reminders: {exc}") from exc

    initialize_database()

    session = SessionLocal()
    try:
        result = run_scheduled_due_reminder_sweep(session, sender, today=args.date)
    except (DueReminderSweepError, SweepAlreadyRunningError) as exc:
        raise SystemExit(f"Due reminder sweep failed: {exc}") from exc
    else:
        print(json.dumps({"success": True, **asdict(result)}))
    finally:
        session.close()


if __name__ == "__main__":
    main()
