"""cronrange CLI -- the `cronrange` command.

Exits 0 when the current time (or --at) is inside the allowed range, 1 when
it is not, so it can gate other commands:

    cronrange -e "* 9-17 * * 1-5" -t America/Toronto && ./deploy.sh
"""

from __future__ import annotations

import argparse
import logging
import sys

import yaml

from core.config import load_config
from core.errors import CronRangeError
from core.models.ranges import RangeSet
from core.time_context import TimeContext
from cronrange.evaluator import AllowedRange

logger = logging.getLogger("cronrange.cli")

EXIT_ALLOWED = 0
EXIT_DENIED = 1

USAGE_EPILOG = """\
* represents any value
, separator (e.g. 5,6)
- used to define (inclusive) ranges (e.g. 5-9); 9-6 wraps around
/ not supported

┌───────────── minute (0 - 59)
│ ┌───────────── hour (0 - 23)
│ │ ┌───────────── day of the month (1 - 31)
│ │ │ ┌───────────── month (1 - 12)
│ │ │ │ ┌───────────── day of the week (0 - 6) (Sunday to Saturday)
│ │ │ │ │
* * * * *

example:
  cronrange -e "* 9-17 * * *"    check if now is between 9 AM and 5:59 PM (UTC)
"""


def setup_logging(level: str) -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="cronrange",
        description="Check whether a moment falls within a cron-like allowed range",
        epilog=USAGE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-e", "--expression",
        type=str,
        required=True,
        help="Cron-like expression",
    )
    parser.add_argument(
        "-t", "--timezone",
        type=str,
        default=None,
        help="IANA timezone name (default: config value, else UTC)",
    )
    parser.add_argument(
        "--at",
        type=str,
        default=None,
        help="ISO 8601 instant to check instead of now (naive means UTC)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Reject values outside each field's legal bounds",
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to config.yaml (default: ~/.cronrange/config.yaml)",
    )
    parser.add_argument(
        "--env",
        type=str,
        default=None,
        help="Path to .env file (default: ~/.cronrange/.env)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print the verdict of every field",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: config value, else WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config, args.env)
    except (ValueError, yaml.YAMLError) as exc:
        parser.error(f"invalid configuration: {exc}")
    setup_logging(args.log_level or config.logging.level)

    timezone = args.timezone or config.timezone
    strict = config.strict if args.strict is None else args.strict

    if args.at is not None:
        try:
            context = TimeContext.parse(args.at)
        except ValueError:
            parser.error(f"argument --at: invalid ISO 8601 instant {args.at!r}")
    else:
        context = TimeContext.now()

    try:
        allowed_range = AllowedRange(args.expression, timezone, strict=strict)
    except CronRangeError as exc:
        parser.error(str(exc))

    allowed = allowed_range.is_date_allowed(context.current_time)
    logger.info(
        "%s at %s (%s) in %s: %s",
        allowed_range, context.current_time.isoformat(),
        "fixed" if context.is_fixed else "now", timezone,
        "allowed" if allowed else "denied",
    )

    if args.verbose:
        for domain, value, ok in allowed_range.explain(context.current_time):
            spec = getattr(allowed_range, domain.name)
            wraps = isinstance(spec, RangeSet) and any(r.wraps for r in spec.ranges)
            print(
                f"  {domain.label:<17} {value:>2}  {str(spec):<12} "
                f"{'ok' if ok else 'no'}{'  (wraps)' if wraps else ''}"
            )
        print(f"  {'allowed' if allowed else 'denied'}")

    return EXIT_ALLOWED if allowed else EXIT_DENIED


if __name__ == "__main__":
    sys.exit(main())
