"""Command-line entry point for Weather Tabs."""

import argparse
from typing import List, Optional

from common.config import VALID_UNITS, Config
from common.logging_setup import get_logger, setup_logging
from dashboard.app import run_dashboard

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weather-tabs",
        description=(
            "Tabbed terminal dashboard with live weather. "
            "Left/Right switch tabs, q quits."
        ),
    )

    parser.add_argument(
        "--location",
        help="City query, e.g. 'Berlin, DE' (env: WEATHER_TABS_LOCATION)",
    )

    parser.add_argument(
        "--units",
        choices=list(VALID_UNITS),
        help="Unit system (env: WEATHER_TABS_UNITS)",
    )

    parser.add_argument(
        "--lang",
        help="Language for condition text (env: WEATHER_TABS_LANG)",
    )

    parser.add_argument(
        "--api-key",
        help="OpenWeatherMap API key (env: OPENWEATHER_API_KEY)",
    )

    parser.add_argument(
        "--poll-minutes",
        type=int,
        help="Minutes between weather fetches (env: WEATHER_TABS_POLL_MINUTES)",
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    parser.add_argument(
        "--log-file",
        help="Log file path; logs are discarded without one",
    )

    parser.add_argument(
        "--no-mouse",
        action="store_true",
        help="Do not capture mouse events",
    )

    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Merge command-line flags over environment configuration."""
    config = Config.from_env()
    if args.location is not None:
        config.location = args.location
    if args.units is not None:
        config.units = args.units
    if args.lang is not None:
        config.language = args.lang
    if args.api_key is not None:
        config.api_key = args.api_key
    if args.poll_minutes is not None:
        config.poll_interval_minutes = args.poll_minutes
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_file is not None:
        config.log_file = args.log_file
    if args.no_mouse:
        config.mouse_capture = False
    config.validate()
    return config


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except ValueError as e:
        parser.error(str(e))

    setup_logging(level=config.log_level, log_file=config.log_file)
    logger.info(f"Starting dashboard for {config.location!r} ({config.units})")

    try:
        run_dashboard(config)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logger.error(f"Dashboard error: {e}")
        raise


if __name__ == "__main__":
    main()
