"""Entry point for running the weather app as a module."""

import argparse
import atexit
import logging
import signal
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .app import WeatherApp
from .exceptions import ConfigError
from .models.config import Config
from .services.location import CITY_PARAM, LocationState, set_query_param

# Global reference for signal handlers
_app: WeatherApp | None = None
_logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "INFO") -> None:
    """Configure logging with rotation support.

    Args:
        log_level: The logging level (DEBUG, INFO, WARNING, ERROR)
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    # Try to add rotating file handler
    log_dir = Path("logs")
    try:
        log_dir.mkdir(exist_ok=True)
        # Rotate at 10MB, keep 5 backup files
        file_handler = RotatingFileHandler(
            log_dir / "cityweather.log",
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        handlers.append(file_handler)
    except (PermissionError, OSError):
        pass  # Skip file logging if we can't write

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def _signal_handler(signum: int, frame: object) -> None:
    """Handle shutdown signals gracefully.

    Args:
        signum: Signal number received
        frame: Current stack frame (unused)
    """
    signal_name = signal.Signals(signum).name
    _logger.info(f"Received {signal_name}, shutting down gracefully...")

    if _app is not None:
        _app.exit()


def _cleanup() -> None:
    """Cleanup handler called on exit."""
    _logger.info("City Weather shutdown complete")


def setup_signal_handlers() -> None:
    """Set up signal handlers for graceful shutdown."""
    signal.signal(signal.SIGINT, _signal_handler)
    signal.signal(signal.SIGTERM, _signal_handler)
    atexit.register(_cleanup)


def build_location(config: Config, link: str | None, city: str | None) -> LocationState:
    """Starting location: an explicit link, else the share base URL, plus --city."""
    url = link or config.settings.share_base_url
    if city:
        url = set_query_param(url, CITY_PARAM, city)
    return LocationState.from_url(url)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="City Weather - current conditions and a 5-day forecast in your terminal"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path("config.json"),
        help="Path to configuration file (default: config.json)",
    )
    parser.add_argument(
        "--city",
        help="City to search for on startup",
    )
    parser.add_argument(
        "--link",
        help="Shareable link to open, e.g. cityweather://search?city=Paris",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="store_true",
        help="Show version and exit",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    global _app

    args = build_parser().parse_args(argv)

    # Handle version flag
    if args.version:
        from . import __version__

        print(f"City Weather v{__version__}")
        sys.exit(0)

    config = Config.load_or_default(args.config)

    log_level = "DEBUG" if args.verbose else config.settings.log_level
    setup_logging(log_level)
    setup_signal_handlers()

    _logger.info("Starting City Weather")

    if not args.config.exists():
        print(f"Config file not found: {args.config}")
        print("Starting with default configuration; the API key is read from the environment.")

    try:
        _app = WeatherApp(config=config, location=build_location(config, args.link, args.city))
    except ConfigError as e:
        _logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    _app.run()


if __name__ == "__main__":
    main()
