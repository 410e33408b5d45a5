"""Entry point for running the forecast board as a module."""

import argparse
import atexit
import logging
import signal
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pydantic import ValidationError

from .app import ForecastApp
from .models.config import Config, FeedConfig

# Global reference for signal handlers
_app: ForecastApp | None = None
_logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "INFO", log_dir: Path = Path("logs")) -> None:
    """Configure logging to stderr plus a rotating file when the log dir is writable.

    Args:
        log_level: The logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for forecast_board.log
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    try:
        log_dir.mkdir(exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_dir / "forecast_board.log",
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
                encoding="utf-8",
            )
        )
    except OSError:
        pass  # Skip file logging if we can't write

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )


def _signal_handler(signum: int, frame: object) -> None:
    """Ask the running app to exit on SIGINT/SIGTERM."""
    signal_name = signal.Signals(signum).name
    _logger.info(f"Received {signal_name}, shutting down gracefully...")

    if _app is not None:
        _app.exit()


def _cleanup() -> None:
    """Cleanup handler called on exit."""
    _logger.info("Forecast Board shutdown complete")


def setup_signal_handlers() -> None:
    """Set up signal handlers for graceful shutdown."""
    signal.signal(signal.SIGINT, _signal_handler)
    signal.signal(signal.SIGTERM, _signal_handler)

    atexit.register(_cleanup)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    global _app

    parser = argparse.ArgumentParser(
        description="Forecast Board - two-day JMA forecast with temperature and wind chill extremes"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path("config.json"),
        help="Path to configuration file (default: config.json)",
    )
    parser.add_argument(
        "-a",
        "--area",
        help="JMA area code to show instead of the configured one (e.g., 130010)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("-V", "--version", action="store_true", help="Show version and exit")

    args = parser.parse_args(argv)

    if args.version:
        from . import __version__

        print(f"Forecast Board v{__version__}")
        sys.exit(0)

    if not args.config.exists():
        print(f"Config file not found: {args.config}, using defaults")

    try:
        config = Config.load_or_default(args.config)
        if args.area:
            feed = FeedConfig.model_validate({**config.feed.model_dump(), "area_code": args.area})
            config = config.model_copy(update={"feed": feed})
    except (ValidationError, ValueError) as e:
        print(f"Invalid configuration: {e}")
        sys.exit(2)

    setup_logging("DEBUG" if args.verbose else config.settings.log_level)
    setup_signal_handlers()

    _logger.info(f"Starting Forecast Board for area {config.feed.area_code}")

    _app = ForecastApp(config=config)
    _app.run()


if __name__ == "__main__":
    main()
