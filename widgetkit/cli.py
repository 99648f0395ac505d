#!/usr/bin/env python3
"""
widgetkit CLI

Runs the creational pattern demos: an abstract factory producing a matched
family of platform widgets, and a builder assembling platform windows step by
step under a director.
"""

import argparse
import sys
import logging
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import DemoConfig, load_config
from .logger import setup_logger
from .abstract_factory import create_window_application, client_code as factory_client_code
from .builder import WindowCreationManager, client_code as builder_client_code

logger = logging.getLogger('widgetkit')

DEMO_CHOICES = ["factory", "builder", "all"]
PLATFORM_CHOICES = ["windows", "macos", "none", "auto"]


def factory_phase(config: DemoConfig) -> None:
    """Abstract Factory demo for the configured platform.

    Raises:
        ValueError: If the configured platform has no widget family
    """
    logger.info("Abstract Factory demo")
    logger.info("=" * 50)

    application = create_window_application(config.platform)
    logger.info(f"Platform: {application.get_platform_name()}")
    factory_client_code(application)


def builder_phase(config: DemoConfig) -> None:
    """Builder demo with both platform builders."""
    logger.info("Builder demo")
    logger.info("=" * 50)

    manager = WindowCreationManager()
    builder_client_code(manager, config.window_title)


def run_demos(demo: str, config: DemoConfig) -> None:
    """Run the selected demos in order: factory first, then builder."""
    if demo in ("factory", "all"):
        factory_phase(config)
    if demo == "all":
        logger.info("")
    if demo in ("builder", "all"):
        builder_phase(config)


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="widgetkit",
        description="Demonstrate the Abstract Factory and Builder patterns with platform widgets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Both demos with the default (Windows) widget family
  widgetkit

  # Abstract factory only, MacOS widgets
  widgetkit --demo factory --platform macos

  # Builder only, custom title for the second window of each builder
  widgetkit --demo builder --title "Settings"

  # Platform from the host OS, settings from a YAML file
  widgetkit --platform auto --config widgetkit.yml
        """
    )

    parser.add_argument(
        "--demo",
        choices=DEMO_CHOICES,
        default="all",
        help="Which demo to run (default: all)"
    )

    parser.add_argument(
        "--platform",
        choices=PLATFORM_CHOICES,
        help="Widget family for the abstract factory demo "
             "(default: $WIDGETKIT_PLATFORM, config file, then windows)"
    )

    parser.add_argument(
        "--config",
        dest="config_path",
        help="Path to a YAML config file (default: ./widgetkit.yml if present)"
    )

    parser.add_argument(
        "--title",
        help="Title of the second window built by each builder (default: 'New title')"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging of factory and builder activity"
    )

    parser.add_argument(
        "--log-dir",
        dest="log_dir",
        help="Directory for the debug log file (only used with --debug)"
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"widgetkit v{__version__}"
    )

    args = parser.parse_args(argv)
    log_dir = Path(args.log_dir).resolve() if args.log_dir else None

    setup_logger(log_dir, args.debug)

    try:
        config = load_config(
            platform=args.platform,
            config_path=Path(args.config_path) if args.config_path else None,
            title=args.title,
            debug=args.debug
        )
        if config.debug and not args.debug:
            setup_logger(log_dir, True)

        logger.debug(f"Platform: {config.platform.value}")
        logger.debug(f"Demo: {args.demo}")

        run_demos(args.demo, config)

    except (ValueError, FileNotFoundError) as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("\nOperation cancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.critical(f"\nAn unexpected error occurred: {str(e)}", exc_info=args.debug)
        sys.exit(1)


if __name__ == "__main__":
    main()
