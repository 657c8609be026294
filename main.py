#!/usr/bin/env python3
"""
SmartDemo Console - Main Entry Point

Two interactive console programs: a smart home simulator driven by
typed commands, and a numbered menu of design pattern examples.

Author: SmartDemo Team
License: MIT
"""

import argparse
import sys
from typing import Optional, TextIO

from config import Config, ConfigurationError, config_as_dict, setup_logging
from smartdemo.core.command_dispatcher import CommandDispatcher
from smartdemo.core.event_loop import EventLoop
from smartdemo.core.home_dispatcher import HomeCommandDispatcher
from smartdemo.patterns.menu import PatternMenuDispatcher
from smartdemo.utils.error_handler import ErrorHandler

__version__ = "1.0.0"

PROGRAMS = {
    "home": HomeCommandDispatcher,
    "patterns": PatternMenuDispatcher,
}


class SmartDemo:
    """Main application orchestrator."""

    def __init__(
        self,
        config_path: Optional[str] = None,
        load_env: bool = False,
        verbose: bool = False,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None
    ):
        """Initialize SmartDemo with configuration."""
        self.config = Config.load_from_file(config_path) if config_path else Config()
        if load_env:
            self.config.load_environment_variables()
        if verbose:
            self.config.log_level = "DEBUG"

        issues = self.config.validate()
        if issues:
            raise ConfigurationError("; ".join(issues))

        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.logger = setup_logging(self.config, stdout=self.stdout, stderr=stderr or sys.stderr)
        self.error_handler = ErrorHandler(self.logger)

        # Core components (initialized later)
        self.command_dispatcher: Optional[CommandDispatcher] = None
        self.event_loop: Optional[EventLoop] = None

        self.running = False

    def initialize_services(self, program: str) -> bool:
        """Build the dispatcher for ``program`` and the loop around it."""
        dispatcher_class = PROGRAMS.get(program)
        if dispatcher_class is None:
            self.logger.error(f"Unknown program: {program}")
            return False

        self.logger.debug(f"Configuration: {config_as_dict(self.config)}")

        self.command_dispatcher = dispatcher_class(self.config, self.logger, self.error_handler)
        if not self.command_dispatcher.initialize():
            return False

        self.event_loop = EventLoop(
            self.config,
            self.logger,
            self.command_dispatcher,
            self.error_handler,
            input_stream=self.stdin,
            output_stream=self.stdout
        )
        return True

    def run(self, program: str) -> int:
        """Run one of the console programs."""
        if not self.initialize_services(program):
            return 1

        self.running = True
        try:
            return self.event_loop.run()
        finally:
            self.shutdown_gracefully()

    def shutdown_gracefully(self):
        """Perform graceful shutdown of all services."""
        if not self.running:
            return
        self.running = False

        if self.event_loop:
            self.event_loop.stop()
        if self.command_dispatcher:
            self.command_dispatcher.shutdown()
        self.error_handler.shutdown()


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="smartdemo",
        description="SmartDemo Console - smart home simulator and design pattern showcase",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py home                       # Smart home simulator
  python main.py patterns                   # Design pattern menu
  python main.py --config custom.yaml home  # Use custom configuration
        """
    )

    parser.add_argument(
        "program",
        choices=sorted(PROGRAMS),
        help="Which console program to run"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to configuration file (YAML)"
    )

    parser.add_argument(
        "--env",
        action="store_true",
        help="Apply overrides from .env and SMARTDEMO_* environment variables"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging (DEBUG level)"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"SmartDemo Console {__version__}"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the SmartDemo console."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        app = SmartDemo(config_path=args.config, load_env=args.env, verbose=args.verbose)
        return app.run(args.program)

    except ConfigurationError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())
