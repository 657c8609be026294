#!/usr/bin/env python3
"""
SmartDemo Event Loop

Reads one line at a time, hands it to a dispatcher and keeps going
until the exit command or the end of input.
"""

import logging
import sys
from datetime import datetime
from enum import Enum
from typing import Optional, TextIO

from config import Config
from smartdemo.core.command_dispatcher import CommandDispatcher
from smartdemo.utils.error_handler import ErrorHandler


class LoopState(Enum):
    AWAITING_COMMAND = "awaiting_command"
    TERMINATED = "terminated"


class EventLoop:
    """Sequential read-dispatch loop."""

    def __init__(
        self,
        config: Config,
        logger: logging.Logger,
        command_dispatcher: CommandDispatcher,
        error_handler: ErrorHandler,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None
    ):
        self.config = config
        self.logger = logger
        self.command_dispatcher = command_dispatcher
        self.error_handler = error_handler
        self.input_stream = input_stream or sys.stdin
        self.output_stream = output_stream or sys.stdout

        self.state = LoopState.AWAITING_COMMAND

        # Statistics
        self.lines_processed = 0
        self.session_start = datetime.now()

    @property
    def running(self) -> bool:
        return self.state is LoopState.AWAITING_COMMAND

    def run(self) -> int:
        """Run until terminated. Returns the process exit code."""
        self.logger.debug("Starting event loop...")

        try:
            while self.running:
                line = self._read_line()
                if line is None:
                    self.logger.debug("End of input reached")
                    self.stop()
                    break
                self.process_line(line)
        except KeyboardInterrupt:
            self.logger.debug("Event loop interrupted by user")
            self.stop()

        return 0

    def process_line(self, line: str):
        """Handle one input line; never raises."""
        self.lines_processed += 1

        try:
            result = self.command_dispatcher.dispatch_command(line.strip())
            if result.terminate:
                self.stop()
        except Exception as e:
            self.error_handler.handle_error(e, context={"line": line})

    def stop(self):
        """Move to the terminal state. Idempotent."""
        if self.state is LoopState.TERMINATED:
            return
        self.state = LoopState.TERMINATED
        elapsed = (datetime.now() - self.session_start).total_seconds()
        self.logger.debug(f"Event loop stopped after {self.lines_processed} lines in {elapsed:.1f}s")

    def _read_line(self) -> Optional[str]:
        """Show the menu and prompt, then block for one line."""
        if self.config.console.show_menu:
            self.logger.info(self.command_dispatcher.menu_text())

        self.output_stream.write(self.config.console.prompt)
        self.output_stream.flush()

        line = self.input_stream.readline()
        if not line:
            return None
        return line.rstrip("\r\n")
