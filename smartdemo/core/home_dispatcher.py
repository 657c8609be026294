#!/usr/bin/env python3
"""
SmartDemo Home Dispatcher

Parses smart home command lines and routes them to the device registry.
"""

import logging

from smartdemo.core.command_dispatcher import CommandDispatcher, ExecutionResult
from smartdemo.core.smart_home import SmartHome
from smartdemo.data.command_patterns import (
    EXIT_COMMAND,
    HOME_MENU,
    STATUS_COMMAND,
    UPDATE_COMMAND,
)
from smartdemo.devices.factory import DeviceFactory
from smartdemo.utils.error_handler import ErrorHandler
from smartdemo.utils.text_utils import split_tokens, parse_int, parse_number


class HomeCommandDispatcher(CommandDispatcher):
    """Dispatcher for the smart home simulator."""

    exit_command = EXIT_COMMAND

    def __init__(self, config, logger: logging.Logger, error_handler: ErrorHandler):
        super().__init__(config, logger, error_handler)
        self.home = SmartHome(logger, error_handler)
        self.factory = DeviceFactory(config.home, logger, error_handler)

    def initialize(self) -> bool:
        """Create the configured devices."""
        for spec in self.config.home.devices:
            device = self.factory.create(spec.type, spec.id)
            if device:
                self.home.add_device(device)
        return True

    def menu_text(self) -> str:
        return HOME_MENU

    def _is_exit(self, line: str) -> bool:
        return split_tokens(line)[:1] == [self.exit_command]

    def _dispatch(self, line: str) -> ExecutionResult:
        parts = split_tokens(line)
        command = parts[0] if parts else ""

        if command == STATUS_COMMAND:
            return self.home.show_status()
        if command == UPDATE_COMMAND:
            return self.home.update_all()

        raw_id = parts[1] if len(parts) > 1 else None
        raw_value = parts[2] if len(parts) > 2 else None
        return self.home.execute(
            parse_int(raw_id),
            command,
            parse_number(raw_value),
            raw_id=raw_id
        )
