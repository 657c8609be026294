#!/usr/bin/env python3
"""
SmartDemo Pattern Menu

Numbered menu that runs one design pattern example per selection.
"""

import logging
from typing import Callable, Dict

from smartdemo.core.command_dispatcher import CommandDispatcher, ExecutionResult
from smartdemo.data.command_patterns import (
    MENU_EXIT,
    PATTERN_MENU,
    PATTERN_OPTIONS,
    RESPONSE_TEMPLATES,
)
from smartdemo.patterns.adapter import OldPrinter, PrinterAdapter
from smartdemo.patterns.decorator import BasicNotifier, EmailNotifier
from smartdemo.patterns.observer import ChatRoom, User
from smartdemo.patterns.shapes import ShapeFactory
from smartdemo.patterns.singleton import AppSettings
from smartdemo.patterns.strategy import PAYMENT_METHODS, PaymentContext
from smartdemo.utils.error_handler import ErrorHandler, ErrorCategory


class PatternMenuDispatcher(CommandDispatcher):
    """Dispatcher for the design pattern showcase."""

    exit_command = MENU_EXIT

    def __init__(self, config, logger: logging.Logger, error_handler: ErrorHandler):
        super().__init__(config, logger, error_handler)
        self.settings = config.patterns

    def get_command_handlers(self) -> Dict[str, Callable[[], None]]:
        """Get mapping of menu keys to example runners."""
        return {
            "1": self.run_strategy,
            "2": self.run_observer,
            "3": self.run_singleton,
            "4": self.run_factory,
            "5": self.run_adapter,
            "6": self.run_decorator,
        }

    def menu_text(self) -> str:
        return PATTERN_MENU

    def _dispatch(self, line: str) -> ExecutionResult:
        handler = self.get_command_handlers().get(line)
        if handler is None:
            return self._reject(ErrorCategory.INVALID_SELECTION,
                                RESPONSE_TEMPLATES["invalid_selection"], selection=line)

        handler()
        return ExecutionResult(success=True, message=PATTERN_OPTIONS[line], data={"selection": line})

    def run_strategy(self):
        method = self.settings.payment_method.lower()
        strategy_class = PAYMENT_METHODS.get(method)
        if strategy_class is None:
            raise ValueError(f"Unknown payment method: {self.settings.payment_method}")
        PaymentContext(strategy_class(self.logger)).execute(self.settings.payment_amount)

    def run_observer(self):
        room = ChatRoom()
        for name in self.settings.chat_users:
            room.add_user(User(name, self.logger))
        room.notify(self.settings.chat_message)

    def run_singleton(self):
        self.logger.info(AppSettings.get_instance(self.settings.app_name).app_name)

    def run_factory(self):
        shape = ShapeFactory.create(self.settings.shape, self.logger)
        if shape is None:
            raise ValueError(f"Unknown shape: {self.settings.shape}")
        shape.draw()

    def run_adapter(self):
        PrinterAdapter(OldPrinter(self.logger)).print(self.settings.print_text)

    def run_decorator(self):
        notifier = EmailNotifier(BasicNotifier(self.logger), self.logger)
        notifier.send(self.settings.notification_message)
