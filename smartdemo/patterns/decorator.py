#!/usr/bin/env python3
"""
Decorator pattern: notifiers that wrap other notifiers.
"""

import logging
from abc import ABC, abstractmethod


class Notifier(ABC):
    @abstractmethod
    def send(self, message: str):
        ...


class BasicNotifier(Notifier):
    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def send(self, message: str):
        self.logger.info(f"Message: {message}")


class EmailNotifier(Notifier):
    """Sends through the wrapped notifier first, then by email."""

    def __init__(self, wrapped: Notifier, logger: logging.Logger):
        self.wrapped = wrapped
        self.logger = logger

    def send(self, message: str):
        self.wrapped.send(message)
        self.logger.info(f"Email sent: {message}")
