#!/usr/bin/env python3
"""
Adapter pattern: a legacy printer behind the current printer interface.
"""

import logging
from abc import ABC, abstractmethod


class OldPrinter:
    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def old_print(self, text: str):
        self.logger.info(f"OldPrinter: {text}")


class Printer(ABC):
    @abstractmethod
    def print(self, text: str):
        ...


class PrinterAdapter(Printer):
    def __init__(self, old_printer: OldPrinter):
        self.old_printer = old_printer

    def print(self, text: str):
        self.old_printer.old_print(text)
