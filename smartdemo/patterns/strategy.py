#!/usr/bin/env python3
"""
Strategy pattern: interchangeable payment methods behind one context.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Type, Union

Number = Union[int, float]


class PaymentStrategy(ABC):
    """A way of paying an amount."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    @abstractmethod
    def pay(self, amount: Number):
        ...


class CardPayment(PaymentStrategy):
    def pay(self, amount: Number):
        self.logger.info(f"Paid {amount} using Card.")


class UpiPayment(PaymentStrategy):
    def pay(self, amount: Number):
        self.logger.info(f"Paid {amount} using UPI.")


PAYMENT_METHODS: Dict[str, Type[PaymentStrategy]] = {
    "card": CardPayment,
    "upi": UpiPayment,
}


class PaymentContext:
    """Runs a payment through whichever strategy it was given."""

    def __init__(self, strategy: PaymentStrategy):
        self.strategy = strategy

    def execute(self, amount: Number):
        self.strategy.pay(amount)
