#!/usr/bin/env python3
"""
SmartDemo Devices

Simulated smart home devices. Each device owns one piece of state, logs its
own changes and listens for system-wide updates.
"""

import logging
from abc import ABC, abstractmethod
from typing import Union

Number = Union[int, float]


class Observer(ABC):
    """Something that can be notified of a system update."""

    @abstractmethod
    def update(self):
        ...


class SmartDevice(Observer):
    """Base class for all simulated devices."""

    kind = "Device"

    def __init__(self, device_id: int, device_type: str, logger: logging.Logger):
        self.id = device_id
        self.type = device_type
        self.logger = logger

    @abstractmethod
    def status(self) -> str:
        """One-line human readable state."""

    def update(self):
        self.logger.info(f"{self.kind} {self.id} received system update")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id!r}, type={self.type!r})"


class Light(SmartDevice):
    kind = "Light"

    def __init__(self, device_id: int, device_type: str, logger: logging.Logger):
        super().__init__(device_id, device_type, logger)
        self.is_on = False

    def turn_on(self):
        self.is_on = True
        self.logger.info(f"Light {self.id} ON")

    def turn_off(self):
        self.is_on = False
        self.logger.info(f"Light {self.id} OFF")

    def status(self) -> str:
        return f"Light {self.id} is {'ON' if self.is_on else 'OFF'}"


class Thermostat(SmartDevice):
    kind = "Thermostat"

    def __init__(
        self,
        device_id: int,
        device_type: str,
        logger: logging.Logger,
        temperature: Number = 70,
        unit: str = "°F"
    ):
        super().__init__(device_id, device_type, logger)
        self.temperature = temperature
        self.unit = unit

    def set_temp(self, value: Number):
        self.temperature = value
        self.logger.info(f"Thermostat {self.id} set to {value}")

    def status(self) -> str:
        return f"Thermostat {self.id} is at {self.temperature}{self.unit}"


class DoorLock(SmartDevice):
    kind = "Door"

    def __init__(self, device_id: int, device_type: str, logger: logging.Logger):
        super().__init__(device_id, device_type, logger)
        self.locked = True

    def lock(self):
        self.locked = True
        self.logger.info(f"Door {self.id} LOCKED")

    def unlock(self):
        self.locked = False
        self.logger.info(f"Door {self.id} UNLOCKED")

    def status(self) -> str:
        return f"Door {self.id} is {'LOCKED' if self.locked else 'UNLOCKED'}"
