#!/usr/bin/env python3
"""
SmartDemo Device Factory

Builds devices from their type tag.
"""

import logging
from typing import Dict, Optional, Type

from smartdemo.devices.smart_devices import SmartDevice, Light, Thermostat, DoorLock
from smartdemo.data.command_patterns import RESPONSE_TEMPLATES
from smartdemo.utils.error_handler import ErrorHandler, ErrorCategory


class DeviceFactory:
    """Creates devices by type tag, reporting unknown types."""

    DEVICE_TYPES: Dict[str, Type[SmartDevice]] = {
        "light": Light,
        "thermostat": Thermostat,
        "door": DoorLock,
    }

    def __init__(self, home_config, logger: logging.Logger, error_handler: ErrorHandler):
        self.home_config = home_config
        self.logger = logger
        self.error_handler = error_handler

    def create(self, device_type: str, device_id: int) -> Optional[SmartDevice]:
        """Create a device, or report and return None for an unknown type."""
        device_class = self.DEVICE_TYPES.get(str(device_type).lower())

        if device_class is None:
            self.error_handler.report(
                ErrorCategory.UNKNOWN_DEVICE_TYPE,
                RESPONSE_TEMPLATES["unknown_device_type"].format(type=device_type),
                context={"id": device_id}
            )
            return None

        if device_class is Thermostat:
            return Thermostat(
                device_id,
                device_type,
                self.logger,
                temperature=self.home_config.default_temperature,
                unit=self.home_config.temperature_unit
            )
        return device_class(device_id, device_type, self.logger)
