#!/usr/bin/env python3
"""
SmartDemo Smart Home

Device registry: maps device ids to devices and applies commands to them.
"""

import logging
from typing import Dict, Iterator, Optional, Union

from smartdemo.core.command_dispatcher import ExecutionResult
from smartdemo.data.command_patterns import (
    LOCK_COMMAND,
    RESPONSE_TEMPLATES,
    SET_TEMP_COMMAND,
    TURN_OFF_COMMAND,
    TURN_ON_COMMAND,
    UNLOCK_COMMAND,
)
from smartdemo.devices.smart_devices import SmartDevice, Light, Thermostat, DoorLock
from smartdemo.utils.error_handler import ErrorHandler, ErrorCategory

Number = Union[int, float]


class SmartHome:
    """Registry of devices keyed by id."""

    def __init__(self, logger: logging.Logger, error_handler: ErrorHandler):
        self.logger = logger
        self.error_handler = error_handler
        self.devices: Dict[int, SmartDevice] = {}

    def __len__(self) -> int:
        return len(self.devices)

    def __iter__(self) -> Iterator[SmartDevice]:
        return iter(self.devices.values())

    def get_device(self, device_id: Optional[int]) -> Optional[SmartDevice]:
        return self.devices.get(device_id)

    def add_device(self, device: SmartDevice):
        """Insert a device, replacing any device with the same id."""
        self.devices[device.id] = device
        self.logger.info(RESPONSE_TEMPLATES["device_added"].format(id=device.id, type=device.type))

    def execute(
        self,
        device_id: Optional[int],
        command: str,
        value: Optional[Number] = None,
        raw_id: Optional[str] = None
    ) -> ExecutionResult:
        """Apply a command to one device.

        ``raw_id`` is the token the user typed, used in the error message
        when it could not be parsed.
        """
        device = self.get_device(device_id)
        if device is None:
            shown = device_id if device_id is not None else (raw_id or "?")
            return self._reject(
                ErrorCategory.UNKNOWN_DEVICE,
                RESPONSE_TEMPLATES["device_not_found"].format(id=shown),
                id=shown
            )

        if isinstance(device, Light):
            if command == TURN_ON_COMMAND:
                device.turn_on()
            elif command == TURN_OFF_COMMAND:
                device.turn_off()
            else:
                return self._reject(ErrorCategory.INVALID_COMMAND,
                                    RESPONSE_TEMPLATES["invalid_light_command"], command=command)
        elif isinstance(device, DoorLock):
            if command == LOCK_COMMAND:
                device.lock()
            elif command == UNLOCK_COMMAND:
                device.unlock()
            else:
                return self._reject(ErrorCategory.INVALID_COMMAND,
                                    RESPONSE_TEMPLATES["invalid_door_command"], command=command)
        elif isinstance(device, Thermostat) and command == SET_TEMP_COMMAND:
            if value is None:
                return self._reject(ErrorCategory.MISSING_VALUE,
                                    RESPONSE_TEMPLATES["invalid_command_or_value"], command=command)
            device.set_temp(value)
        else:
            return self._reject(ErrorCategory.INVALID_COMMAND,
                                RESPONSE_TEMPLATES["invalid_command_or_value"], command=command)

        return ExecutionResult(
            success=True,
            message=device.status(),
            data={"id": device.id, "command": command, "value": value}
        )

    def show_status(self) -> ExecutionResult:
        """Log a status block covering every device."""
        self.logger.info(RESPONSE_TEMPLATES["status_header"])
        for device in self:
            self.logger.info(device.status())
        self.logger.info(RESPONSE_TEMPLATES["status_footer"])

        return ExecutionResult(
            success=True,
            message="Status shown",
            data={"devices": [device.status() for device in self]}
        )

    def update_all(self) -> ExecutionResult:
        """Notify every device of a system update."""
        for device in self:
            device.update()
        return ExecutionResult(success=True, message=f"Updated {len(self)} devices")

    def _reject(self, category: ErrorCategory, message: str, **context) -> ExecutionResult:
        self.error_handler.report(category, message, context=context)
        return ExecutionResult(success=False, message=message, error=category)
