#!/usr/bin/env python3
"""
SmartDemo Command Patterns

Command names, menu texts and message templates.
"""

# Smart home commands
EXIT_COMMAND = "exit"
STATUS_COMMAND = "status"
UPDATE_COMMAND = "update"

TURN_ON_COMMAND = "turnOn"
TURN_OFF_COMMAND = "turnOff"
LOCK_COMMAND = "lock"
UNLOCK_COMMAND = "unlock"
SET_TEMP_COMMAND = "setTemp"

HOME_MENU = (
    "Commands: turnOn id | turnOff id | lock id | unlock id | "
    "setTemp id value | status | update | exit"
)

# Pattern menu
MENU_EXIT = "0"
PATTERN_OPTIONS = {
    "1": "Strategy",
    "2": "Observer",
    "3": "Singleton",
    "4": "Factory",
    "5": "Adapter",
    "6": "Decorator",
}

PATTERN_MENU = "Choose option: " + ", ".join(
    f"{key}-{name}" for key, name in PATTERN_OPTIONS.items()
) + f", {MENU_EXIT}-Exit"

# Response templates
RESPONSE_TEMPLATES = {
    "device_added": "Device {id} ({type}) added.",
    "device_not_found": "Device {id} not found.",
    "unknown_device_type": "Unknown device type: {type}",
    "invalid_light_command": "Invalid command for Light.",
    "invalid_door_command": "Invalid command for Door.",
    "invalid_command_or_value": "Invalid command or value.",
    "status_header": "--- Smart Home Status ---",
    "status_footer": "------------------------",
    "invalid_selection": "Invalid input",
}
