#!/usr/bin/env python3
"""
SmartDemo Configuration Management

Centralized configuration with dataclasses for type safety,
YAML file loading and optional environment variable overrides.
"""

import os
import sys
import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional, List, Dict, Any, TextIO

import yaml
from dotenv import load_dotenv


class ConfigurationError(Exception):
    """Raised when a configuration file cannot be loaded or saved."""


@dataclass
class DeviceSpec:
    """One device created at startup."""
    id: int
    type: str


@dataclass
class HomeConfig:
    """Smart home simulator settings."""
    devices: List[DeviceSpec] = field(default_factory=lambda: [
        DeviceSpec(id=1, type="light"),
        DeviceSpec(id=2, type="thermostat"),
        DeviceSpec(id=3, type="door"),
    ])
    default_temperature: float = 70
    temperature_unit: str = "°F"

    def __post_init__(self):
        # YAML hands us plain mappings
        self.devices = [
            d if isinstance(d, DeviceSpec) else DeviceSpec(**d)
            for d in self.devices
        ]


@dataclass
class PatternConfig:
    """Design pattern showcase settings."""
    app_name: str = "PatternApp"
    payment_method: str = "card"
    payment_amount: float = 100
    chat_users: List[str] = field(default_factory=lambda: ["Alice", "Bob"])
    chat_message: str = "Hello!"
    shape: str = "circle"
    print_text: str = "Adapted Print"
    notification_message: str = "Hi there"


@dataclass
class ConsoleConfig:
    """Interactive console settings."""
    prompt: str = "> "
    show_menu: bool = True
    history_size: int = 100


@dataclass
class Config:
    """Main configuration container."""
    home: HomeConfig = field(default_factory=HomeConfig)
    patterns: PatternConfig = field(default_factory=PatternConfig)
    console: ConsoleConfig = field(default_factory=ConsoleConfig)

    # Runtime settings
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def load_from_file(cls, config_path: str) -> "Config":
        """Load configuration from YAML file."""
        config_file = Path(config_path)
        if not config_file.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}

            config = cls()

            if "home" in config_data:
                config.home = HomeConfig(**config_data["home"])
            if "patterns" in config_data:
                config.patterns = PatternConfig(**config_data["patterns"])
            if "console" in config_data:
                config.console = ConsoleConfig(**config_data["console"])
            if "log_level" in config_data:
                config.log_level = config_data["log_level"]
            if "log_file" in config_data:
                config.log_file = config_data["log_file"]

            return config

        except (OSError, UnicodeDecodeError, yaml.YAMLError, TypeError, AttributeError) as e:
            raise ConfigurationError(f"Error loading configuration: {e}") from e

    def save_to_file(self, config_path: str):
        """Save configuration to YAML file."""
        config_data = {
            "home": asdict(self.home),
            "patterns": asdict(self.patterns),
            "console": asdict(self.console),
            "log_level": self.log_level,
            "log_file": self.log_file,
        }

        config_file = Path(config_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(config_file, "w", encoding="utf-8") as f:
                yaml.safe_dump(config_data, f, default_flow_style=False, indent=2,
                               allow_unicode=True, sort_keys=False)
        except OSError as e:
            raise ConfigurationError(f"Error saving configuration: {e}") from e

    def load_environment_variables(self):
        """Load configuration overrides from a .env file and the environment."""
        load_dotenv()

        self.log_level = os.getenv("SMARTDEMO_LOG_LEVEL", self.log_level)
        self.log_file = os.getenv("SMARTDEMO_LOG_FILE", self.log_file) or None
        self.console.prompt = os.getenv("SMARTDEMO_PROMPT", self.console.prompt)
        self.patterns.app_name = os.getenv("SMARTDEMO_APP_NAME", self.patterns.app_name)

    def validate(self) -> List[str]:
        """Validate configuration and return list of issues."""
        issues = []

        if not isinstance(self.log_level, str) or \
                self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            issues.append(f"Unknown log level: {self.log_level}")

        if self.log_file is not None and not isinstance(self.log_file, str):
            issues.append(f"Log file must be a path: {self.log_file}")

        ids = [d.id for d in self.home.devices]
        if not all(isinstance(i, int) and not isinstance(i, bool) for i in ids):
            issues.append("Device ids must be integers")
        elif len(ids) != len(set(ids)):
            issues.append("Device ids must be unique")

        if not all(isinstance(d.type, str) for d in self.home.devices):
            issues.append("Device types must be strings")

        if not _is_number(self.home.default_temperature):
            issues.append(f"Default temperature must be a number: {self.home.default_temperature}")

        if not _is_number(self.patterns.payment_amount):
            issues.append(f"Payment amount must be a number: {self.patterns.payment_amount}")

        history_size = self.console.history_size
        if not isinstance(history_size, int) or isinstance(history_size, bool):
            issues.append(f"History size must be an integer: {history_size}")
        elif history_size < 1:
            issues.append("History size must be at least 1")

        if not isinstance(self.console.prompt, str):
            issues.append(f"Prompt must be a string: {self.console.prompt}")

        if not isinstance(self.patterns.chat_users, list) or not self.patterns.chat_users:
            issues.append("At least one chat user is required")

        method = self.patterns.payment_method
        if not isinstance(method, str) or method.lower() not in ("card", "upi"):
            issues.append(f"Unknown payment method: {method}")

        if self.patterns.shape not in ("circle", "square"):
            issues.append(f"Unknown shape: {self.patterns.shape}")

        return issues


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class _MaxLevelFilter(logging.Filter):
    """Pass only records strictly below a level."""

    def __init__(self, level: int):
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


def setup_logging(
    config: Config,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> logging.Logger:
    """Setup logging configuration for SmartDemo.

    Normal events go to stdout as ``[INFO] message``; warnings and errors go
    to stderr as ``[ERROR] message``.
    """
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    logger = logging.getLogger("smartdemo")
    logger.setLevel(level)
    logger.propagate = False

    # Clear existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_formatter = logging.Formatter("[%(levelname)s] %(message)s")

    out_handler = logging.StreamHandler(stdout or sys.stdout)
    out_handler.setLevel(level)
    out_handler.addFilter(_MaxLevelFilter(logging.WARNING))
    out_handler.setFormatter(console_formatter)
    logger.addHandler(out_handler)

    err_handler = logging.StreamHandler(stderr or sys.stderr)
    err_handler.setLevel(logging.WARNING)
    err_handler.setFormatter(console_formatter)
    logger.addHandler(err_handler)

    if config.log_file:
        try:
            file_handler = logging.FileHandler(Path(config.log_file), encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            ))
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Could not create log file: {e}")

    return logger


def config_as_dict(config: Config) -> Dict[str, Any]:
    """Flatten the configuration for debug output."""
    return asdict(config)
