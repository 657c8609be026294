"""
Shared fixtures. The logger writes into in-memory streams that the
``console`` fixture reads back.
"""

import io
import re

import pytest

import config as config_module
from smartdemo.utils.error_handler import ErrorHandler


class Console:
    """Splits logged output into INFO and ERROR messages."""

    def __init__(self):
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()

    def read(self):
        out, err = _drain(self.stdout), _drain(self.stderr)
        # The prompt has no newline, so a log line can follow it directly
        return re.findall(r"\[INFO\] (.*)", out), re.findall(r"\[ERROR\] (.*)", err)


def _drain(stream):
    text = stream.getvalue()
    stream.seek(0)
    stream.truncate()
    return text


@pytest.fixture
def config():
    return config_module.Config()


@pytest.fixture
def console():
    return Console()


@pytest.fixture
def logger(config, console):
    return config_module.setup_logging(config, stdout=console.stdout, stderr=console.stderr)


@pytest.fixture
def error_handler(logger):
    return ErrorHandler(logger)
