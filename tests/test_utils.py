#!/usr/bin/env python3
"""
Tests for error handling and text helpers
"""

import pytest

from smartdemo.utils.error_handler import ErrorHandler, ErrorCategory
from smartdemo.utils.text_utils import clean_text, split_tokens, parse_int, parse_number


def test_report_logs_one_line(error_handler, console):
    report = error_handler.report(ErrorCategory.UNKNOWN_DEVICE, "Device 5 not found.", {"id": 5})

    info, errors = console.read()
    assert errors == ["Device 5 not found."]
    assert info == []
    assert report.category is ErrorCategory.UNKNOWN_DEVICE
    assert report.context == {"id": 5}
    assert report.exception_type is None


def test_handle_error_keeps_traceback(error_handler, console):
    try:
        raise KeyError("missing")
    except KeyError as e:
        report = error_handler.handle_error(e)

    _, errors = console.read()
    assert errors == ["'missing'"]
    assert report.exception_type == "KeyError"
    assert "KeyError" in report.traceback_text


def test_error_summary_and_history_limit(logger):
    handler = ErrorHandler(logger, max_error_history=3)
    for _ in range(4):
        handler.report(ErrorCategory.INVALID_SELECTION, "Invalid input")
    handler.report(ErrorCategory.MISSING_VALUE, "Invalid command or value.")

    summary = handler.get_error_summary()
    assert summary["total_errors"] == 5
    assert summary["error_categories"] == {"invalid_selection": 4, "missing_value": 1}
    assert len(handler.error_reports) == 3
    assert len({r.error_id for r in handler.error_reports}) == 3

    handler.clear_error_history()
    assert handler.get_error_summary()["total_errors"] == 0


def test_clean_text():
    assert clean_text("  setTemp   2\t75 ") == "setTemp 2 75"
    assert clean_text("") == ""
    assert split_tokens("  turnOn   1 ") == ["turnOn", "1"]
    assert split_tokens("") == []


@pytest.mark.parametrize("token, expected", [
    ("3", 3),
    ("-1", -1),
    ("3.0", None),
    ("1_0", None),
    ("+7", 7),
    ("", None),
    ("abc", None),
    (None, None),
])
def test_parse_int(token, expected):
    assert parse_int(token) == expected


@pytest.mark.parametrize("token, expected", [
    ("75", 75),
    ("75.0", 75),
    ("68.5", 68.5),
    ("-4", -4),
    ("1e1", 10),
    (".5", 0.5),
    ("1_0", None),
    ("1e999", None),
    ("inf", None),
    ("nan", None),
    ("warm", None),
    (None, None),
])
def test_parse_number(token, expected):
    result = parse_number(token)
    assert result == expected
    if expected is not None:
        assert type(result) is type(expected)
