#!/usr/bin/env python3
"""
Tests for the design pattern examples and their menu
"""

import pytest

from smartdemo.patterns.adapter import OldPrinter, PrinterAdapter
from smartdemo.patterns.decorator import BasicNotifier, EmailNotifier
from smartdemo.patterns.menu import PatternMenuDispatcher
from smartdemo.patterns.observer import ChatRoom, User
from smartdemo.patterns.shapes import ShapeFactory, Circle, Square
from smartdemo.patterns.singleton import AppSettings
from smartdemo.patterns.strategy import PaymentContext, CardPayment, UpiPayment
from smartdemo.utils.error_handler import ErrorCategory


@pytest.fixture
def menu(config, logger, error_handler):
    return PatternMenuDispatcher(config, logger, error_handler)


EXPECTED_OUTPUT = {
    "1": ["Paid 100 using Card."],
    "2": ["Alice received: Hello!", "Bob received: Hello!"],
    "4": ["Drawing Circle"],
    "5": ["OldPrinter: Adapted Print"],
    "6": ["Message: Hi there", "Email sent: Hi there"],
}


@pytest.mark.parametrize("selection", sorted(EXPECTED_OUTPUT))
def test_menu_option_output(menu, console, selection):
    result = menu.dispatch_command(selection)
    info, errors = console.read()

    assert result.success
    assert info == EXPECTED_OUTPUT[selection]
    assert errors == []


@pytest.mark.parametrize("selection", sorted(EXPECTED_OUTPUT))
def test_menu_option_is_reproducible(menu, console, selection):
    """Running any other option in between does not change the output."""
    menu.dispatch_command(selection)
    first, _ = console.read()

    for other in ("1", "2", "3", "4", "5", "6"):
        menu.dispatch_command(other)
    console.read()

    menu.dispatch_command(selection)
    second, _ = console.read()
    assert first == second


def test_singleton_option_logs_same_value_twice(menu, console):
    menu.dispatch_command("3")
    menu.dispatch_command("3")
    info, errors = console.read()

    assert len(info) == 2
    assert info[0] == info[1]
    assert errors == []


def test_singleton_returns_same_instance():
    first = AppSettings.get_instance()
    second = AppSettings.get_instance("SomethingElse")

    assert first is second
    assert second.app_name == first.app_name


@pytest.mark.parametrize("selection", ["7", "a", "", "1 2", "00"])
def test_invalid_selection(menu, console, selection):
    result = menu.dispatch_command(selection)
    info, errors = console.read()

    assert not result.success
    assert result.error is ErrorCategory.INVALID_SELECTION
    assert errors == ["Invalid input"]
    assert info == []


def test_zero_terminates(menu):
    assert menu.dispatch_command("0").terminate


def test_menu_text(menu):
    assert menu.menu_text() == (
        "Choose option: 1-Strategy, 2-Observer, 3-Singleton, 4-Factory, "
        "5-Adapter, 6-Decorator, 0-Exit"
    )


def test_configured_examples(config, logger, error_handler, console):
    config.patterns.payment_method = "upi"
    config.patterns.payment_amount = 250
    config.patterns.chat_users = ["Carol"]
    config.patterns.chat_message = "Hey"
    config.patterns.shape = "square"
    menu = PatternMenuDispatcher(config, logger, error_handler)

    for selection in ("1", "2", "4"):
        menu.dispatch_command(selection)

    info, _ = console.read()
    assert info == ["Paid 250 using UPI.", "Carol received: Hey", "Drawing Square"]


def test_unknown_shape_raises(config, logger, error_handler):
    config.patterns.shape = "hexagon"
    menu = PatternMenuDispatcher(config, logger, error_handler)

    with pytest.raises(ValueError, match="Unknown shape"):
        menu.dispatch_command("4")


def test_strategies(logger, console):
    PaymentContext(CardPayment(logger)).execute(10)
    PaymentContext(UpiPayment(logger)).execute(20)

    info, _ = console.read()
    assert info == ["Paid 10 using Card.", "Paid 20 using UPI."]


def test_chat_room_notifies_in_join_order(logger, console):
    room = ChatRoom()
    for name in ("Zed", "Amy"):
        room.add_user(User(name, logger))
    room.notify("ping")

    info, _ = console.read()
    assert info == ["Zed received: ping", "Amy received: ping"]


def test_shape_factory(logger):
    assert isinstance(ShapeFactory.create("circle", logger), Circle)
    assert isinstance(ShapeFactory.create("square", logger), Square)
    assert ShapeFactory.create("triangle", logger) is None


def test_adapter_and_decorator(logger, console):
    PrinterAdapter(OldPrinter(logger)).print("x")
    EmailNotifier(EmailNotifier(BasicNotifier(logger), logger), logger).send("y")

    info, _ = console.read()
    assert info == ["OldPrinter: x", "Message: y", "Email sent: y", "Email sent: y"]
