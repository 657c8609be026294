#!/usr/bin/env python3
"""
Observer pattern: a chat room broadcasting to its users.
"""

import logging
from abc import ABC, abstractmethod
from typing import List


class MessageObserver(ABC):
    @abstractmethod
    def update(self, message: str):
        ...


class User(MessageObserver):
    def __init__(self, name: str, logger: logging.Logger):
        self.name = name
        self.logger = logger

    def update(self, message: str):
        self.logger.info(f"{self.name} received: {message}")


class ChatRoom:
    """Subject that notifies users in the order they joined."""

    def __init__(self):
        self.observers: List[MessageObserver] = []

    def add_user(self, user: MessageObserver):
        self.observers.append(user)

    def notify(self, message: str):
        for observer in self.observers:
            observer.update(message)
