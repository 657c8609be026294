#!/usr/bin/env python3
"""
Factory pattern: shapes created by name.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, Type


class Shape(ABC):
    def __init__(self, logger: logging.Logger):
        self.logger = logger

    @abstractmethod
    def draw(self):
        ...


class Circle(Shape):
    def draw(self):
        self.logger.info("Drawing Circle")


class Square(Shape):
    def draw(self):
        self.logger.info("Drawing Square")


class ShapeFactory:
    SHAPES: Dict[str, Type[Shape]] = {
        "circle": Circle,
        "square": Square,
    }

    @classmethod
    def create(cls, shape_type: str, logger: logging.Logger) -> Optional[Shape]:
        """Build a shape, or None when the name is unknown."""
        shape_class = cls.SHAPES.get(shape_type)
        return shape_class(logger) if shape_class else None
