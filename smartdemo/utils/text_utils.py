#!/usr/bin/env python3
"""
SmartDemo Text Utilities

Input line cleanup and strict number parsing.
"""

import math
import re
from typing import List, Optional, Union

Number = Union[int, float]

_DECIMAL = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")


def clean_text(text: str) -> str:
    """Clean and normalize text."""
    if not text:
        return ""

    # Remove extra whitespace
    return re.sub(r'\s+', ' ', text.strip())


def split_tokens(text: str) -> List[str]:
    """Split a command line into whitespace-separated tokens."""
    return clean_text(text).split() if text else []


def parse_int(token: Optional[str]) -> Optional[int]:
    """Parse a device id. Anything that is not a plain integer gives None."""
    if token is None or not re.fullmatch(r"[+-]?[0-9]+", token):
        return None
    return int(token)


def parse_number(token: Optional[str]) -> Optional[Number]:
    """Parse a finite number, keeping integral values as int."""
    if token is None or not _DECIMAL.fullmatch(token):
        return None
    value = float(token)

    if not math.isfinite(value):
        return None
    return int(value) if value.is_integer() else value
