#!/usr/bin/env python3
"""
SmartDemo Error Handler

Centralized error reporting. Every rejected input line and every exception
caught at the loop boundary ends up here as exactly one error line.
"""

import logging
import traceback
from datetime import datetime
from typing import Dict, List, Optional, Any
from enum import Enum
from dataclasses import dataclass, field


class ErrorCategory(Enum):
    """Error categories for classification."""
    UNKNOWN_DEVICE_TYPE = "unknown_device_type"
    UNKNOWN_DEVICE = "unknown_device"
    INVALID_COMMAND = "invalid_command"
    MISSING_VALUE = "missing_value"
    INVALID_SELECTION = "invalid_selection"
    UNHANDLED = "unhandled"


@dataclass
class ErrorReport:
    """Detailed error report."""
    error_id: str
    timestamp: datetime
    category: ErrorCategory
    message: str
    exception_type: Optional[str] = None
    traceback_text: Optional[str] = None
    context: Dict[str, Any] = field(default_factory=dict)


class ErrorHandler:
    """Logs errors and keeps a bounded history of reports."""

    def __init__(self, logger: logging.Logger, max_error_history: int = 100):
        self.logger = logger

        # Error tracking
        self.error_reports: List[ErrorReport] = []
        self.max_error_history = max_error_history
        self.error_counts: Dict[str, int] = {}
        self._sequence = 0

    def report(
        self,
        category: ErrorCategory,
        message: str,
        context: Optional[Dict[str, Any]] = None
    ) -> ErrorReport:
        """Report a rejected input."""
        error_report = ErrorReport(
            error_id=self._next_error_id(),
            timestamp=datetime.now(),
            category=category,
            message=message,
            context=context or {}
        )

        self.logger.error(message)
        self._record(error_report)
        return error_report

    def handle_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        category: ErrorCategory = ErrorCategory.UNHANDLED
    ) -> ErrorReport:
        """Handle an exception caught while processing a line."""
        error_report = ErrorReport(
            error_id=self._next_error_id(),
            timestamp=datetime.now(),
            category=category,
            message=str(error) or type(error).__name__,
            exception_type=type(error).__name__,
            traceback_text="".join(traceback.format_exception(type(error), error, error.__traceback__)),
            context=context or {}
        )

        self.logger.error(error_report.message)
        self.logger.debug(f"[{error_report.error_id}] {error_report.traceback_text}")
        self._record(error_report)
        return error_report

    def _next_error_id(self) -> str:
        self._sequence += 1
        return f"ERR_{datetime.now().strftime('%Y%m%d_%H%M%S')}_{self._sequence:04d}"

    def _record(self, error_report: ErrorReport):
        """Update statistics and store the report in history."""
        key = error_report.category.value
        self.error_counts[key] = self.error_counts.get(key, 0) + 1

        self.error_reports.append(error_report)
        if len(self.error_reports) > self.max_error_history:
            self.error_reports = self.error_reports[-self.max_error_history:]

    def get_error_summary(self) -> Dict[str, Any]:
        """Get a summary of recent errors."""
        recent_errors = self.error_reports[-10:]

        return {
            "total_errors": sum(self.error_counts.values()),
            "recent_errors": [
                {
                    "error_id": report.error_id,
                    "timestamp": report.timestamp.isoformat(),
                    "category": report.category.value,
                    "message": report.message,
                }
                for report in recent_errors
            ],
            "error_categories": dict(self.error_counts),
        }

    def clear_error_history(self):
        """Clear error history."""
        self.error_reports.clear()
        self.error_counts.clear()
        self.logger.debug("Error history cleared")

    def shutdown(self):
        """Log the final error summary."""
        summary = self.get_error_summary()
        self.logger.debug(f"Final error summary: {summary['total_errors']} errors, "
                          f"by category: {summary['error_categories']}")
