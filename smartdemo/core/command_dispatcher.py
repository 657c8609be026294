#!/usr/bin/env python3
"""
SmartDemo Command Dispatcher

Common base for the line dispatchers: result type, command history
and execution statistics.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Any

from smartdemo.utils.error_handler import ErrorHandler, ErrorCategory


@dataclass
class ExecutionResult:
    """Result of command execution."""
    success: bool
    message: str
    data: Optional[Dict[str, Any]] = None
    error: Optional[ErrorCategory] = None
    terminate: bool = False
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class CommandHistory:
    """Entry in command history."""
    line: str
    result: ExecutionResult
    timestamp: datetime = field(default_factory=datetime.now)


class CommandDispatcher:
    """Routes one input line to an action and records the outcome.

    Subclasses implement ``menu_text`` and ``_dispatch``.
    """

    exit_command = ""

    def __init__(self, config, logger: logging.Logger, error_handler: ErrorHandler):
        self.config = config
        self.logger = logger
        self.error_handler = error_handler

        # Command history
        self.command_history: List[CommandHistory] = []
        self.max_history_size = config.console.history_size

        # Execution statistics
        self.commands_executed = 0
        self.commands_failed = 0
        self.last_command_time: Optional[datetime] = None

    def initialize(self) -> bool:
        """Prepare the dispatcher's object graph."""
        return True

    def menu_text(self) -> str:
        raise NotImplementedError

    def dispatch_command(self, line: str) -> ExecutionResult:
        """Dispatch one stripped input line."""
        self.logger.debug(f"Dispatching command: {line!r}")

        if self._is_exit(line):
            result = ExecutionResult(success=True, message="Exit requested", terminate=True)
        else:
            result = self._dispatch(line)

        self._record_command(line, result)

        if result.success:
            self.commands_executed += 1
        else:
            self.commands_failed += 1
        self.last_command_time = datetime.now()

        return result

    def _is_exit(self, line: str) -> bool:
        return line == self.exit_command

    def _dispatch(self, line: str) -> ExecutionResult:
        raise NotImplementedError

    def _reject(self, category: ErrorCategory, message: str, **context) -> ExecutionResult:
        """Report a rejected line and build the matching result."""
        self.error_handler.report(category, message, context=context)
        return ExecutionResult(success=False, message=message, error=category)

    def _record_command(self, line: str, result: ExecutionResult):
        """Record command in history."""
        self.command_history.append(CommandHistory(line=line, result=result))

        # Limit history size
        if len(self.command_history) > self.max_history_size:
            self.command_history = self.command_history[-self.max_history_size:]

    def get_command_history(self, limit: int = 10) -> List[CommandHistory]:
        """Get recent command history."""
        return self.command_history[-limit:] if limit else self.command_history.copy()

    def get_statistics(self) -> Dict[str, Any]:
        """Get dispatcher statistics."""
        total = self.commands_executed + self.commands_failed
        return {
            "total_commands": total,
            "successful_commands": self.commands_executed,
            "failed_commands": self.commands_failed,
            "success_rate": self.commands_executed / max(1, total),
            "history_size": len(self.command_history),
            "last_command_time": self.last_command_time.isoformat() if self.last_command_time else None
        }

    def clear_history(self):
        """Clear command history."""
        self.command_history.clear()
        self.logger.debug("Command history cleared")

    def shutdown(self):
        """Log statistics and drop history."""
        self.logger.debug(f"Dispatcher statistics: {self.get_statistics()}")
        self.clear_history()
