"""
Result objects returned by every component entry point.

Components never raise to their caller. They return an ``OperationResult``
holding the primary path, a success flag and the diagnostics raised while
running, each of which is also sent to the package logger.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class MessageLevel(Enum):
    """Severity of a diagnostic message."""
    ERROR = 'error'
    WARNING = 'warning'
    REMARK = 'remark'


_LOG_LEVELS = {
    MessageLevel.ERROR: logging.ERROR,
    MessageLevel.WARNING: logging.WARNING,
    MessageLevel.REMARK: logging.INFO,
}


@dataclass
class Message:
    level: MessageLevel
    text: str

    def __str__(self) -> str:
        return f"[{self.level.value}] {self.text}"


@dataclass
class OperationResult:
    """Outcome of one component invocation."""

    path: str = ''
    success: bool = False
    messages: List[Message] = field(default_factory=list)
    logger: Optional[logging.Logger] = field(default=None, repr=False, compare=False)

    def add(self, level: MessageLevel, text: str) -> None:
        self.messages.append(Message(level, text))
        if self.logger is not None:
            self.logger.log(_LOG_LEVELS[level], text)

    def error(self, text: str) -> None:
        self.add(MessageLevel.ERROR, text)

    def warning(self, text: str) -> None:
        self.add(MessageLevel.WARNING, text)

    def remark(self, text: str) -> None:
        self.add(MessageLevel.REMARK, text)

    def fail(self, text: str) -> 'OperationResult':
        """Record an error and reset the outputs to their failure values."""
        self.error(text)
        self.path = ''
        self.success = False
        return self

    def messages_at(self, level: MessageLevel) -> List[str]:
        return [m.text for m in self.messages if m.level is level]

    @property
    def errors(self) -> List[str]:
        return self.messages_at(MessageLevel.ERROR)

    @property
    def warnings(self) -> List[str]:
        return self.messages_at(MessageLevel.WARNING)

    @property
    def remarks(self) -> List[str]:
        return self.messages_at(MessageLevel.REMARK)


@dataclass
class WorkingCopyResult(OperationResult):
    """Provisioner outcome; also echoes the template path."""

    template_path: str = ''
