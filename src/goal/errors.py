"""
Quest Errors

Exception hierarchy raised by the goal model, the codec and the manager.
"""

from typing import Optional


class QuestError(Exception):
    """Base class for all Eternal Quest errors"""

    def __init__(self, message: str = "Eternal Quest error."):
        super().__init__(message)


class ValidationError(QuestError):
    """Raised when a goal is constructed or encoded with invalid values"""

    def __init__(self, message: str = "Invalid goal."):
        super().__init__(message)


class OutOfRangeError(QuestError):
    """Raised when an event is recorded against a goal number that does not exist"""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        if size:
            message = f"Goal number {index} is out of range (1-{size})"
        else:
            message = f"Goal number {index} is out of range (no goals defined)"
        super().__init__(message)


class MalformedRecordError(QuestError):
    """Raised when a persisted line does not match any goal layout"""

    def __init__(
        self,
        message: str,
        line: str = "",
        line_number: Optional[int] = None,
    ):
        self.line = line
        self.line_number = line_number
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)
