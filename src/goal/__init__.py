"""Goal Models and Errors"""

from .errors import QuestError, ValidationError, OutOfRangeError, MalformedRecordError
from .models import Goal, GoalType, SimpleGoal, EternalGoal, ChecklistGoal

__all__ = [
    "QuestError",
    "ValidationError",
    "OutOfRangeError",
    "MalformedRecordError",
    "Goal",
    "GoalType",
    "SimpleGoal",
    "EternalGoal",
    "ChecklistGoal",
]
