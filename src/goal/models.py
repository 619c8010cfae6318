"""
Goal Models

The three kinds of trackable goal and their scoring rules.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Any

from .errors import ValidationError


class GoalType(Enum):
    """Goal variants, valued by their on-disk type tag"""
    SIMPLE = "SimpleGoal"
    ETERNAL = "EternalGoal"
    CHECKLIST = "ChecklistGoal"


class Goal(ABC):
    """
    Base class for all goals.

    A goal has a name, a description and a point value that is paid out
    when an event is recorded against it. How often it pays, and whether it
    ever completes, is up to the concrete goal.
    """

    goal_type: GoalType

    def __init__(self, name: str, description: str, points: int):
        if not name or not name.strip():
            raise ValidationError("Goal name must not be empty")

        self._name = name
        self._description = description or ""
        self._points = int(points)

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def points(self) -> int:
        return self._points

    @abstractmethod
    def is_complete(self) -> bool:
        """Whether the goal has reached its terminal state"""
        pass

    @abstractmethod
    def record_event(self) -> int:
        """
        Record one event of progress.

        Returns:
            Points earned by this event
        """
        pass

    @abstractmethod
    def get_status(self) -> str:
        """Short completion marker for display"""
        pass

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.goal_type.value,
            "name": self._name,
            "description": self._description,
            "points": self._points,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r}, points={self._points})"


class SimpleGoal(Goal):
    """A goal that is done once and pays out once"""

    goal_type = GoalType.SIMPLE

    def __init__(
        self,
        name: str,
        description: str,
        points: int,
        completed: bool = False,
    ):
        super().__init__(name, description, points)
        self._completed = bool(completed)

    @property
    def completed(self) -> bool:
        return self._completed

    def is_complete(self) -> bool:
        return self._completed

    def record_event(self) -> int:
        if self._completed:
            return 0
        self._completed = True
        return self._points

    def get_status(self) -> str:
        return "[X]" if self._completed else "[ ]"

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["completed"] = self._completed
        return data


class EternalGoal(Goal):
    """A goal that is never finished; every event pays the full points"""

    goal_type = GoalType.ETERNAL

    def is_complete(self) -> bool:
        return False

    def record_event(self) -> int:
        return self._points

    def get_status(self) -> str:
        return "[∞]"


class ChecklistGoal(Goal):
    """
    A goal that must be accomplished a number of times.

    Every event pays the base points. The event that brings the count to
    exactly the target also pays the bonus. Events after completion keep
    counting and keep paying the base points.
    """

    goal_type = GoalType.CHECKLIST

    def __init__(
        self,
        name: str,
        description: str,
        points: int,
        target_count: int,
        bonus: int = 0,
        current_count: int = 0,
    ):
        super().__init__(name, description, points)

        target_count = int(target_count)
        current_count = int(current_count)
        if target_count <= 0:
            raise ValidationError(f"Target count must be positive, got {target_count}")
        if current_count < 0:
            raise ValidationError(f"Current count must not be negative, got {current_count}")

        self._target_count = target_count
        self._bonus = int(bonus)
        self._current_count = current_count

    @property
    def target_count(self) -> int:
        return self._target_count

    @property
    def bonus(self) -> int:
        return self._bonus

    @property
    def current_count(self) -> int:
        return self._current_count

    def is_complete(self) -> bool:
        return self._current_count >= self._target_count

    def record_event(self) -> int:
        self._current_count += 1

        if self._current_count == self._target_count:
            return self._points + self._bonus

        return self._points

    def get_status(self) -> str:
        mark = "[X]" if self.is_complete() else "[ ]"
        return f"{mark} Completed {self._current_count}/{self._target_count}"

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            "target_count": self._target_count,
            "bonus": self._bonus,
            "current_count": self._current_count,
        })
        return data
