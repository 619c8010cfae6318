"""
Goal Serializers

Serialize and deserialize goals as single lines of delimited text.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type

from goal.errors import MalformedRecordError, ValidationError
from goal.models import Goal, GoalType, SimpleGoal, EternalGoal, ChecklistGoal


DEFAULT_DELIMITER = "|"


class GoalSerializer(ABC):
    """Abstract base serializer"""

    @abstractmethod
    def serialize(self, goal: Goal) -> str:
        """Serialize goal to a single record"""
        pass

    @abstractmethod
    def deserialize(self, data: str, line_number: Optional[int] = None) -> Goal:
        """Deserialize a single record to a goal"""
        pass


class LineSerializer(GoalSerializer):
    """
    Delimited line format.

    Layouts, after the type tag, name, description and points:
    - SimpleGoal: completed
    - EternalGoal: nothing
    - ChecklistGoal: target count, bonus, current count

    Values are not escaped, so text fields must not contain the delimiter.
    """

    # Type tag to class mapping
    GOAL_CLASSES: Dict[GoalType, Type[Goal]] = {
        GoalType.SIMPLE: SimpleGoal,
        GoalType.ETERNAL: EternalGoal,
        GoalType.CHECKLIST: ChecklistGoal,
    }

    # Total field count per layout, type tag included
    FIELD_COUNTS: Dict[GoalType, int] = {
        GoalType.SIMPLE: 5,
        GoalType.ETERNAL: 4,
        GoalType.CHECKLIST: 7,
    }

    def __init__(self, delimiter: str = DEFAULT_DELIMITER):
        if len(delimiter) != 1 or delimiter in "\r\n":
            raise ValueError(f"Delimiter must be a single non-newline character: {delimiter!r}")
        self.delimiter = delimiter

    def serialize(self, goal: Goal) -> str:
        """
        Serialize goal to a delimited line.

        Args:
            goal: Goal to serialize

        Returns:
            Line without trailing newline

        Raises:
            ValidationError: If a text field contains the delimiter or a line break
        """
        for label, text in (("name", goal.name), ("description", goal.description)):
            self._check_text(label, text)

        fields = [goal.goal_type.value, goal.name, goal.description, str(goal.points)]

        if isinstance(goal, SimpleGoal):
            fields.append("true" if goal.completed else "false")
        elif isinstance(goal, ChecklistGoal):
            fields.extend([
                str(goal.target_count),
                str(goal.bonus),
                str(goal.current_count),
            ])

        return self.delimiter.join(fields)

    def deserialize(self, data: str, line_number: Optional[int] = None) -> Goal:
        """
        Deserialize a delimited line to a goal.

        Args:
            data: A single record
            line_number: Position in the source file, for error messages

        Returns:
            Goal with its persisted state restored

        Raises:
            MalformedRecordError: If the record does not match any layout
        """
        line = data.rstrip("\r\n")
        fields = line.split(self.delimiter)

        try:
            goal_type = GoalType(fields[0])
        except ValueError:
            raise MalformedRecordError(
                f"Unknown goal type: {fields[0]!r}", line, line_number
            ) from None

        expected = self.FIELD_COUNTS[goal_type]
        if len(fields) != expected:
            raise MalformedRecordError(
                f"{goal_type.value} expects {expected} fields, got {len(fields)}",
                line,
                line_number,
            )

        try:
            return self._build(goal_type, fields)
        except (ValueError, ValidationError) as e:
            raise MalformedRecordError(str(e), line, line_number) from e

    def _build(self, goal_type: GoalType, fields: List[str]) -> Goal:
        name, description = fields[1], fields[2]
        points = self._parse_int("points", fields[3])
        goal_class = self.GOAL_CLASSES[goal_type]

        if goal_type == GoalType.SIMPLE:
            return goal_class(
                name,
                description,
                points,
                completed=self._parse_bool("completed", fields[4]),
            )

        if goal_type == GoalType.CHECKLIST:
            return goal_class(
                name,
                description,
                points,
                target_count=self._parse_int("target count", fields[4]),
                bonus=self._parse_int("bonus", fields[5]),
                current_count=self._parse_int("current count", fields[6]),
            )

        return goal_class(name, description, points)

    def _check_text(self, label: str, text: str) -> None:
        if self.delimiter in text:
            raise ValidationError(
                f"Goal {label} must not contain {self.delimiter!r}: {text!r}"
            )
        if "\n" in text or "\r" in text:
            raise ValidationError(f"Goal {label} must not contain line breaks: {text!r}")

    @staticmethod
    def _parse_int(label: str, value: str) -> int:
        try:
            return int(value.strip())
        except ValueError:
            raise ValueError(f"Invalid {label}: {value!r}") from None

    @staticmethod
    def _parse_bool(label: str, value: str) -> bool:
        # Older files wrote "True"/"False"
        normalized = value.strip().lower()
        if normalized == "true":
            return True
        if normalized == "false":
            return False
        raise ValueError(f"Invalid {label}: {value!r}")


class SerializerFactory:
    """Factory for creating serializers"""

    @staticmethod
    def create(format: str = "line", delimiter: str = DEFAULT_DELIMITER) -> GoalSerializer:
        """
        Create a serializer.

        Args:
            format: Only "line" is supported
            delimiter: Field delimiter for the line format

        Returns:
            GoalSerializer instance
        """
        if format.lower() in ("line", "text", "txt"):
            return LineSerializer(delimiter=delimiter)
        raise ValueError(f"Unknown format: {format}")
