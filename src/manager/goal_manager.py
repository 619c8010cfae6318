"""
Goal Manager

Owns the ordered list of goals and the running score, and saves/loads
both to a flat text file.
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

from goal.errors import MalformedRecordError, OutOfRangeError, ValidationError
from goal.models import Goal, GoalType, SimpleGoal, EternalGoal, ChecklistGoal
from protocol.serializer import GoalSerializer, LineSerializer


@dataclass(frozen=True)
class GoalListing:
    """One row of the goal list"""
    index: int
    status: str
    name: str
    description: str

    def format(self) -> str:
        return f"{self.index}. {self.status} {self.name} ({self.description})"


@dataclass(frozen=True)
class EventResult:
    """Outcome of recording an event"""
    goal: Goal
    points_earned: int
    total_score: int

    @property
    def message(self) -> str:
        return f"You earned {self.points_earned} points! Total score: {self.total_score}"


class GoalManager:
    """
    Manages goals and the player's score.

    Goals keep their insertion order. The score only grows through
    record_event, or is replaced as a whole by load.
    """

    def __init__(
        self,
        serializer: Optional[GoalSerializer] = None,
        encoding: str = "utf-8",
    ):
        """
        Initialize manager.

        Args:
            serializer: Codec for goal records (pipe-delimited lines by default)
            encoding: Text encoding of save files
        """
        self.serializer = serializer or LineSerializer()
        self.encoding = encoding
        self.logger = logging.getLogger("eternal_quest.manager")

        self._goals: List[Goal] = []
        self._score = 0

    @property
    def score(self) -> int:
        return self._score

    @property
    def goals(self) -> Tuple[Goal, ...]:
        return tuple(self._goals)

    def __len__(self) -> int:
        return len(self._goals)

    def create_goal(
        self,
        goal_type: Union[GoalType, str],
        name: str,
        description: str,
        points: int,
        target_count: Optional[int] = None,
        bonus: int = 0,
    ) -> Goal:
        """
        Create a goal and append it to the list.

        Args:
            goal_type: GoalType or its type tag ("SimpleGoal", ...)
            name: Goal name
            description: Goal description
            points: Points per event
            target_count: Required events (checklist goals only)
            bonus: Extra points on completion (checklist goals only)

        Returns:
            The created goal

        Raises:
            ValidationError: If the type is unknown or the arguments are invalid
        """
        if not isinstance(goal_type, GoalType):
            try:
                goal_type = GoalType(goal_type)
            except ValueError:
                raise ValidationError(f"Unknown goal type: {goal_type!r}") from None

        if goal_type == GoalType.SIMPLE:
            goal = SimpleGoal(name, description, points)
        elif goal_type == GoalType.ETERNAL:
            goal = EternalGoal(name, description, points)
        else:
            if target_count is None:
                raise ValidationError("Checklist goals need a target count")
            goal = ChecklistGoal(name, description, points, target_count, bonus)

        self._goals.append(goal)
        self.logger.info(f"Created {goal_type.value}: {goal.name}")
        return goal

    def list_goals(self) -> List[GoalListing]:
        """List goals in display order, numbered from 1."""
        return [
            GoalListing(
                index=i,
                status=goal.get_status(),
                name=goal.name,
                description=goal.description,
            )
            for i, goal in enumerate(self._goals, start=1)
        ]

    def get_goal(self, index: int) -> Goal:
        """
        Get a goal by its 1-based number.

        Raises:
            OutOfRangeError: If no goal has that number
        """
        if not 1 <= index <= len(self._goals):
            raise OutOfRangeError(index, len(self._goals))
        return self._goals[index - 1]

    def record_event(self, index: int) -> EventResult:
        """
        Record an event against a goal.

        Args:
            index: 1-based goal number

        Returns:
            EventResult with the points earned and the new score

        Raises:
            OutOfRangeError: If no goal has that number
        """
        goal = self.get_goal(index)
        points = goal.record_event()
        self._score += points

        self.logger.debug(f"Event on {goal.name}: +{points} (score {self._score})")
        return EventResult(goal=goal, points_earned=points, total_score=self._score)

    def save(self, destination: Union[str, Path]) -> str:
        """
        Save score and goals to a file.

        The file is replaced only once the full content has been written.

        Args:
            destination: Path of the save file

        Returns:
            Path where saved

        Raises:
            ValidationError: If a goal cannot be encoded
            OSError: If the file cannot be written
        """
        path = Path(destination)
        lines = [str(self._score)]
        lines.extend(self.serializer.serialize(goal) for goal in self._goals)
        content = "\n".join(lines) + "\n"

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent)
        )
        try:
            with os.fdopen(fd, "w", encoding=self.encoding, newline="\n") as f:
                f.write(content)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

        self.logger.info(f"Saved {len(self._goals)} goals (score {self._score}) to {path}")
        return str(path)

    def load(self, source: Union[str, Path]) -> int:
        """
        Load score and goals from a file, replacing the current state.

        Nothing is replaced unless every line decodes.

        Args:
            source: Path of the save file

        Returns:
            Number of goals loaded

        Raises:
            MalformedRecordError: If the file content is invalid
            OSError: If the file cannot be read
        """
        path = Path(source)
        with open(path, "r", encoding=self.encoding) as f:
            lines = f.read().splitlines()

        try:
            score, goals = self._decode(lines)
        except MalformedRecordError as e:
            self.logger.warning(f"Rejected {path}: {e}")
            raise

        self._score = score
        self._goals = goals

        self.logger.info(f"Loaded {len(goals)} goals (score {score}) from {path}")
        return len(goals)

    def _decode(self, lines: List[str]) -> Tuple[int, List[Goal]]:
        if not lines or not lines[0].strip():
            raise MalformedRecordError("Missing score line", "", 1)

        try:
            score = int(lines[0].strip())
        except ValueError:
            raise MalformedRecordError(
                f"Invalid score: {lines[0]!r}", lines[0], 1
            ) from None

        goals = [
            self.serializer.deserialize(line, line_number=number)
            for number, line in enumerate(lines[1:], start=2)
            if line.strip()
        ]
        return score, goals
