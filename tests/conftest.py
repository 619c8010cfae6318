"""
Pytest configuration and shared fixtures
"""

import pytest
import tempfile
from pathlib import Path

# Add src to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from goal.models import GoalType, SimpleGoal, EternalGoal, ChecklistGoal
from manager.goal_manager import GoalManager
from protocol.serializer import LineSerializer


@pytest.fixture
def simple_goal():
    """Create an unfinished simple goal"""
    return SimpleGoal("Run a marathon", "Finish the city marathon", 1000)


@pytest.fixture
def eternal_goal():
    """Create an eternal goal"""
    return EternalGoal("Read scriptures", "Study every day", 100)


@pytest.fixture
def checklist_goal():
    """Create a checklist goal with target 3 and bonus 500"""
    return ChecklistGoal("Run 10 times", "Go for a run", 50, target_count=3, bonus=500)


@pytest.fixture
def serializer():
    """Create the default line serializer"""
    return LineSerializer()


@pytest.fixture
def manager():
    """Create an empty goal manager"""
    return GoalManager()


@pytest.fixture
def populated_manager():
    """Create a manager with one goal of each kind and some progress"""
    manager = GoalManager()
    manager.create_goal(GoalType.SIMPLE, "Run a marathon", "Finish the city marathon", 1000)
    manager.create_goal(GoalType.ETERNAL, "Read scriptures", "Study every day", 100)
    manager.create_goal(
        GoalType.CHECKLIST, "Attend the temple", "Go regularly", 50,
        target_count=10, bonus=500,
    )
    manager.record_event(2)
    manager.record_event(3)
    manager.record_event(3)
    return manager


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def save_file(temp_dir):
    """Path for a save file inside the temporary directory"""
    return str(Path(temp_dir) / "goals.txt")


@pytest.fixture
def valid_save_file(temp_dir):
    """Create a well-formed save file"""
    content = (
        "650\n"
        "SimpleGoal|Give a talk|Speak in church|100|true\n"
        "EternalGoal|Read scriptures|Study every day|100\n"
        "ChecklistGoal|Run 10 times||50|3|500|3\n"
    )
    path = Path(temp_dir) / "valid.txt"
    path.write_text(content, encoding="utf-8")
    return str(path)


@pytest.fixture
def malformed_save_file(temp_dir):
    """Create a save file whose last record has an unknown type"""
    content = (
        "300\n"
        "SimpleGoal|Give a talk|Speak in church|100|false\n"
        "MysteryGoal|Something|Unknown|10\n"
    )
    path = Path(temp_dir) / "malformed.txt"
    path.write_text(content, encoding="utf-8")
    return str(path)
