"""
Tests for GoalManager

Tests:
1. test_create_goal_each_type
2. test_list_goals_in_order
3. test_record_event_updates_score
4. test_record_event_out_of_range
5. test_save_format
6. test_load_replaces_state
7. test_load_malformed_keeps_state
"""

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from goal.errors import MalformedRecordError, OutOfRangeError, ValidationError
from goal.models import GoalType, SimpleGoal, EternalGoal, ChecklistGoal
from manager.goal_manager import GoalManager, GoalListing


class TestGoalCreation:
    """Tests for creating goals"""

    def test_create_goal_each_type(self, manager):
        """Test each type creates the matching class"""
        simple = manager.create_goal(GoalType.SIMPLE, "A", "", 10)
        eternal = manager.create_goal("EternalGoal", "B", "", 20)
        checklist = manager.create_goal(GoalType.CHECKLIST, "C", "", 30, target_count=4, bonus=100)

        assert isinstance(simple, SimpleGoal)
        assert isinstance(eternal, EternalGoal)
        assert isinstance(checklist, ChecklistGoal)
        assert checklist.target_count == 4
        assert checklist.bonus == 100
        assert len(manager) == 3
        assert manager.score == 0

    def test_create_goal_propagates_validation(self, manager):
        """Test invalid arguments raise and add nothing"""
        with pytest.raises(ValidationError):
            manager.create_goal(GoalType.SIMPLE, "", "", 10)
        with pytest.raises(ValidationError):
            manager.create_goal(GoalType.CHECKLIST, "C", "", 10, target_count=0)

        assert len(manager) == 0

    def test_create_checklist_requires_target(self, manager):
        """Test checklist without a target is rejected"""
        with pytest.raises(ValidationError, match="target count"):
            manager.create_goal(GoalType.CHECKLIST, "C", "", 10)

    def test_create_unknown_type(self, manager):
        """Test unknown type tags are rejected"""
        with pytest.raises(ValidationError, match="Unknown goal type"):
            manager.create_goal("WeeklyGoal", "W", "", 10)


class TestGoalListing:
    """Tests for listing goals"""

    def test_list_goals_in_order(self, populated_manager):
        """Test listing keeps insertion order, numbered from 1"""
        listings = populated_manager.list_goals()

        assert [l.index for l in listings] == [1, 2, 3]
        assert [l.name for l in listings] == [
            "Run a marathon", "Read scriptures", "Attend the temple",
        ]
        assert listings[0].status == "[ ]"
        assert listings[1].status == "[∞]"
        assert listings[2].status == "[ ] Completed 2/10"

    def test_listing_format(self):
        """Test display format of a listing row"""
        listing = GoalListing(1, "[X]", "Give a talk", "In church")
        assert listing.format() == "1. [X] Give a talk (In church)"

    def test_list_empty(self, manager):
        assert manager.list_goals() == []


class TestRecordEvent:
    """Tests for recording events"""

    def test_record_event_updates_score(self, manager):
        """Test points are added to the score"""
        manager.create_goal(GoalType.ETERNAL, "Pray", "", 5)

        first = manager.record_event(1)
        second = manager.record_event(1)

        assert (first.points_earned, first.total_score) == (5, 5)
        assert (second.points_earned, second.total_score) == (5, 10)
        assert manager.score == 10

    def test_record_event_message(self, manager):
        manager.create_goal(GoalType.SIMPLE, "Read", "", 100)
        result = manager.record_event(1)
        assert result.message == "You earned 100 points! Total score: 100"

    @pytest.mark.parametrize("index", [0, 4, -1])
    def test_record_event_out_of_range(self, populated_manager, index):
        """Test indexes outside 1..n raise OutOfRangeError"""
        score = populated_manager.score

        with pytest.raises(OutOfRangeError) as exc_info:
            populated_manager.record_event(index)

        assert exc_info.value.index == index
        assert exc_info.value.size == 3
        assert populated_manager.score == score

    def test_record_event_no_goals(self, manager):
        with pytest.raises(OutOfRangeError, match="no goals"):
            manager.record_event(1)


class TestPersistence:
    """Tests for save and load"""

    def test_save_format(self, populated_manager, save_file):
        """Test score line followed by one line per goal"""
        path = populated_manager.save(save_file)

        assert Path(path).read_text(encoding="utf-8") == (
            "200\n"
            "SimpleGoal|Run a marathon|Finish the city marathon|1000|false\n"
            "EternalGoal|Read scriptures|Study every day|100\n"
            "ChecklistGoal|Attend the temple|Go regularly|50|10|500|2\n"
        )

    def test_save_leaves_no_temp_files(self, populated_manager, temp_dir, save_file):
        populated_manager.save(save_file)
        assert sorted(p.name for p in Path(temp_dir).iterdir()) == ["goals.txt"]

    def test_save_unencodable_keeps_old_file(self, manager, save_file):
        """Test a failed save does not touch the existing file"""
        Path(save_file).write_text("42\n", encoding="utf-8")
        manager.create_goal(GoalType.SIMPLE, "Bad|name", "", 10)

        with pytest.raises(ValidationError):
            manager.save(save_file)

        assert Path(save_file).read_text(encoding="utf-8") == "42\n"

    def test_save_to_missing_directory(self, manager, temp_dir):
        """Test I/O failures propagate"""
        with pytest.raises(OSError):
            manager.save(str(Path(temp_dir) / "missing" / "goals.txt"))

    def test_load_replaces_state(self, populated_manager, valid_save_file):
        """Test load replaces score and goals"""
        count = populated_manager.load(valid_save_file)

        assert count == 3
        assert populated_manager.score == 650
        goals = populated_manager.goals
        assert goals[0].is_complete()
        assert isinstance(goals[1], EternalGoal)
        assert goals[2].current_count == 3

    def test_load_does_not_recompute_score(self, manager, temp_dir):
        """Test the persisted score is taken verbatim"""
        path = Path(temp_dir) / "odd.txt"
        path.write_text("7\nSimpleGoal|A||100|true\n", encoding="utf-8")

        manager.load(str(path))
        assert manager.score == 7

    def test_load_malformed_keeps_state(self, populated_manager, malformed_save_file):
        """Test a failed load leaves the manager untouched"""
        before_score = populated_manager.score
        before = [g.to_dict() for g in populated_manager.goals]

        with pytest.raises(MalformedRecordError) as exc_info:
            populated_manager.load(malformed_save_file)

        assert exc_info.value.line_number == 3
        assert populated_manager.score == before_score
        assert [g.to_dict() for g in populated_manager.goals] == before

    @pytest.mark.parametrize("content", ["", "lots\n", "\nEternalGoal|A||1\n"])
    def test_load_bad_score_line(self, manager, temp_dir, content):
        """Test missing or invalid score lines are rejected"""
        path = Path(temp_dir) / "bad.txt"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(MalformedRecordError):
            manager.load(str(path))

    def test_load_missing_file(self, manager, temp_dir):
        with pytest.raises(OSError):
            manager.load(str(Path(temp_dir) / "nope.txt"))

    def test_load_skips_blank_lines(self, manager, temp_dir):
        path = Path(temp_dir) / "blank.txt"
        path.write_text("10\n\nEternalGoal|A||1\n\n", encoding="utf-8")

        assert manager.load(str(path)) == 1

    def test_save_load_round_trip(self, populated_manager, save_file):
        """Test a fresh manager restores the same state"""
        populated_manager.save(save_file)

        restored = GoalManager()
        restored.load(save_file)

        assert restored.score == populated_manager.score
        assert [g.to_dict() for g in restored.goals] == [
            g.to_dict() for g in populated_manager.goals
        ]
