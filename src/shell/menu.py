"""
Eternal Quest Shell

Interactive menu that gathers input and dispatches to the GoalManager.
"""

import argparse
import logging
from typing import Callable, List, Optional

from goal.errors import QuestError
from goal.models import GoalType
from manager.config import QuestConfig, setup_logging
from manager.goal_manager import GoalManager
from protocol.serializer import LineSerializer


MENU = """Menu Options:
  1. Create New Goal
  2. List Goals
  3. Save Goals
  4. Load Goals
  5. Record Event
  6. Quit"""

GOAL_TYPE_MENU = """The types of Goals are:
  1. Simple Goal
  2. Eternal Goal
  3. Checklist Goal"""

GOAL_TYPE_CHOICES = {
    "1": GoalType.SIMPLE,
    "2": GoalType.ETERNAL,
    "3": GoalType.CHECKLIST,
}


class QuestShell:
    """
    Menu loop for the Eternal Quest program.

    Input and output are injected so the loop can be driven by tests.
    """

    def __init__(
        self,
        manager: GoalManager,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
        default_file: str = "goals.txt",
    ):
        self.manager = manager
        self.input = input_func
        self.output = output
        self.default_file = default_file
        self.logger = logging.getLogger("eternal_quest.shell")

        self._actions = {
            "1": self.create_goal,
            "2": self.list_goals,
            "3": self.save,
            "4": self.load,
            "5": self.record_event,
        }

    def run(self) -> int:
        """Run until the user quits or input ends."""
        while True:
            self.output(f"\nYou have {self.manager.score} points.\n")
            self.output(MENU)

            try:
                choice = self.input("Select a choice from the menu: ").strip()
            except EOFError:
                break

            if choice == "6":
                break

            action = self._actions.get(choice)
            if action is None:
                self.output(f"Unknown choice: {choice}")
                continue

            try:
                action()
            except EOFError:
                break
            except (QuestError, OSError, ValueError) as e:
                self.logger.debug(f"Menu action {choice} failed: {e}")
                self.output(f"Error: {e}")

        self.output("Goodbye!")
        return 0

    def create_goal(self) -> None:
        self.output(GOAL_TYPE_MENU)
        choice = self.input("Which type of goal would you like to create? ").strip()
        goal_type = GOAL_TYPE_CHOICES.get(choice)
        if goal_type is None:
            self.output(f"Unknown goal type: {choice}")
            return

        name = self.input("What is the name of your goal? ").strip()
        description = self.input("What is a short description of it? ").strip()
        points = self._ask_int("What is the amount of points associated with this goal? ")

        target_count = None
        bonus = 0
        if goal_type == GoalType.CHECKLIST:
            target_count = self._ask_int(
                "How many times does this goal need to be accomplished for a bonus? "
            )
            bonus = self._ask_int("What is the bonus for accomplishing it that many times? ")

        self.manager.create_goal(goal_type, name, description, points, target_count, bonus)
        self.output("Goal created!")

    def list_goals(self) -> None:
        listings = self.manager.list_goals()
        if not listings:
            self.output("You have no goals yet.")
            return

        self.output("The goals are:")
        for listing in listings:
            self.output(listing.format())

    def record_event(self) -> None:
        self.list_goals()
        if not len(self.manager):
            return

        index = self._ask_int("Which goal did you accomplish? ")
        result = self.manager.record_event(index)
        self.output(f"Congratulations! {result.message}")

    def save(self) -> None:
        path = self.manager.save(self._ask_file())
        self.output(f"Saved to {path}")

    def load(self) -> None:
        path = self._ask_file()
        count = self.manager.load(path)
        self.output(f"Loaded {count} goals from {path}")

    def _ask_file(self) -> str:
        file_name = self.input(f"What is the filename? [{self.default_file}] ").strip()
        return file_name or self.default_file

    def _ask_int(self, prompt: str) -> int:
        raw = self.input(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"Expected a whole number, got {raw!r}") from None


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = argparse.ArgumentParser(description="Eternal Quest goal tracker")
    parser.add_argument("--config", "-c", help="Path to YAML config file")
    parser.add_argument("--file", "-f", help="Save file to use by default")
    parser.add_argument("--load", "-l", action="store_true", help="Load the save file at startup")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"])

    args = parser.parse_args(argv)

    config = QuestConfig.from_yaml(args.config) if args.config else QuestConfig()
    if args.file:
        config.data_file = args.file
    if args.log_level:
        config.log_level = args.log_level

    logger = setup_logging(config)

    manager = GoalManager(
        serializer=LineSerializer(delimiter=config.delimiter),
        encoding=config.encoding,
    )

    if args.load:
        try:
            manager.load(config.data_file)
        except (QuestError, OSError) as e:
            logger.error(f"Could not load {config.data_file}: {e}")
            return 1

    shell = QuestShell(manager, default_file=config.data_file)
    return shell.run()


if __name__ == "__main__":
    exit(main())
