"""Goal Manager and Configuration"""

from .goal_manager import GoalManager, GoalListing, EventResult
from .config import QuestConfig, setup_logging

__all__ = [
    "GoalManager",
    "GoalListing",
    "EventResult",
    "QuestConfig",
    "setup_logging",
]
