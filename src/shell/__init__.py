"""Interactive Shell"""

from .menu import QuestShell, main

__all__ = [
    "QuestShell",
    "main",
]
