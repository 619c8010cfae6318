"""Goal Serialization"""

from .serializer import GoalSerializer, LineSerializer, SerializerFactory, DEFAULT_DELIMITER

__all__ = [
    "GoalSerializer",
    "LineSerializer",
    "SerializerFactory",
    "DEFAULT_DELIMITER",
]
