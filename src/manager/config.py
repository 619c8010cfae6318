"""
Quest Configuration

Settings for the goal manager and the interactive shell, plus logging setup.
"""

import logging
from dataclasses import dataclass, fields
from typing import Dict, Any, Optional

import yaml

from protocol.serializer import DEFAULT_DELIMITER


LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"


@dataclass
class QuestConfig:
    """Configuration for Eternal Quest"""
    data_file: str = "goals.txt"
    delimiter: str = DEFAULT_DELIMITER
    encoding: str = "utf-8"

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    def __post_init__(self):
        if len(self.delimiter) != 1 or self.delimiter in "\r\n":
            raise ValueError(f"Delimiter must be a single non-newline character: {self.delimiter!r}")
        if not isinstance(getattr(logging, self.log_level.upper(), None), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "data_file": self.data_file,
            "delimiter": self.delimiter,
            "encoding": self.encoding,
            "log_level": self.log_level,
            "log_file": self.log_file,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuestConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: str) -> "QuestConfig":
        """Load config from YAML file"""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data.get("eternal_quest", data))


def setup_logging(config: QuestConfig) -> logging.Logger:
    """
    Configure the "eternal_quest" logger.

    Args:
        config: Source of level and optional log file

    Returns:
        The configured logger
    """
    logger = logging.getLogger("eternal_quest")
    logger.setLevel(getattr(logging, config.log_level.upper()))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    return logger
