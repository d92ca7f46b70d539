"""
Configuration and logging setup for metazelda dungeons.
"""

import logging
from dataclasses import dataclass
from typing import Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass
class DungeonConfig:
    """Configuration for dungeon bookkeeping."""
    strict: bool = False  # Raise on consistency faults instead of logging a warning
    log_overwrites: bool = True  # Warn when add() evicts rooms by coordinate


def setup_logging(level: Union[int, str] = logging.INFO):
    """Configure root logging with the project's format."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
