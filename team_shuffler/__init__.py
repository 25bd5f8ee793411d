"""Team Shuffler - A tool to split a roster into random teams."""

__version__ = "0.1.0"

from .config import Config
from .partition import partition, shuffle
from .roster import Roster
from .shuffler import TeamShuffler

__all__ = ["Config", "Roster", "TeamShuffler", "partition", "shuffle"]
