"""Team generation service for Team Shuffler."""

import random
from typing import Any, Dict, List, Optional, Sequence

from .config import Config
from .partition import partition
from .validators import validate_names, validate_roster_size, validate_team_size


class TeamShuffler:
    """Main class for shuffling a roster into teams."""

    def __init__(self, config: Config):
        """Initialize the team shuffler.

        Args:
            config: Configuration object with team settings
        """
        self.config = config

    def generate(
        self,
        names: Sequence[str],
        team_size: Optional[int] = None,
        rng: Optional[random.Random] = None
    ) -> List[List[str]]:
        """Validate a roster and split it into random teams.

        Args:
            names: Player names, already trimmed
            team_size: Players per team; defaults to the configured size
            rng: Optional random source for reproducible shuffles

        Returns:
            List of teams, each a list of names

        Raises:
            ValueError: If the roster or team size is not acceptable
        """
        if team_size is None:
            team_size = self.config.team_size

        validate_names(names)
        validate_roster_size(len(names), self.config.min_names, self.config.max_names)
        validate_team_size(team_size, len(names), self.config.min_team_size)

        return partition(names, team_size, rng)

    def get_team_summary(self, teams: List[List[str]]) -> Dict[str, Any]:
        """Get a summary of the shuffle results.

        Args:
            teams: Teams as returned by :meth:`generate`

        Returns:
            Dictionary with team statistics
        """
        if not teams:
            return {
                'total_players': 0,
                'team_count': 0,
                'team_sizes': {},
                'average_team_size': 0.0
            }

        team_sizes = {number: len(team) for number, team in enumerate(teams, start=1)}
        total = sum(team_sizes.values())

        return {
            'total_players': total,
            'team_count': len(teams),
            'team_sizes': team_sizes,
            'average_team_size': round(total / len(teams), 2)
        }
