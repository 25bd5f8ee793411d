"""Validation utilities for Team Shuffler."""

from typing import Sequence

MAX_NAME_LENGTH = 100


def validate_names(names: Sequence[str]) -> None:
    """Validate the participant names of a roster.

    Args:
        names: Names to validate, in roster order

    Raises:
        ValueError: If names are missing, blank, too long or repeated
    """
    if not names:
        raise ValueError("No players found in roster")

    seen = set()
    for name in names:
        if not name or not name.strip():
            raise ValueError("Player names cannot be empty or whitespace-only")

        if len(name) > MAX_NAME_LENGTH:
            raise ValueError(
                f"Player name too long (max {MAX_NAME_LENGTH} chars): '{name[:50]}...'"
            )

        if name in seen:
            raise ValueError(f"Duplicate player name: '{name}'")
        seen.add(name)


def validate_roster_size(num_names: int, min_names: int, max_names: int) -> None:
    """Validate that the roster holds an acceptable number of players.

    Raises:
        ValueError: If there are too few or too many players
    """
    if num_names < min_names:
        raise ValueError(f"Please add at least {min_names} players!")

    if num_names > max_names:
        raise ValueError(f"Maximum {max_names} players allowed!")


def validate_team_size(team_size: int, num_names: int, min_team_size: int) -> None:
    """Validate that the team size fits the roster.

    The upper bound follows the team size selector: it never drops below
    ``min_team_size`` even for tiny rosters.

    Args:
        team_size: Requested players per team
        num_names: Number of players in the roster
        min_team_size: Smallest allowed team size

    Raises:
        ValueError: If the team size is out of range
    """
    max_team_size = max(min_team_size, num_names)
    if team_size < min_team_size:
        raise ValueError(
            f"Team size must be at least {min_team_size}, got {team_size}"
        )

    if team_size > max_team_size:
        raise ValueError(
            f"Team size must be at most {max_team_size} for {num_names} players, got {team_size}"
        )
