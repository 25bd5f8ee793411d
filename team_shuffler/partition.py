"""Random partitioning of a roster into teams."""

import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


def shuffle(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """Return a uniformly random permutation of ``items``.

    Fisher-Yates over a copy: walk from the last index down to 1 and swap
    each position with a uniformly chosen index in ``[0, i]``. The input is
    left untouched.

    Args:
        items: Sequence to permute
        rng: Random source with a ``randint`` method; the process-wide
            ``random`` module is used when omitted

    Returns:
        New list holding the same elements in random order
    """
    rng = rng or random
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def partition(
    names: Sequence[str],
    team_size: int,
    rng: Optional[random.Random] = None
) -> List[List[str]]:
    """Shuffle ``names`` and cut them into consecutive teams of ``team_size``.

    The last team holds the remainder when the roster does not divide
    evenly; it is never merged into the previous team. Empty input or a
    non-positive team size yields no teams.

    Args:
        names: Participant names
        team_size: Members per team
        rng: Optional random source, see :func:`shuffle`

    Returns:
        List of teams, each a list of names in shuffle order
    """
    if not names or team_size <= 0:
        return []

    shuffled = shuffle(names, rng)
    return [
        shuffled[start:start + team_size]
        for start in range(0, len(shuffled), team_size)
    ]


def team_count(num_names: int, team_size: int) -> int:
    """Number of teams :func:`partition` produces for a roster of this size."""
    if num_names <= 0 or team_size <= 0:
        return 0
    return -(-num_names // team_size)


def member_label(index: int) -> str:
    """Letter label for a member position: 0 -> A, 25 -> Z, 26 -> AA."""
    if index < 0:
        raise ValueError(f"Member index must be non-negative, got {index}")

    label = ""
    index += 1
    while index:
        index, rem = divmod(index - 1, 26)
        label = chr(ord("A") + rem) + label
    return label
