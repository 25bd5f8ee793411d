"""Roster collection for Team Shuffler."""

import re
from pathlib import Path
from typing import Iterator, List, Tuple

import pandas as pd

SEPARATOR_RE = re.compile(r"[,\n]")


def split_names(text: str) -> List[str]:
    """Split comma or newline separated text into trimmed, non-blank names."""
    return [name.strip() for name in SEPARATOR_RE.split(text) if name.strip()]


def load_names_file(names_file: Path) -> List[str]:
    """Read player names from a file.

    CSV files are read with pandas, using a ``name`` column when there is one.
    Otherwise the file is taken to have no header row and the first column
    holds the names. Cells are kept verbatim, so players called ``NA`` or
    ``None`` survive. Any other file is treated like pasted
    text: names separated by commas and/or newlines.

    Args:
        names_file: Path to the names file

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the CSV file is empty or unreadable
    """
    if not names_file.exists():
        raise FileNotFoundError(f"Names file not found: {names_file}")

    if names_file.suffix.lower() != ".csv":
        with open(names_file, "r", encoding="utf-8") as f:
            return split_names(f.read())

    read_options = {"dtype": str, "keep_default_na": False, "na_filter": False}
    try:
        df = pd.read_csv(names_file, **read_options)
        columns = {str(column).strip().lower(): column for column in df.columns}
        if "name" in columns:
            column = columns["name"]
        else:
            df = pd.read_csv(names_file, header=None, **read_options)
            column = df.columns[0]
    except pd.errors.EmptyDataError:
        raise ValueError("Names CSV file is empty")
    except Exception as e:
        raise ValueError(f"Failed to read CSV file: {e}")

    return [name.strip() for name in df[column] if name.strip()]


class Roster:
    """Ordered, duplicate-free list of player names for one shuffle."""

    def __init__(self, max_names: int = 30):
        self.max_names = max_names
        self._names: List[str] = []

    @property
    def names(self) -> List[str]:
        return list(self._names)

    @property
    def is_full(self) -> bool:
        return len(self._names) >= self.max_names

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._names))

    def __contains__(self, name: str) -> bool:
        return name in self._names

    def add(self, name: str) -> bool:
        """Add a single name.

        Blank input is ignored.

        Returns:
            True if the name was added, False if it was blank

        Raises:
            ValueError: If the roster is full or the name already exists
        """
        trimmed = name.strip()
        if not trimmed:
            return False
        if self.is_full:
            raise ValueError(f"Maximum {self.max_names} players allowed!")
        if trimmed in self._names:
            raise ValueError(f"'{trimmed}' already exists!")

        self._names.append(trimmed)
        return True

    def add_bulk(self, text: str) -> Tuple[List[str], int]:
        """Add names pasted as comma or newline separated text.

        Repeats within ``text`` and names already on the roster are dropped.
        Only as many new names as the roster has room for are added; the rest
        are reported back so the caller can warn about them.

        Returns:
            Tuple of (names added, number of new names cut by the limit)
        """
        new_names = [
            name for name in dict.fromkeys(split_names(text))
            if name not in self._names
        ]
        remaining = max(0, self.max_names - len(self._names))
        to_add = new_names[:remaining]
        self._names.extend(to_add)
        return to_add, len(new_names) - len(to_add)

    def remove(self, index: int) -> str:
        """Remove and return the name at ``index``."""
        return self._names.pop(index)

    def clear(self) -> None:
        self._names.clear()
