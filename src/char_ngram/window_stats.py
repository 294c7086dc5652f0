"""Per-window observation records.

A ``WindowStats`` holds one ``CharData`` record for every distinct character
seen right after a given window. Records are kept newest-first: a character
seen for the first time is inserted at the front, and that order is the one
sampling walks through.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np


@dataclass
class CharData:
    """Occurrence count and (after finalize) probabilities of one character."""

    character: str
    count: int = 1
    probability: float = 0.0
    cumulative_probability: float = 0.0

    def __str__(self) -> str:
        return f"({self.character} {self.count} {self.probability} {self.cumulative_probability})"


class WindowStats:
    """Ordered set of ``CharData`` records for a single window."""

    def __init__(self) -> None:
        self._records: list[CharData] = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CharData]:
        return iter(self._records)

    def __getitem__(self, index: int) -> CharData:
        if not 0 <= index < len(self._records):
            raise IndexError(f"index {index} out of range for {len(self._records)} records")
        return self._records[index]

    def __str__(self) -> str:
        return "(" + " ".join(str(cd) for cd in self._records) + ")"

    def __repr__(self) -> str:
        return f"WindowStats{self}"

    @property
    def total_count(self) -> int:
        return sum(cd.count for cd in self._records)

    def first(self) -> CharData | None:
        return self._records[0] if self._records else None

    def index_of(self, character: str) -> int:
        """Position of the record for ``character``, or -1 if there is none."""

        for i, cd in enumerate(self._records):
            if cd.character == character:
                return i
        return -1

    def find(self, character: str) -> CharData | None:
        i = self.index_of(character)
        return self._records[i] if i >= 0 else None

    def update(self, character: str) -> None:
        """Count one more occurrence of ``character``.

        Unknown characters get a fresh record (count 1) at the front.
        """

        cd = self.find(character)
        if cd is not None:
            cd.count += 1
            return
        self._records.insert(0, CharData(character))

    def remove(self, character: str) -> bool:
        i = self.index_of(character)
        if i < 0:
            return False
        del self._records[i]
        return True

    def finalize(self) -> None:
        """Set probability and cumulative probability of every record.

        Values are recomputed from the counts, so repeated calls agree.
        """

        if not self._records:
            raise ValueError("cannot finalize a WindowStats with no records")

        total = self.total_count
        running = 0.0
        for cd in self._records:
            cd.probability = cd.count / total
            running += cd.probability
            cd.cumulative_probability = running

    def to_list(self) -> list[CharData]:
        return list(self._records)

    def iter_from(self, index: int) -> Iterator[CharData]:
        # starting at len() is allowed and yields nothing
        if not 0 <= index <= len(self._records):
            raise IndexError(f"index {index} out of range for {len(self._records)} records")
        return iter(self._records[index:])

    def cumulative_probabilities(self) -> np.ndarray:
        return np.fromiter(
            (cd.cumulative_probability for cd in self._records),
            dtype=np.float64,
            count=len(self._records),
        )
