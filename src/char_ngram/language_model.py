"""Character-level n-gram language model.

The model maps every window of ``window_length`` characters seen in the
training text to the ``WindowStats`` of the characters that followed it, and
generates text by repeatedly sampling from those distributions.

Usage:
    model = LanguageModel(3, random_state=20).train("some training text")
    model.generate("som", 40)
"""

from __future__ import annotations

import logging
from itertools import islice
from numbers import Integral
from types import MappingProxyType
from typing import Iterable, Mapping

import numpy as np
import pandas as pd
from sklearn.utils import check_random_state

from .window_stats import WindowStats

logger = logging.getLogger(__name__)


def _make_rng(random_state) -> np.random.RandomState:
    # check_random_state(None) hands back numpy's global RandomState; each
    # unseeded model gets its own instead.
    if random_state is None:
        return np.random.RandomState()
    return check_random_state(random_state)


class LanguageModel:
    """
    Learns next-character distributions over fixed-length windows.

    Attributes:
        window_length: Number of preceding characters a prediction depends on
        char_data_map: Read-only view of window -> WindowStats, in the order
            windows were first seen during training
    """

    def __init__(self, window_length: int, random_state=None):
        """
        Initialize an untrained model.

        Args:
            window_length: Positive window length
            random_state: Seed (int), ``numpy.random.RandomState`` or None.
                The same seed gives the same generated text; None draws a
                fresh, unpredictable generator.
        """
        if isinstance(window_length, bool) or not isinstance(window_length, Integral) or window_length < 1:
            raise ValueError(f"window_length must be a positive integer, got {window_length!r}")

        self._window_length = int(window_length)
        self._rng = _make_rng(random_state)
        self._char_data_map: dict[str, WindowStats] = {}

    @property
    def window_length(self) -> int:
        return self._window_length

    @property
    def char_data_map(self) -> Mapping[str, WindowStats]:
        return MappingProxyType(self._char_data_map)

    def __len__(self) -> int:
        return len(self._char_data_map)

    def __contains__(self, window: object) -> bool:
        return window in self._char_data_map

    def get_stats(self, window: str) -> WindowStats | None:
        return self._char_data_map.get(window)

    def train(self, source: Iterable[str]) -> "LanguageModel":
        """
        Count window/next-character pairs over a character source.

        The source is consumed once. Calling ``train`` again adds to the
        existing counts instead of replacing them.

        Args:
            source: Iterable of single characters (a ``str`` works)

        Returns:
            The model itself
        """
        chars = iter(source)
        window = "".join(islice(chars, self._window_length))

        if len(window) < self._window_length:
            logger.warning(
                f"Training source has only {len(window)} characters, "
                f"fewer than window length {self._window_length}; nothing learned"
            )
            return self

        n_read = len(window)
        for c in chars:
            stats = self._char_data_map.get(window)
            if stats is None:
                stats = WindowStats()
                self._char_data_map[window] = stats
            stats.update(c)
            window = window[1:] + c
            n_read += 1

        for stats in self._char_data_map.values():
            stats.finalize()

        logger.info(f"Trained on {n_read} characters: {len(self._char_data_map)} windows")
        return self

    def sample_character(self, stats: WindowStats) -> str:
        """
        Draw a character from a finalized WindowStats (inverse CDF).

        Returns the first record, in enumeration order, whose cumulative
        probability is at least a uniform draw from [0, 1).

        Raises:
            RuntimeError: If no record qualifies, which means ``stats`` is
                empty or was never finalized
        """
        r = self._rng.random_sample()
        cps = stats.cumulative_probabilities()
        i = int(np.searchsorted(cps, r, side="left"))
        if i >= len(cps):
            raise RuntimeError(
                f"no record with cumulative probability >= {r!r} in {stats}; "
                f"probabilities were not finalized correctly"
            )
        return stats[i].character

    def generate(self, initial_text: str, target_length: int) -> str:
        """
        Extend ``initial_text`` by sampling until it is ``target_length`` long.

        Generation stops early when the current window never occurred in the
        training text. Text shorter than one window is returned unchanged.
        """
        if len(initial_text) < self._window_length:
            return initial_text

        out = list(initial_text)
        window = initial_text[-self._window_length:]

        while len(out) < target_length:
            stats = self._char_data_map.get(window)
            if stats is None:
                logger.debug(f"Unseen window {window!r}; stopping at {len(out)} characters")
                break
            out.append(self.sample_character(stats))
            window = "".join(out[-self._window_length:])

        return "".join(out)

    def to_frame(self) -> pd.DataFrame:
        """One row per (window, character) record, in model order."""
        rows = [
            {
                "window": window,
                "character": cd.character,
                "count": cd.count,
                "probability": cd.probability,
                "cumulative_probability": cd.cumulative_probability,
            }
            for window, stats in self._char_data_map.items()
            for cd in stats
        ]
        return pd.DataFrame(
            rows,
            columns=["window", "character", "count", "probability", "cumulative_probability"],
        )

    def __str__(self) -> str:
        return "".join(f"{window} : {stats}\n" for window, stats in self._char_data_map.items())
