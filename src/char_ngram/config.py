"""
Configuration for a train-then-generate run.

The command line fills a ``GenerationConfig`` from its arguments, optionally
on top of a JSON file with the same keys.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from numbers import Integral
from typing import Dict

# Seed used by "fixed" mode so runs can be compared across machines.
FIXED_SEED = 20


@dataclass(frozen=True)
class GenerationConfig:
    """
    Settings for one run of the language model.

    Attributes:
        window_length: Characters of context per prediction
        initial_text: Text generation starts from
        text_length: Upper bound on the length of the generated text
        random: Unseeded generator when True, ``seed`` otherwise
        seed: Seed for non-random runs
        clean: Normalize the corpus before training
        text_column: Column holding the text when the corpus is a CSV
    """

    window_length: int
    initial_text: str
    text_length: int
    random: bool = False
    seed: int = FIXED_SEED
    clean: bool = False
    text_column: str = "text"

    def __post_init__(self):
        for name in ("window_length", "text_length", "seed"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if not isinstance(self.initial_text, str):
            raise ValueError(f"initial_text must be a string, got {self.initial_text!r}")
        if self.window_length < 1:
            raise ValueError(f"window_length must be >= 1, got {self.window_length}")
        if self.text_length < 0:
            raise ValueError(f"text_length must be >= 0, got {self.text_length}")

    @property
    def random_state(self) -> int | None:
        return None if self.random else self.seed

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "GenerationConfig":
        """Create a GenerationConfig from a dictionary, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in names})

    def to_dict(self) -> Dict:
        return asdict(self)
