"""Character-level n-gram language model.

Train a ``LanguageModel`` on any iterable of characters, then generate text
from it. ``datasets.open_corpus`` turns a file into such a source.
"""

from .config import FIXED_SEED, GenerationConfig
from .language_model import LanguageModel
from .window_stats import CharData, WindowStats

__version__ = "1.0.0"

__all__ = ["CharData", "FIXED_SEED", "GenerationConfig", "LanguageModel", "WindowStats"]
