"""Character sources for training.

A character source is any iterable of single characters. Plain text files are
streamed; CSV corpora are read with pandas and their text column joined with
newlines.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pandas as pd

from .text_cleaning import CleanCorpusConfig, clean_corpus

logger = logging.getLogger(__name__)


def iter_text_file(path: str | Path, encoding: str = "utf-8", chunk_size: int = 8192) -> Iterator[str]:
    with open(path, "r", encoding=encoding) as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                return
            yield from chunk


def load_csv_corpus(path: str | Path, text_column: str = "text") -> str:
    df = pd.read_csv(path)
    if text_column not in df.columns:
        raise ValueError(f"CSV must have a column named {text_column!r}")
    return "\n".join(df[text_column].dropna().astype(str).tolist())


def open_corpus(
    path: str | Path,
    *,
    text_column: str = "text",
    clean: CleanCorpusConfig | None = None,
) -> Iterator[str]:
    """Character source for the corpus at ``path``.

    ``.csv`` files go through pandas; anything else is read as text. With
    ``clean`` set, the whole corpus is normalized before it is yielded.
    """

    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Corpus not found: {path}")

    if path.suffix.lower() == ".csv":
        logger.info(f"Reading CSV corpus {path} (column {text_column!r})")
        text = load_csv_corpus(path, text_column)
    elif clean is not None:
        logger.info(f"Reading text corpus {path}")
        text = path.read_text(encoding="utf-8")
    else:
        logger.info(f"Streaming text corpus {path}")
        return iter_text_file(path)

    if clean is not None:
        text = clean_corpus(text, clean)
    return iter(text)
