from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass

import regex  # type: ignore


_INLINE_SPACE_RE = re.compile(r"[^\S\n]+")
_BLANK_LINES_RE = re.compile(r"\n{3,}")
_CONTROL_RE = re.compile(r"[\x00-\x08\x0B-\x1F\x7F]")


@dataclass(frozen=True)
class CleanCorpusConfig:
    lowercase: bool = False
    strip_accents: bool = False
    remove_urls: bool = True
    remove_emails: bool = True
    strip_control_chars: bool = True
    normalize_whitespace: bool = True


def clean_corpus(text: str, config: CleanCorpusConfig | None = None) -> str:
    """Normalize a training corpus.

    Line breaks are kept: they are characters the model learns like any other.
    """

    cfg = config or CleanCorpusConfig()
    s = text

    if cfg.lowercase:
        s = s.lower()

    if cfg.remove_urls:
        s = re.sub(r"https?://\S+|www\.\S+", " ", s)

    if cfg.remove_emails:
        s = re.sub(r"\b\S+@\S+\.\S+\b", " ", s)

    if cfg.strip_accents:
        s = unicodedata.normalize("NFC", regex.sub(r"\p{Mn}+", "", unicodedata.normalize("NFKD", s)))

    if cfg.strip_control_chars:
        s = s.replace("\r\n", "\n")
        s = _CONTROL_RE.sub(" ", s)

    if cfg.normalize_whitespace:
        s = _INLINE_SPACE_RE.sub(" ", s)
        s = re.sub(r" *\n *", "\n", s)
        s = _BLANK_LINES_RE.sub("\n\n", s).strip()

    return s
