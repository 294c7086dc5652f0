"""
Command-line entry point: train on a corpus, then print generated text.

Usage:
    char-ngram 7 "Once upon" 300 fixed corpus.txt      # reproducible output
    char-ngram 3 "the" 200 random reviews.csv --clean   # different every run
    char-ngram --config run.json --dump                 # settings and source from JSON
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import FIXED_SEED, GenerationConfig
from .datasets import open_corpus
from .language_model import LanguageModel
from .text_cleaning import CleanCorpusConfig

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="char-ngram",
        description="Character-level n-gram language model: train on a corpus and generate text",
    )

    parser.add_argument("window_length", type=int, nargs="?", help="Characters of context per prediction")
    parser.add_argument("initial_text", nargs="?", help="Text to start generating from")
    parser.add_argument("text_length", type=int, nargs="?", help="Maximum length of the generated text")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["random", "fixed"],
        help=f"'random' for unseeded sampling, 'fixed' for seed {FIXED_SEED} (or --seed)",
    )
    parser.add_argument("source", nargs="?", help="Training corpus (.txt or .csv)")

    parser.add_argument("--config", "-c", type=str, help="Path to configuration JSON file")
    parser.add_argument("--seed", type=int, help="Seed for fixed mode")
    parser.add_argument("--clean", action="store_true", help="Normalize the corpus before training")
    parser.add_argument("--text-column", type=str, help="Text column for CSV corpora")
    parser.add_argument("--dump", action="store_true", help="Print the trained model before the text")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    return parser


def _collect_settings(args: argparse.Namespace) -> dict:
    settings: dict = {}

    if args.config:
        with open(args.config, "r") as f:
            settings.update(json.load(f))

    for key in ("window_length", "initial_text", "text_length", "source", "seed", "text_column"):
        value = getattr(args, key)
        if value is not None:
            settings[key] = value
    if args.mode is not None:
        settings["random"] = args.mode == "random"
    if args.clean:
        settings["clean"] = True

    return settings


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.config and not Path(args.config).exists():
        parser.error(f"config file not found: {args.config}")

    settings = _collect_settings(args)
    missing = [k for k in ("window_length", "initial_text", "text_length") if k not in settings]
    if missing:
        parser.error(f"missing required settings: {', '.join(missing)}")
    if settings.get("source") is None:
        parser.error("a training source is required")

    try:
        config = GenerationConfig.from_dict(settings)
        model = LanguageModel(config.window_length, random_state=config.random_state)
    except ValueError as e:
        parser.error(str(e))

    logger.debug(f"Running with config: {config.to_dict()}")

    try:
        source = open_corpus(
            settings["source"],
            text_column=config.text_column,
            clean=CleanCorpusConfig() if config.clean else None,
        )
        model.train(source)
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1
    except UnicodeDecodeError as e:
        logger.error(f"Encoding error in {settings['source']}: {e}")
        return 1

    if args.dump:
        print(model, end="")

    print(model.generate(config.initial_text, config.text_length))
    return 0


if __name__ == "__main__":
    sys.exit(main())
