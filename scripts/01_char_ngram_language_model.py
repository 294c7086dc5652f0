from __future__ import annotations

from char_ngram import FIXED_SEED, LanguageModel


def main() -> None:
    text = (
        "natural language processing (nlp) is fun. "
        "start small, iterate, and learn by coding. "
    )

    model = LanguageModel(4, random_state=FIXED_SEED).train(text)
    print(model)
    print(model.generate("nlp ", 120))


if __name__ == "__main__":
    main()
