"""Word-list loading.

A word list is a plain text file of whitespace-separated words. Load order
is kept: it decides which guess wins a scoring tie.
"""

from __future__ import annotations

import unicodedata
from pathlib import Path

DEFAULT_WORDS = Path("wordles.txt")


def _strip_accents(text: str) -> str:
    nfkd = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in nfkd if unicodedata.category(ch) != "Mn")


def normalize(word: str) -> str:
    """Lowercase *word* and drop its accents."""
    return _strip_accents(word.strip().lower())


def load_words(
    path: str | Path | None = None,
    word_length: int | None = None,
) -> list[str]:
    """Load the dictionary.

    Parameters
    ----------
    path : str, Path or None
        Word list to read. None falls back to ``wordles.txt`` in the
        working directory.
    word_length : int or None
        Only keep words of this exact length. None keeps every word.

    Returns
    -------
    list[str]
        Normalized alphabetic words, duplicates dropped, in file order.
    """
    src = Path(path) if path is not None else DEFAULT_WORDS
    if not src.exists():
        raise FileNotFoundError(f"Word list not found: {src}")

    seen: set[str] = set()
    words: list[str] = []
    for raw in src.read_text(encoding="utf-8").split():
        w = normalize(raw)
        if not w.isalpha() or w in seen:
            continue
        if word_length is not None and len(w) != word_length:
            continue
        seen.add(w)
        words.append(w)

    if not words:
        suffix = f"{word_length}-letter " if word_length is not None else ""
        raise ValueError(f"No {suffix}words found in {src}")
    return words
