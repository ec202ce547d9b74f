from __future__ import annotations

from typing import Iterable

MAX_CHIRP_LENGTH = 140
MASK = "****"
PROFANE_WORDS = ("kerfuffle", "sharbert", "fornax")


def replace_profane_words(text: str, profane_words: Iterable[str] = PROFANE_WORDS) -> str:
    """Mask every whitespace-separated word found in ``profane_words``.

    Matching is case-insensitive and on whole words only, so ``Fornax!`` is
    left alone.  Runs of whitespace collapse to a single space.
    """
    blacklist = {w.lower() for w in profane_words}
    words = text.split()
    return " ".join(MASK if w.lower() in blacklist else w for w in words)
