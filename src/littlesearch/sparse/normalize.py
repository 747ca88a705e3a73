from __future__ import annotations
from typing import Iterable, Optional, Set

from littlesearch.config import PUNCTUATION


def normalize(token: str, noise_words: Iterable[str] = (), punctuation: str = PUNCTUATION) -> Optional[str]:
    """
    Return the keyword for a raw token, or None if the token is not a keyword.

    Only the trailing run of punctuation is stripped; anything else that is not a
    letter rejects the token. Empty and all-punctuation tokens are rejected.
    """
    if token is None:
        return None
    word = token.strip().lower().rstrip(punctuation)
    if not word.isalpha():
        return None
    if word in noise_words:
        return None
    return word


class Normalizer:
    def __init__(self, noise_words: Iterable[str] = (), punctuation: str = PUNCTUATION):
        self.noise_words: Set[str] = set(noise_words)
        self.punctuation = punctuation

    def __call__(self, token: str) -> Optional[str]:
        return normalize(token, self.noise_words, self.punctuation)

    def is_noise(self, word: str) -> bool:
        return word in self.noise_words
