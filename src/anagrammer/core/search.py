# src/anagrammer/core/search.py
"""
Anagram search.

Recursive backtracking over the remaining signature:

  1. remaining is empty → exactly one solution, the empty sentence
  2. otherwise, for every non-empty sub-signature that names dictionary
     words, take each such word and prepend it to every solution of
     what is left after removing the sub-signature

Every sub-signature is tried, not just those built around one letter,
so a word may use any subset of the remaining letters.
"""

from functools import cached_property, lru_cache

from anagrammer.config import Settings
from anagrammer.core.dictionary import DictionaryIndex
from anagrammer.core.signature import (
    Signature,
    combinations,
    sentence_signature,
    subtract,
    word_signature,
)
from anagrammer.core.wordlist import load_words
from anagrammer.logging_utils import get_logger

logger = get_logger()


class Anagrammer:
    """Anagram queries against one fixed dictionary."""

    def __init__(self, words):
        self.words = tuple(words)

    @cached_property
    def index(self) -> DictionaryIndex:
        return DictionaryIndex.build(self.words)

    def word_anagrams(self, word: str) -> list[str]:
        """Dictionary words with the same letters as word."""
        return self.index.lookup(word_signature(word))

    def sentence_anagrams(self, sentence: list[str]) -> list[list[str]]:
        """Every sentence of dictionary words using exactly the letters of sentence."""
        signature = sentence_signature(sentence)
        solved: dict[Signature, list[list[str]]] = {}

        def solve(remaining: Signature) -> list[list[str]]:
            # Base case must come first: combinations() always yields the
            # empty sub-signature and subtract(x, ()) == x.
            if not remaining:
                return [[]]
            if remaining in solved:
                return solved[remaining]

            results = []
            for sub in combinations(remaining):
                if not sub:
                    continue
                words = self.index.lookup(sub)
                if not words:
                    continue
                tails = solve(subtract(remaining, sub))
                for word in words:
                    for tail in tails:
                        results.append([word, *tail])

            solved[remaining] = results
            return results

        anagrams = [list(s) for s in solve(signature)]
        logger.debug(
            "Found %d anagrams for %r (%d sub-problems)",
            len(anagrams), sentence, len(solved),
        )
        return anagrams


@lru_cache(maxsize=1)
def default_anagrammer() -> Anagrammer:
    """Anagrammer over the configured dictionary file, built once per process."""
    settings = Settings.from_env()
    logger.info("Loading default dictionary from %s", settings.dictionary_path)
    return Anagrammer(load_words(settings.dictionary_path))


def word_anagrams(word: str) -> list[str]:
    return default_anagrammer().word_anagrams(word)


def sentence_anagrams(sentence: list[str]) -> list[list[str]]:
    return default_anagrammer().sentence_anagrams(sentence)
