# src/anagrammer/core/dictionary.py
"""
Dictionary index: words grouped by signature.

"eat", "tea", "ate" all land under (("a", 1), ("e", 1), ("t", 1)).
"""

from anagrammer.core.signature import Signature, word_signature
from anagrammer.logging_utils import get_logger

logger = get_logger()


class DictionaryIndex:
    def __init__(self, by_signature: dict[Signature, tuple[str, ...]]):
        self._by_signature = by_signature

    @classmethod
    def build(cls, words) -> "DictionaryIndex":
        """Group words by signature, keeping dictionary order and duplicates."""
        groups: dict[Signature, list[str]] = {}
        word_count = 0
        for word in words:
            groups.setdefault(word_signature(word), []).append(word)
            word_count += 1

        index = cls({sig: tuple(group) for sig, group in groups.items()})
        logger.info(
            "Built dictionary index: %d words, %d signatures",
            word_count, index.signature_count,
        )
        return index

    def lookup(self, signature: Signature) -> list[str]:
        """All words with exactly this signature, or [] if there are none."""
        words = self._by_signature.get(signature)
        if words is None:
            return []
        return list(words)

    @property
    def signature_count(self) -> int:
        return len(self._by_signature)

    def __len__(self) -> int:
        return sum(len(words) for words in self._by_signature.values())
