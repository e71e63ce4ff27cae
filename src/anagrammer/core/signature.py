# src/anagrammer/core/signature.py
"""
Letter-frequency signatures.

A signature is the canonical fingerprint of a multiset of letters:
a tuple of (letter, count) pairs, lowercase, strictly ascending by
letter, every count >= 1.

    "Tea" → (("a", 1), ("e", 1), ("t", 1))

Two texts are anagrams of each other iff their signatures are equal.
"""

from collections import Counter

Signature = tuple[tuple[str, int], ...]

EMPTY: Signature = ()


class InvalidSubtraction(ValueError):
    """Raised when the subtrahend asks for letters the minuend does not have."""

    def __init__(self, letter: str, requested: int, available: int):
        self.letter = letter
        self.requested = requested
        self.available = available
        super().__init__(
            f"Cannot remove {requested} x {letter!r}: only {available} available"
        )


def word_signature(word: str) -> Signature:
    """Count the letters of a word, ignoring case."""
    counts = Counter(word.lower())
    return tuple(sorted(counts.items()))


def sentence_signature(sentence: list[str]) -> Signature:
    """Signature of all words of a sentence taken together."""
    return word_signature("".join(sentence))


def combinations(signature: Signature) -> list[Signature]:
    """
    Every sub-signature of a signature.

    Each letter independently keeps 0..count of its occurrences; letters
    kept 0 times are dropped. The result always holds the empty signature
    and the signature itself, prod(count + 1) entries in total.
    Order of the result is not meaningful.
    """
    if not signature:
        return [EMPTY]

    (letter, count), rest = signature[0], signature[1:]
    tails = combinations(rest)

    result = list(tails)
    for n in range(1, count + 1):
        # letter sorts before everything in rest, so prepending keeps order
        result.extend(((letter, n),) + tail for tail in tails)
    return result


def subtract(x: Signature, y: Signature) -> Signature:
    """
    Remove the letters of y from x.

    Raises InvalidSubtraction if y holds a letter x lacks, or more
    copies of a letter than x has.
    """
    counts = dict(x)
    for letter, count in y:
        available = counts.get(letter, 0)
        if count > available:
            raise InvalidSubtraction(letter, count, available)
        counts[letter] = available - count

    return tuple(sorted((letter, n) for letter, n in counts.items() if n > 0))


def validate_signature(signature) -> Signature:
    """Check every signature invariant, return the value as a tuple of pairs."""
    pairs = []
    previous = None
    for pair in signature:
        if len(pair) != 2:
            raise ValueError(f"Not a (letter, count) pair: {pair!r}")
        letter, count = pair
        if not isinstance(letter, str) or len(letter) != 1:
            raise ValueError(f"Not a single letter: {letter!r}")
        if letter != letter.lower():
            raise ValueError(f"Letter must be lowercase: {letter!r}")
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise ValueError(f"Count for {letter!r} must be a positive integer, got {count!r}")
        if previous is not None and letter <= previous:
            raise ValueError(f"Letters must be strictly ascending: {previous!r} then {letter!r}")
        previous = letter
        pairs.append((letter, count))
    return tuple(pairs)


def format_signature(signature: Signature) -> str:
    """Compact form, e.g. a2b1."""
    return "".join(f"{letter}{count}" for letter, count in signature)
