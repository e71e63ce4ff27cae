"""
Word-list files: one word per line.
"""

from pathlib import Path


def parse_words(lines) -> list[str]:
    """Strip lines, skip blanks and # comments. Order and duplicates are kept."""
    words = []
    for line in lines:
        word = line.strip()
        if not word or word.startswith("#"):
            continue
        words.append(word)
    return words


def load_words(path: str | Path) -> list[str]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Word list not found: {p}")
    with p.open(encoding="utf-8") as f:
        return parse_words(f)
