"""Anagram search over a fixed dictionary."""

__version__ = "0.1.0"
