"""
Anagram commands: word, sentence.
"""

import sys

from rich.console import Console
from rich.table import Table

from anagrammer.cli import client
from anagrammer.core.search import Anagrammer
from anagrammer.core.signature import format_signature, sentence_signature, word_signature
from anagrammer.core.wordlist import load_words

console = Console()


def add_subparser(subparsers):
    word_p = subparsers.add_parser("word", help="Dictionary words with the same letters")
    word_p.add_argument("word", help="Word to rearrange")
    _add_source_args(word_p)
    word_p.set_defaults(func=run_word)

    sent_p = subparsers.add_parser("sentence", help="All anagram sentences")
    sent_p.add_argument("words", nargs="+", help="Words of the sentence")
    _add_source_args(sent_p)
    sent_p.add_argument("--limit", type=int, default=None, help="Print at most N sentences")
    sent_p.set_defaults(func=run_sentence)


def _add_source_args(parser):
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--dict", dest="dictionary", help="Stored dictionary (default: active one)")
    source.add_argument("--words", dest="words_file", help="Search locally against a word-list file")


def run_word(args):
    try:
        if args.words_file:
            anagrams = Anagrammer(load_words(args.words_file)).word_anagrams(args.word)
        else:
            anagrams = client.word_anagrams(args.word, args.dictionary)["anagrams"]
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    console.print(f"[dim]{args.word} → {format_signature(word_signature(args.word))}[/dim]")
    if not anagrams:
        console.print("No anagrams.")
        return
    for word in anagrams:
        console.print(f"  {word}")


def run_sentence(args):
    try:
        if args.words_file:
            anagrams = Anagrammer(load_words(args.words_file)).sentence_anagrams(args.words)
        else:
            anagrams = client.sentence_anagrams(args.words, args.dictionary)["anagrams"]
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    signature = sentence_signature(args.words)
    console.print(f"[dim]{' '.join(args.words)} → {format_signature(signature)}[/dim]")
    if not anagrams:
        console.print("No anagrams.")
        return

    shown = anagrams if args.limit is None else anagrams[:args.limit]
    table = Table(title=f"{len(anagrams)} anagrams")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Sentence")
    for i, sentence in enumerate(shown, 1):
        table.add_row(str(i), " ".join(sentence))
    console.print(table)
