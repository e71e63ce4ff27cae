"""
Show the letter signature of some text.
"""

from rich import print_json

from anagrammer.core.signature import format_signature, sentence_signature


def add_subparser(subparsers):
    parser = subparsers.add_parser("signature", help="Show the letter signature of words")
    parser.add_argument("words", nargs="*", help="Words (empty → empty signature)")
    parser.add_argument("--json", action="store_true", help="Print pairs as JSON")
    parser.set_defaults(func=run)


def run(args):
    signature = sentence_signature(args.words)
    if args.json:
        print_json(data=[list(pair) for pair in signature])
    else:
        print(format_signature(signature) or "(empty)")
