"""
Anagrammer CLI.
"""

import argparse
from anagrammer.cli.commands import anagram, dictionary, serve, signature


def main():
    parser = argparse.ArgumentParser(prog="anagrammer", description="Anagrammer CLI")
    subparsers = parser.add_subparsers(dest="command")

    dictionary.add_subparser(subparsers)
    anagram.add_subparser(subparsers)
    signature.add_subparser(subparsers)
    serve.add_subparser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
