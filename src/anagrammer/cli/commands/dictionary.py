"""
Dictionary commands.
"""

import sys
from pathlib import Path

from anagrammer.cli import client
from anagrammer.core.wordlist import load_words


def add_subparser(subparsers):
    parser = subparsers.add_parser("dict", help="Dictionary management")
    dict_sub = parser.add_subparsers(dest="dict_command", required=True)

    # add (from file)
    add_p = dict_sub.add_parser("add", help="Upload a word list (one word per line)")
    add_p.add_argument("file", help="Path to word list")
    add_p.add_argument("--name", help="Dictionary name (default: filename)")
    add_p.set_defaults(func=dict_add)

    # list
    list_p = dict_sub.add_parser("list", help="List all dictionaries")
    list_p.set_defaults(func=dict_list)

    # show
    show_p = dict_sub.add_parser("show", help="Show dictionary details")
    show_p.add_argument("name", help="Dictionary name")
    show_p.add_argument("--limit", type=int, default=20, help="Words to print")
    show_p.set_defaults(func=dict_show)

    # delete
    delete_p = dict_sub.add_parser("delete", help="Delete a dictionary")
    delete_p.add_argument("name", help="Dictionary name")
    delete_p.set_defaults(func=dict_delete)

    # use
    use_p = dict_sub.add_parser("use", help="Show or set the active dictionary")
    use_p.add_argument("name", nargs="?", help="Dictionary name (omit to show the active one)")
    use_p.set_defaults(func=dict_use)


def dict_add(args):
    path = Path(args.file)
    name = args.name or path.stem

    try:
        words = load_words(path)
        result = client.create_dictionary(name, words)
        print(f"✓ Created dictionary: {result['name']}")
        print(f"  words: {result['word_count']}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def dict_list(args):
    try:
        infos = client.list_dictionaries()
        if not infos:
            print("No dictionaries.")
            return
        for info in infos:
            print(f"{info['name']:20} {info['word_count']:>8} words  ({info['created_at']})")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def dict_show(args):
    try:
        d = client.get_dictionary(args.name)
        print(f"Name: {d['name']}")
        print(f"Created: {d['created_at']}")
        print(f"Words ({d['word_count']}):")
        for word in d["words"][:args.limit]:
            print(f"  {word}")
        if d["word_count"] > args.limit:
            print(f"  ... {d['word_count'] - args.limit} more")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def dict_delete(args):
    try:
        result = client.delete_dictionary(args.name)
        print(f"✓ Deleted dictionary: {result['deleted']}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def dict_use(args):
    try:
        if args.name is None:
            result = client.get_active_dictionary()
            print(f"Active dictionary: {result['dictionary']} (db {result['db']})")
            return
        result = client.set_active_dictionary(args.name)
        print(f"✓ Active dictionary: {result['dictionary']} (was {result['previous']}, db {result['db']})")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
