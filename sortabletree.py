#!/usr/bin/env python3
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''

import sys
import pathlib
import argparse

# Put this folder on sys.path so `core` / `ui` import when run from anywhere.
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parent))

from core.constants import INDENT_W, MAX_DEPTH

def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {text}")
    return value

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Sortable tree: drag to reorder, drag sideways to indent")
    parser.add_argument(
        "--verbosity",
        type=int, default=0,
        help="Set verbosity level (0=quiet, 1=normal, 2=verbose, 3+=debug)"
    )
    parser.add_argument(
        "--stdexp",
        action="store_true",
        help="Use standard exception handling to stdout / stderr."
    )
    parser.add_argument(
        "--seed",
        default=None,
        help="JSON seed file with the initial tree (default: built-in sample)."
    )
    parser.add_argument(
        "--max-depth",
        type=_positive_int, default=MAX_DEPTH,
        help=f"Deepest nesting level a drag may create (default {MAX_DEPTH})."
    )
    parser.add_argument(
        "--indent",
        type=_positive_int, default=INDENT_W,
        help=f"Pixels per indentation level (default {INDENT_W})."
    )
    return parser.parse_args(argv)

def cli(argv=None) -> int:
    args = parse_args(argv)

    from app import main

    return main(
        verbosity=args.verbosity,
        stdexp=args.stdexp,
        seed_path=args.seed,
        indent_w=args.indent,
        max_depth=args.max_depth,
    )

if __name__ == "__main__":
    sys.exit(cli())
