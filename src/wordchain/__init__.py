"""Word Chain Builder.

Arranges a list of words so that each word starts with the last letter of the previous one,
either as an open chain or as a closed circle.  Each word is an edge between its first and last
letters, and a chain using every word once is an Eulerian trail of that letter graph.
"""

import sys
from sys import argv, exit

from .chainer import chainer
from .chainer.policies import POLICIES

USAGE = "Usage: python -m wordchain <path_to_word_list> <mode>"


def print_modes() -> None:
    """Print the available chaining modes."""
    print("Available modes:")
    print()
    for mode, policy in POLICIES.items():
        print(f"  {mode}")
        print(f"    {policy.name}")
        print()
    print(USAGE)
    print("Example: python -m wordchain words.txt circuit")


def main(args: list[str] | None = None) -> None:
    """Main entry point for the word chain builder."""
    args = argv[1:] if args is None else args
    if len(args) == 1 and args[0] in ("--list", "--help", "-h"):
        print_modes()
        exit(0)

    # Expect two arguments: path to the word list and the mode; any extra ones are ignored
    if len(args) < 2:
        print(USAGE, file=sys.stderr)
        print(f"Available modes: {', '.join(POLICIES)}", file=sys.stderr)
        exit(1)

    words_path, mode = args[:2]
    exit(chainer.run(words_path, mode))
