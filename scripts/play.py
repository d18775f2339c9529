#!/usr/bin/env python3
"""
play word conquest in the terminal.

usage:
    python scripts/play.py
    python scripts/play.py --vocab data/vocab_2d.json
    python scripts/play.py --words cat dog bird --json

without --words, reads one word per line from stdin. blank lines are
ignored; EOF or ":q" quits.
"""

import argparse
import json
import sys
from pathlib import Path

# add parent dir to path so we can import conquest
sys.path.insert(0, str(Path(__file__).parent.parent))

from conquest import DEFAULT_CONFIG, GameController, SubmitResult, load_vocabulary

QUIT = ":q"


def report(result: SubmitResult, as_json: bool) -> None:
    """print one submission result."""
    if as_json:
        print(json.dumps(result.to_dict()))
    elif result.accepted:
        print(f"score: {result.score} ({result.score_delta:+d})")
    else:
        print(result.error_message)


def read_words(prompt: str):
    """yield words typed on stdin until EOF or the quit command."""
    interactive = sys.stdin.isatty()
    while True:
        try:
            line = input(prompt if interactive else "")
        except EOFError:
            return
        word = line.strip()
        if word == QUIT:
            return
        if word:
            yield word


def main():
    parser = argparse.ArgumentParser(
        description="play word conquest: grow the hull, grow the score"
    )
    parser.add_argument(
        "--vocab",
        type=Path,
        default=DEFAULT_CONFIG.vocab_path,
        help=f"json vocabulary of word -> [x, y] (default: {DEFAULT_CONFIG.vocab_path})"
    )
    parser.add_argument(
        "--words",
        nargs="+",
        default=None,
        help="play these words and exit instead of reading stdin"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print each result as json"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="print extra info"
    )

    args = parser.parse_args()

    if not args.vocab.exists():
        print(f"error: vocabulary not found at {args.vocab}")
        sys.exit(1)

    if args.verbose:
        print(f"loading vocab from {args.vocab}...")
    try:
        vocab = load_vocabulary(args.vocab)
    except ValueError as e:
        print(f"error: {e}")
        sys.exit(1)
    if args.verbose:
        print(f"  vocab size: {len(vocab):,}")

    game = GameController(vocab, verbose=args.verbose)

    words = args.words if args.words is not None else read_words("new word> ")
    for word in words:
        report(game.submit(word), args.json)

    if not args.json:
        final = game.snapshot()
        print(f"\nfinal score: {final.score} ({len(final.points)} words)")


if __name__ == "__main__":
    main()
