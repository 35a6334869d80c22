#!/usr/bin/env python3
"""
Rewrite the words of a text while keeping its exact layout.

Reads stdin (or uses a built-in sample), prints the token table, then
reverses every word and normalizes every whitespace run.

Usage:
    python examples/map_words_demo.py < some.txt
"""

import sys

from split_preserve import SplitPreserveWS, token_spans


SAMPLE = "Line\twith\nweird   whitespace\n\n  and a trailing run  "


def main():
    text = SAMPLE if sys.stdin.isatty() else sys.stdin.read()

    print("Tokens:")
    for token in SplitPreserveWS(text):
        kind = "WS " if token.is_whitespace else "TXT"
        print(f"  {kind} [{token.char_start:>4}:{token.char_end:<4}] {token.text!r}")

    print(f"\nSpan table shape: {token_spans(text).shape}")

    print("\nReversed words:")
    print("".join(SplitPreserveWS(text).map_words(lambda w: w[::-1])))

    print("\nSingle-spaced:")
    print("".join(SplitPreserveWS(text).map_whitespace(lambda _: " ")))


if __name__ == "__main__":
    main()
