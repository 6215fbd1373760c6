#!/usr/bin/env python3
"""
RPAL Scanner Demo
=================

Scans examples/fact.rpal twice: once showing every token the scanner
emits, once showing only the tokens a parser would consume.

Usage:
    python examples/scan_demo.py [file.rpal]
"""

import sys
from pathlib import Path

from rpal_scanner import RpalError, Scanner, screen


def main() -> int:
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(__file__).parent / "fact.rpal"

    try:
        print(f"All tokens in {path}:")
        with Scanner(path) as scanner:
            tokens = list(scanner)
        for token in tokens:
            marker = " " if token.is_discardable else "*"
            print(f"  {marker} {token!r}")

        print()
        print("Parser view:")
        print("  " + " ".join(token.value for token in screen(tokens)))
    except RpalError as e:
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
