"""Example: print the lines of stdin that a YAML rule set includes.

Usage:
    find . -type f | python examples/filter_paths.py examples/path_filter.yaml
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable

from partglob import PatternSet


def filter_lines(rules_path: str, lines: Iterable[str]) -> list[str]:
    """Return the stripped lines that the rule set at ``rules_path`` includes."""
    pattern_set = PatternSet.load(rules_path)
    return pattern_set.filter(line.rstrip("\n") for line in lines)


def main(argv: list[str]) -> int:
    if len(argv) != 2:
        print(__doc__, file=sys.stderr)
        return 2
    logging.basicConfig(level=logging.INFO)
    for line in filter_lines(argv[1], sys.stdin):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
