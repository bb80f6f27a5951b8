#!/usr/bin/env python
"""
Regex Matcher - Reports whether a text matches a simple regular expression

This script takes a pattern and a text from the command line and prints a sentence
telling whether the text contains a match for the pattern. The pattern grammar is
documented in simple_regex/matcher.py.

Options are only recognized before the pattern. Everything from the first other
argument on is an operand, so patterns and texts may start with '-'. An optional
"--" ends the options explicitly. Operands after the first two are ignored.
"""

import argparse
import logging
import sys
from simple_regex.core import generate_report

USAGE = "Usage: simple-regex <pattern> <text>"

# Option strings accepted in front of the operands.
OPTION_STRINGS = ("-v", "--verbose", "-h", "--help")

def split_arguments(argv):
    """
    Splits the command line into leading options and the operands after them.

    Returns:
        tuple: (options, operands), both lists of strings.
    """
    i = 0
    while i < len(argv) and argv[i] in OPTION_STRINGS:
        i += 1
    options, operands = argv[:i], argv[i:]
    if operands[:1] == ["--"]:
        operands = operands[1:]
    return options, operands

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="simple-regex",
        usage="%(prog)s [-h] [-v] [--] pattern text",
        description="Checks whether a text contains a match for a pattern made of literals, '.', '^', '$' and 'c*' repetitions. The result is printed as a sentence.",
        epilog="Hopefully it was useful!"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log each match at DEBUG level")

    if argv is None:
        argv = sys.argv[1:]
    options, operands = split_arguments(list(argv))
    args = parser.parse_args(options)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    # Both operands are required to attempt a match.
    if len(operands) < 2:
        print(USAGE)
        return

    pattern, text = operands[0], operands[1]
    print(generate_report(pattern, text))

if __name__ == "__main__":
    main()
