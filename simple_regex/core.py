"""
Core Module for simple-regex

This module sits between the command line and the byte-level matcher. It turns the
arguments into byte sequences, runs the match, and builds the sentence that reports
the result.

The module is divided into two sections:

1. Input handling:
   - to_bytes: Converts a str (or bytes-like value) into the bytes the matcher works on.

2. Public API:
   - check_match: Runs the matcher on two str or bytes-like values.
   - describe_match: Formats the human-readable result sentence.
   - generate_report: Combines the two above for a pattern/text pair.
"""

import os
import logging
from typing import Union
from .matcher import matches, END, REPEAT

# Configure logging to output warnings; raise the level to DEBUG to trace matches.
logging.basicConfig(level=logging.WARNING)

PatternInput = Union[str, bytes, bytearray, memoryview]

###############################################################################
# Input handling
###############################################################################

def to_bytes(value: PatternInput) -> bytes:
    """
    Returns the raw bytes of a pattern or text argument.

    str values are encoded with os.fsencode, so command-line arguments come back as the
    exact bytes the shell passed in (undecodable bytes survive through surrogateescape).
    Bytes-like values are copied into an immutable bytes object.

    Raises:
        TypeError: If the value is neither a str nor bytes-like.
    """
    if isinstance(value, str):
        return os.fsencode(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"expected str or bytes-like object, got {type(value).__name__}")

###############################################################################
# Public API
###############################################################################

def check_match(pattern: PatternInput, text: PatternInput) -> bool:
    """
    Returns whether the text contains a substring matching the pattern.

    Parameters:
        pattern (PatternInput): The pattern, for example "^ab*c".
        text (PatternInput): The text to search.

    Returns:
        bool: The matcher's verdict.
    """
    pattern_bytes = to_bytes(pattern)
    text_bytes = to_bytes(text)

    # A lone '$' anywhere but the last byte is an ordinary literal; "$*" repeats it.
    for offset in range(len(pattern_bytes) - 1):
        if pattern_bytes[offset] == END and pattern_bytes[offset + 1] != REPEAT:
            logging.debug(f"'$' at offset {offset} of pattern {pattern_bytes!r} is matched literally")

    result = matches(pattern_bytes, text_bytes)
    logging.debug(f"matches({pattern_bytes!r}, {text_bytes!r}) -> {result}")
    return result

def describe_match(pattern: str, text: str, matched: bool) -> str:
    """Formats the sentence reporting whether the text matches the pattern."""
    verdict = "does match" if matched else "does not match"
    return f"The input text [ {text} ] {verdict} the pattern [ {pattern} ]"

def generate_report(pattern: str, text: str) -> str:
    """
    Matches the text against the pattern and returns the result sentence.

    Both arguments are echoed back as given, the matching itself happens on their bytes.
    """
    return describe_match(pattern, text, check_match(pattern, text))
