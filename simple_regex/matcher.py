#!/usr/bin/env python
"""
Matcher Implementation

This module provides a small recursive backtracking matcher for a restricted
regular-expression grammar. The pattern is interpreted byte by byte while it is
being matched; nothing is compiled ahead of time and no parse tree is built.

The following bytes carry meaning inside a pattern:
  - '.' matches any single byte.
  - '^' as the first pattern byte anchors the match at the start of the text.
  - '$' as the last pattern byte anchors the match at the end of the text.
  - '*' repeats the byte right before it zero or more times ("c*", ".*").

Every other byte is a literal and matches itself. There is no escaping, so a '$'
that is not the final pattern byte (for example "a$b") and a '*' with nothing
before it (for example "*a") are both plain literals.

Both arguments are sequences of raw bytes (bytes, bytearray or memoryview). The
search walks them through offsets only; the inputs are never sliced or copied,
so a (pattern offset, text offset) pair is the whole state of a match attempt.

The backtracking search keeps those pairs on an explicit work stack instead of the
Python call stack, so the number of "c*" items in a pattern is not limited by the
interpreter's recursion limit. Literal and wildcard bytes are consumed in a loop;
each "c*" pushes one frame per candidate repetition count, in reverse, so that the
fewest repetitions are always tried first.
"""

# Byte values that carry meaning inside a pattern.
BEGIN = ord("^")        # Anchors the match at offset 0 (first pattern byte only).
END = ord("$")          # Anchors the match at the end of the text (last pattern byte only).
WILDCARD = ord(".")     # Matches any single byte.
REPEAT = ord("*")       # Repeats the preceding byte zero or more times.

# ------------------------------------------------------------------------------
# Positional and repetition matching
# ------------------------------------------------------------------------------

def repeat_frames(repeat: int, p: int, text, t: int) -> list:
    """
    Return the (pattern offset, text offset) frames for a "c*" item, ready to push.

    One frame is produced per repetition count, from zero up to the first byte that
    cannot be repeated (or the end of the text). The list is in reverse order, so the
    frame with the fewest repetitions ends up on top of the stack.
    """
    end = t
    while end < len(text) and (repeat == WILDCARD or text[end] == repeat):
        end += 1
    return [(p, i) for i in range(end, t - 1, -1)]


def backtrack(pattern, text, frames: list) -> bool:
    """
    Run the backtracking search over a stack of (pattern offset, text offset) frames.

    Each frame asks whether pattern[p:] matches a prefix of text[t:]. Frames are
    popped last-in first-out, which explores the same branches in the same order as
    a depth-first recursive matcher would.

    Parameters:
        pattern: The pattern bytes.
        text: The text bytes.
        frames (list): Initial frames; the list is consumed.

    Returns:
        bool: True as soon as one frame matches, False once the stack is empty.
    """
    while frames:
        p, t = frames.pop()
        while True:
            # An exhausted pattern has matched.
            if p >= len(pattern):
                return True

            p_ch = pattern[p]

            # '$' only anchors when it is the last remaining pattern byte.
            if p_ch == END and p + 1 == len(pattern):
                if t == len(text):
                    return True
                break

            if p + 1 < len(pattern) and pattern[p + 1] == REPEAT:
                frames.extend(repeat_frames(p_ch, p + 2, text, t))
                break

            if t < len(text) and (p_ch == WILDCARD or p_ch == text[t]):
                p += 1
                t += 1
                continue

            # Literal mismatch, or the text ran out while the pattern still needs a byte.
            break
    return False


def match_here(pattern, p: int, text, t: int) -> bool:
    """
    Match pattern[p:] against a prefix of text[t:].

    The match must start exactly at text offset t. Literal and wildcard bytes are
    consumed in place; a "c*" item is handled like match_repeat() with the rest of
    the pattern.

    Parameters:
        pattern: The pattern bytes.
        p (int): Offset of the first pattern byte still to be matched.
        text: The text bytes.
        t (int): Offset in the text where the match must start.

    Returns:
        bool: True if the remaining pattern matches at offset t, False otherwise.
    """
    return backtrack(pattern, text, [(p, t)])


def match_repeat(repeat: int, pattern, p: int, text, t: int) -> bool:
    """
    Match zero or more copies of `repeat` followed by pattern[p:] at text offset t.

    Repetition counts are tried from zero upwards and the first count that lets the
    rest of the pattern match wins. A `repeat` byte of '.' accepts any byte.
    """
    return backtrack(pattern, text, repeat_frames(repeat, p, text, t))

# ------------------------------------------------------------------------------
# Search driver
# ------------------------------------------------------------------------------

def matches(pattern, text) -> bool:
    """
    Report whether `text` contains a substring matching `pattern`.

    An empty pattern matches any text, including an empty one. A pattern starting
    with '^' is only tried at offset 0; any other pattern is tried at every offset
    from 0 up to and including len(text), so that a pattern made of optional items
    can still match the empty suffix at the end of the text.

    Parameters:
        pattern (bytes): The pattern, for example b"ab*c$".
        text (bytes): The text to search.

    Returns:
        bool: True on the first offset where the pattern matches, False if none does.
    """
    if len(pattern) > 0 and pattern[0] == BEGIN:
        return match_here(pattern, 1, text, 0)

    for t in range(len(text) + 1):
        if match_here(pattern, 0, text, t):
            return True
    return False
