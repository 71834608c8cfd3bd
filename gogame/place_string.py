"""Parsing of board places written as a column letter and a row number, e.g. "D4".

Column letters skip "I" and "O". Parsing functions raise ``ValueError`` on
malformed input.
"""

_DIGITS = frozenset("0123456789")


def string_to_integer(text):
    """Parse a non-empty string of ASCII digits as a non-negative integer."""
    if not text or not set(text) <= _DIGITS:
        raise ValueError(f"{text!r} is not a non-negative integer")
    return int(text)


def place_string_to_row(text):
    """Return the row number given after the column letter."""
    if len(text) < 2:
        raise ValueError(f"{text!r} has no row number")
    return string_to_integer(text[1:])


def place_string_to_column(text):
    """Return the zero-based column for the leading letter."""
    if not text:
        raise ValueError("empty place string")
    letter = text[0]
    if letter in "IO" or not "A" <= letter <= "Z":
        raise ValueError(f"{letter!r} is not a column letter")
    if letter <= "H":
        return ord(letter) - ord("A")
    if letter <= "N":
        return ord(letter) - ord("A") - 1
    return ord(letter) - ord("A") - 2


def is_place_string_well_formed(text):
    """Return True if both the column and the row of ``text`` parse."""
    try:
        place_string_to_row(text)
        place_string_to_column(text)
    except ValueError:
        return False
    return True