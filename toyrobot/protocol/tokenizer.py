"""
Command line tokenizer.

Splits raw command text into uppercase tokens separated by whitespace and
commas, e.g. ``"place 1, 2,north"`` -> ``["PLACE", "1", "2", "NORTH"]``.

Only ASCII whitespace separates tokens and only ASCII letters are uppercased;
other characters pass through unchanged.
"""

import re
import string

ASCII_WHITESPACE = " \t\n\v\f\r"
SEPARATOR_PATTERN = re.compile(r"[ \t\n\v\f\r,]+", re.ASCII)

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def ascii_upper(text: str) -> str:
    """Uppercase ASCII letters only."""
    return text.translate(_ASCII_UPPER)


def tokenize(line: str) -> list[str]:
    """
    Separate a line into tokens.

    Args:
        line: Raw command line, with or without trailing newline

    Returns:
        Tokens in order from left to right; empty for a blank or all-separator line
    """
    return [tok for tok in SEPARATOR_PATTERN.split(ascii_upper(line)) if tok]
