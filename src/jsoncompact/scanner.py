"""Tokenizer for compact text."""

from typing import List

from .constants import BACKSLASH, QUOTE, SEPARATORS, STRUCTURAL
from .types import Token


def scan_quoted(text: str, start: int) -> int:
    """Find the end of a quoted token.

    Args:
        text: Compact text
        start: Index of the opening quote

    Returns:
        Index just past the closing quote, or ``len(text)`` if the token is unterminated
    """
    i = start + 1
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == BACKSLASH:
            i += 2
            continue
        if ch == QUOTE:
            return i + 1
        i += 1
    return n


def tokenize(text: str) -> List[Token]:
    """Split compact text into tokens.

    Structural characters are single tokens, quoted strings keep their
    quotes, and every other run of characters up to a separator or
    structural character is one bare atom.

    Args:
        text: Compact text

    Returns:
        Flat list of token strings
    """
    tokens: List[Token] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch in STRUCTURAL:
            tokens.append(ch)
            i += 1
        elif ch == QUOTE:
            end = scan_quoted(text, i)
            tokens.append(text[i:end])
            i = end
        elif ch in SEPARATORS:
            i += 1
        else:
            start = i
            while i < n and text[i] not in SEPARATORS and text[i] not in STRUCTURAL:
                i += 1
            tokens.append(text[start:i])
    return tokens
