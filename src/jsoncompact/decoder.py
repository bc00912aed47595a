"""Compact text decoding.

The decoder is deliberately lenient: unterminated strings and unmatched
brackets never raise. A container that is still open when the tokens run
out is closed at end of input, and an object key without a value is
dropped.
"""

import json
import logging
import re
from typing import Any, List, Optional, Union

from .constants import CLOSE_BRACE, CLOSE_BRACKET, LITERALS, NON_FINITE, OPEN_BRACE, OPEN_BRACKET, QUOTE
from .errors import InvalidInputError
from .scanner import tokenize
from .types import DecodeOptions, JsonArray, JsonObject, JsonValue, ResolvedDecodeOptions, Token

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_number(token: Token) -> Optional[Union[int, float]]:
    """Interpret a bare token as a number.

    Args:
        token: Bare atom text

    Returns:
        int for integer literals, float for other numeric literals, None otherwise
    """
    if token in NON_FINITE:
        return NON_FINITE[token]
    if _INTEGER_RE.fullmatch(token):
        return int(token)
    if _NUMBER_RE.fullmatch(token):
        return float(token)
    return None


def decode_quoted(token: Token) -> str:
    """Decode a quoted token with JSON string rules.

    Tokens that are not valid JSON string literals fall back to the text
    between the quotes.
    """
    try:
        decoded = json.loads(token)
    except ValueError:
        decoded = None
    if isinstance(decoded, str):
        return decoded
    logger.debug("Keeping raw text of undecodable quoted token %r", token)
    return token[1:-1]


def _is_quoted(token: Token) -> bool:
    return len(token) >= 2 and token.startswith(QUOTE) and token.endswith(QUOTE)


Container = Union[JsonObject, JsonArray]


class Parser:
    """Parser over a token list with a single cursor.

    Containers that are still open are kept on an explicit stack, so deeply
    nested text never grows the Python call stack.
    """

    def __init__(self, tokens: List[Token], options: ResolvedDecodeOptions) -> None:
        self.tokens = tokens
        self.options = options
        self.index = 0

    def at_end(self) -> bool:
        return self.index >= len(self.tokens)

    def next_token(self) -> Token:
        token = self.tokens[self.index]
        self.index += 1
        return token

    def parse_value(self) -> JsonValue:
        """Parse the value starting at the cursor."""
        stack: List[Container] = []
        value = self.start_value(self.next_token(), stack)
        while stack:
            container = stack[-1]
            if isinstance(container, dict):
                self.parse_object_entry(container, stack)
            else:
                self.parse_array_entry(container, stack)
        return value

    def start_value(self, token: Token, stack: List[Container]) -> JsonValue:
        """Open a container on the stack, or interpret an atom."""
        if token == OPEN_BRACE:
            obj: JsonObject = {}
            stack.append(obj)
            return obj
        if token == OPEN_BRACKET:
            arr: JsonArray = []
            stack.append(arr)
            return arr
        return self.parse_atom(token)

    def parse_atom(self, token: Token) -> JsonValue:
        """Interpret a non-structural token.

        Args:
            token: Quoted string or bare atom

        Returns:
            Decoded string, literal, number or the bare text itself
        """
        if _is_quoted(token):
            return decode_quoted(token)
        if token in LITERALS:
            return LITERALS[token]
        number = parse_number(token)
        if number is not None:
            return number
        return token

    def parse_key(self, token: Token) -> str:
        if self.options.unquoteKeys and _is_quoted(token):
            return decode_quoted(token)
        return token

    def close(self, stack: List[Container]) -> None:
        stack.pop()
        if not self.at_end():
            self.index += 1

    def parse_object_entry(self, obj: JsonObject, stack: List[Container]) -> None:
        """Consume one key/value pair of the innermost object, or its closing brace."""
        if self.at_end() or self.tokens[self.index] == CLOSE_BRACE:
            self.close(stack)
            return
        key = self.parse_key(self.next_token())
        if self.at_end():
            logger.debug("Dropping key %r with no value at end of input", key)
            stack.pop()
            return
        obj[key] = self.start_value(self.next_token(), stack)

    def parse_array_entry(self, arr: JsonArray, stack: List[Container]) -> None:
        """Consume one element of the innermost array, or its closing bracket."""
        if self.at_end() or self.tokens[self.index] == CLOSE_BRACKET:
            self.close(stack)
            return
        arr.append(self.start_value(self.next_token(), stack))




def decode(text: Any, options: Optional[DecodeOptions] = None) -> JsonValue:
    """Decode compact text into Python values.

    Args:
        text: Compact text
        options: Optional decoding options

    Returns:
        The decoded value; None for empty input

    Raises:
        InvalidInputError: If text is not a str
    """
    if not isinstance(text, str):
        raise InvalidInputError("Input must be a string")

    resolved_options = resolve_options(options)
    tokens = tokenize(text)
    if not tokens:
        return None
    parser = Parser(tokens, resolved_options)
    result = parser.parse_value()
    if not parser.at_end():
        logger.debug("Ignoring %d tokens after the root value", len(tokens) - parser.index)
    return result


def resolve_options(options: Optional[DecodeOptions]) -> ResolvedDecodeOptions:
    """Resolve decoding options with defaults."""
    if options is None:
        return ResolvedDecodeOptions()
    return ResolvedDecodeOptions(unquote_keys=options.get("unquoteKeys", False))
