"""Grammar constants for the compact text format."""

OPEN_BRACE = "{"
CLOSE_BRACE = "}"
OPEN_BRACKET = "["
CLOSE_BRACKET = "]"
STRUCTURAL = frozenset((OPEN_BRACE, CLOSE_BRACE, OPEN_BRACKET, CLOSE_BRACKET))

QUOTE = '"'
BACKSLASH = "\\"
SPACE = " "
# Only these separate tokens; other whitespace belongs to the atom it sits in
SEPARATORS = frozenset((" ", "\t", "\n"))

NULL_LITERAL = "null"
TRUE_LITERAL = "true"
FALSE_LITERAL = "false"
LITERALS = {NULL_LITERAL: None, TRUE_LITERAL: True, FALSE_LITERAL: False}

NAN_LITERAL = "NaN"
INFINITY_LITERAL = "Infinity"
NEG_INFINITY_LITERAL = "-Infinity"
NON_FINITE = {
    NAN_LITERAL: float("nan"),
    INFINITY_LITERAL: float("inf"),
    "+" + INFINITY_LITERAL: float("inf"),
    NEG_INFINITY_LITERAL: float("-inf"),
}

DEFAULT_MAX_DEPTH = 100
