# neki_lang/application/processing/relaxed_json.py

"""Parser for the relaxed JSON dialect used by game asset files

The dialect is a superset of JSON:

- `//` line comments and `/* */` block comments anywhere between tokens
- single or double quoted strings, with line continuations
- `+` signs, hexadecimal integers (`0x1F`), leading or trailing decimal points
- signed `Infinity` and `NaN` number literals

Trailing commas, unquoted keys and octal-looking literals are rejected.
Object keys keep their source order; a repeated key keeps the position of its
first occurrence and takes the value of its last one.

Numbers are evaluated as doubles and then stored as `int` whenever the value
is integral and fits the 64-bit integer ranges, so `1.0`, `1e2` and `0x1F`
come back as `1`, `100` and `31`.
"""

# Standard library imports
from math import inf
from math import isfinite
from math import nan
from typing import NoReturn

# Local imports
from neki_lang.core.domain.exceptions import ParseError
from neki_lang.core.domain.exceptions import SourcePosition
from neki_lang.core.types.json import JSONDict
from neki_lang.core.types.json import JSONList
from neki_lang.core.types.json import JSONType

WHITESPACE = frozenset(" \t\r\n\v\f\xa0\ufeff")
DECIMAL_DIGITS = frozenset("0123456789")
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
QUOTES = frozenset("'\"")

ESCAPES = {
    "'": "'",
    '"': '"',
    "\\": "\\",
    "/": "/",
    "\n": "",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

# First character -> (keyword, value)
WORDS: dict[str, tuple[str, JSONType]] = {
    "t": ("true", True),
    "f": ("false", False),
    "n": ("null", None),
    "I": ("Infinity", "Infinity"),
    "N": ("NaN", "NaN"),
}

SNIPPET_LENGTH = 20

# Containers nest through _value and _array/_object, two interpreter frames per
# level, so 256 levels stay well below the default recursion limit of 1000.
# Deeper documents are rejected with "Nesting too deep".
MAX_NESTING_DEPTH = 256

# Integer ranges as doubles; float(2**63 - 1) rounds up to 2**63
I64_MIN = -(2.0**63)
I64_MAX = 2.0**63
U64_LIMIT = 2.0**64
U64_MAX = 2**64 - 1


def render_char(ch: str | None) -> str:
    """Render a character for error messages"""
    if ch is None or ch == "\0":
        return "EOF"
    return f"'{ch}'"


class RelaxedJSONParser:
    """Single-use recursive descent parser over one text

    The cursor is an index into the text plus the line and column of the
    character under it. `_ch` is None once the end of input is reached.
    """

    __slots__ = ("_text", "_at", "_ch", "_line", "_column")

    def __init__(self, text: str) -> None:
        self._text = text
        self._at = 0
        self._ch: str | None = text[0] if text else None
        self._line = 1
        self._column = 1

    @property
    def position(self) -> SourcePosition:
        """Position of the current character"""
        return SourcePosition(offset=self._at, line=self._line, column=self._column)

    def parse(self) -> JSONType:
        """Parse the whole text as exactly one value"""
        result = self._value(0)
        self._white()
        if self._ch is not None:
            self._error("Syntax error")
        return result

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    def _error(self, message: str) -> NoReturn:
        snippet = self._text[self._at : self._at + SNIPPET_LENGTH]
        raise ParseError(message, self.position, snippet)

    def _peek(self) -> str | None:
        nxt = self._at + 1
        return self._text[nxt] if nxt < len(self._text) else None

    def _next(self, expect: str | None = None) -> str | None:
        """Advance one character, optionally checking the current one first"""
        if expect is not None and self._ch != expect:
            self._error(f"Expected {render_char(expect)} instead of {render_char(self._ch)}")
        if self._ch is None:
            return None

        # CRLF counts as a single line break, on the LF
        if self._ch == "\n" or (self._ch == "\r" and self._peek() != "\n"):
            self._line += 1
            self._column = 1
        else:
            self._column += 1

        self._at += 1
        self._ch = self._text[self._at] if self._at < len(self._text) else None
        return self._ch

    # ------------------------------------------------------------------
    # Whitespace and comments
    # ------------------------------------------------------------------

    def _white(self) -> None:
        while True:
            if self._ch == "/":
                self._comment()
            elif self._ch in WHITESPACE:
                self._next()
            else:
                return

    def _comment(self) -> None:
        self._next("/")
        if self._ch == "/":
            self._inline_comment()
        elif self._ch == "*":
            self._block_comment()
        else:
            self._error("Unrecognized comment")

    def _inline_comment(self) -> None:
        while True:
            self._next()
            if self._ch in ("\n", "\r"):
                self._next()
                return
            if self._ch is None:
                return

    def _block_comment(self) -> None:
        while True:
            self._next()
            while self._ch == "*":
                self._next("*")
                if self._ch == "/":
                    self._next("/")
                    return
            if self._ch is None:
                self._error("Unterminated block comment")

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    def _value(self, depth: int) -> JSONType:
        self._white()
        ch = self._ch
        if ch == "{":
            return self._object(depth + 1)
        if ch == "[":
            return self._array(depth + 1)
        if ch in QUOTES:
            return self._string()
        if ch in ("-", "+", ".") or ch in DECIMAL_DIGITS:
            return self._number()
        return self._word()

    def _word(self) -> JSONType:
        """Match `true`, `false`, `null` or the bare words `Infinity` and `NaN`

        Bare `Infinity` and `NaN` come back as strings; only the number path
        turns them into floats.
        """
        if self._ch is None or self._ch not in WORDS:
            self._error(f"Unexpected {render_char(self._ch)}")
        keyword, value = WORDS[self._ch]
        for expected in keyword:
            self._next(expected)
        return value

    def _number(self) -> int | float:
        sign = 1.0
        lexeme: list[str] = []
        hexadecimal = False
        fractional = False

        if self._ch in ("-", "+"):
            if self._ch == "-":
                sign = -1.0
            self._next()

        # Signed Infinity and NaN are numbers, bare ones are strings
        if self._ch == "I":
            self._word()
            return sign * inf
        if self._ch == "N":
            self._word()
            return nan

        if self._ch == "0":
            lexeme.append("0")
            self._next()
            if self._ch in ("x", "X"):
                lexeme.append(self._ch)
                self._next()
                hexadecimal = True
            elif self._ch in DECIMAL_DIGITS:
                self._error("Octal literal")

        if hexadecimal:
            while self._ch in HEX_DIGITS:
                lexeme.append(self._ch)
                self._next()
        else:
            self._take_digits(lexeme)
            if self._ch == ".":
                fractional = True
                lexeme.append(".")
                self._next()
                self._take_digits(lexeme)
            if self._ch in ("e", "E"):
                fractional = True
                lexeme.append(self._ch)
                self._next()
                if self._ch in ("-", "+"):
                    lexeme.append(self._ch)
                    self._next()
                self._take_digits(lexeme)

        text = "".join(lexeme)
        if hexadecimal:
            digits = text[2:]
            magnitude = int(digits, 16) if digits else -1
            if not 0 <= magnitude <= U64_MAX:
                self._error("Bad hex number")
            number = float(magnitude) * sign
        else:
            try:
                number = float(text) * sign
            except ValueError:
                self._error("Bad number")

        if not isfinite(number):
            self._error("Bad number")

        return classify_number(number, fractional)

    def _take_digits(self, lexeme: list[str]) -> None:
        while self._ch in DECIMAL_DIGITS:
            lexeme.append(self._ch)
            self._next()

    def _string(self) -> str:
        delimiter = self._ch
        if delimiter not in QUOTES:
            self._error("Bad string: expected starting quote")
        chunks: list[str] = []

        while self._next() is not None:
            ch = self._ch
            if ch == delimiter:
                self._next()
                return "".join(chunks)
            if ch == "\\":
                self._next()
                chunks.append(self._escape())
            elif ch != "\r":
                # Bare CR is dropped, bare LF is kept
                chunks.append(ch)

        self._error("Bad string")

    def _escape(self) -> str:
        esc = self._ch
        if esc == "u":
            code = 0
            for _ in range(4):
                self._next()
                if self._ch not in HEX_DIGITS:
                    self._error("Invalid Unicode escape in string")
                code = code * 16 + int(self._ch, 16)
            if 0xD800 <= code <= 0xDFFF:
                self._error("Invalid Unicode codepoint in string")
            return chr(code)
        if esc == "\r":
            # Line continuation, CRLF included
            if self._peek() == "\n":
                self._next()
            return ""
        if esc is None:
            self._error("Unexpected end of input in string escape")
        if esc not in ESCAPES:
            self._error(f"Invalid escape character: {esc}")
        return ESCAPES[esc]

    def _array(self, depth: int) -> JSONList:
        if depth > MAX_NESTING_DEPTH:
            self._error("Nesting too deep")
        items: JSONList = []
        had_comma = False

        self._next("[")
        self._white()
        while self._ch is not None:
            if self._ch == "]":
                if had_comma:
                    self._error("Superfluous trailing comma")
                self._next("]")
                return items
            if self._ch == ",":
                self._error("Missing array element")

            items.append(self._value(depth))

            self._white()
            if self._ch != ",":
                self._next("]")
                return items
            self._next(",")
            had_comma = True
            self._white()

        self._error("Bad array")

    def _object(self, depth: int) -> JSONDict:
        if depth > MAX_NESTING_DEPTH:
            self._error("Nesting too deep")
        members: JSONDict = {}
        had_comma = False

        self._next("{")
        self._white()
        while self._ch is not None:
            if self._ch == "}":
                if had_comma:
                    self._error("Superfluous trailing comma")
                self._next("}")
                return members
            if self._ch == ",":
                self._error("Expected key")
            if self._ch not in QUOTES:
                self._error("Unquoted key")

            key = self._string()
            self._white()
            self._next(":")
            # Plain dict assignment: a repeated key keeps its first position
            members[key] = self._value(depth)

            self._white()
            if self._ch != ",":
                self._next("}")
                return members
            self._next(",")
            had_comma = True
            self._white()

        self._error("Bad object")


def classify_number(number: float, fractional: bool) -> int | float:
    """Store a finite double as an exact int when it is integer-representable

    Integer lexemes (decimal or hex) become ints across the signed and unsigned
    64-bit ranges. Lexemes with a fraction or exponent become ints only when
    the value is integral and within the signed range.

    Args:
        number: Evaluated value of the literal, sign applied
        fractional: Whether the literal had a decimal point or an exponent

    Returns:
        An int when representable, otherwise the float unchanged
    """
    if fractional:
        if number.is_integer() and I64_MIN <= number <= I64_MAX:
            return int(number)
        return number
    if I64_MIN <= number < U64_LIMIT:
        return int(number)
    return number


def parse(text: str) -> JSONType:
    """Parse relaxed JSON text into a value

    Args:
        text: Full document text

    Returns:
        The parsed value; objects are insertion-ordered dicts

    Raises:
        ParseError: If the text is not exactly one well-formed value
    """
    return RelaxedJSONParser(text).parse()
