# neki_lang/core/domain/exceptions.py

"""Exceptions raised by neki_lang"""

# Standard library imports
from dataclasses import dataclass
from json import dumps


@dataclass(slots=True, frozen=True)
class SourcePosition:
    """Location of a character in parsed text, used only for diagnostics"""

    offset: int
    line: int
    column: int


class ParseError(ValueError):
    """Raised when relaxed-JSON text is not a single well-formed value

    Attributes:
        message: Human-readable description of the problem
        position: Offset, 1-based line and 1-based column of the offending character
        snippet: Up to 20 characters of source starting at the offending character
    """

    def __init__(self, message: str, position: SourcePosition, snippet: str) -> None:
        self.message = message
        self.position = position
        self.snippet = snippet
        super().__init__(
            f"{message} at line {position.line} column {position.column}. "
            f"Next part: {dumps(snippet, ensure_ascii=False)}"
        )

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column


class ConfigError(Exception):
    """Raised when a configuration file cannot be read, parsed or written"""
