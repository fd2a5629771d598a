"""Core type definitions for the LD Transformer."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


KEY_PREFIX = "~~:"
KEY_ESCAPE = "\\"


class KeyType(Enum):
    """Enumeration of key line types, valued by their sigil."""
    START_OBJECT = "{"
    END_OBJECT = "}"
    START_ARRAY = "["
    END_ARRAY = "]"
    STRING = "$"
    NUMBER = "#"
    BOOLEAN = "?"
    NULL = "!"
    COMMENT = "*"

    @classmethod
    def from_sigil(cls, sigil: str) -> Optional["KeyType"]:
        """Return the key type for a sigil, or None if it is not one."""
        for key_type in cls:
            if key_type.value == sigil:
                return key_type
        return None


class OutputMode(Enum):
    """Enumeration of JSON output modes."""
    JSON_LINES = "json-lines"
    DOCUMENT = "document"


class ErrorType(Enum):
    """Enumeration of error types."""
    STRUCTURE = "structure"
    LITERAL = "literal"
    END_OF_INPUT = "end-of-input"
    MEMORY = "memory"
    INDENT = "indent"
    SYNTAX = "syntax"
    VALUE = "value"


@dataclass
class KeyLine:
    """A classified key line."""
    type: KeyType
    name: str
    indent: int
    line_number: int = 0

    @property
    def is_anonymous(self) -> bool:
        return self.name == ""

    @property
    def opens_container(self) -> bool:
        return self.type in (KeyType.START_OBJECT, KeyType.START_ARRAY)

    @property
    def closes_container(self) -> bool:
        return self.type in (KeyType.END_OBJECT, KeyType.END_ARRAY)


@dataclass
class ParseContext:
    """Parsing state owned by a single open container."""
    pending: Optional[KeyLine] = None
    buffer: Optional[List[str]] = None
    indent: int = 0

    def append(self, text: str) -> None:
        if self.buffer is None:
            self.buffer = []
        self.buffer.append(text)

    def take(self) -> Optional[KeyLine]:
        """Clear the pending key and return it."""
        pending = self.pending
        self.pending = None
        return pending

    def take_data(self) -> Optional[str]:
        """Clear the buffer and return its text with trailing whitespace stripped."""
        if self.buffer is None:
            return None
        data = "".join(self.buffer).rstrip()
        self.buffer = None
        return data


@dataclass
class LDDocument:
    """A completed top-level value and the key line that introduced it."""
    value: Any
    key_line: KeyLine

    @property
    def is_anonymous_container(self) -> bool:
        return self.key_line.opens_container and self.key_line.is_anonymous


@dataclass
class ConversionResult:
    """Result of a conversion run."""
    success: bool
    records: int
    mode: Optional[OutputMode] = None
    lines_read: int = 0
    errors: List[str] = field(default_factory=list)
    exit_code: int = 0


@dataclass
class ErrorResponse:
    """Response for error handling."""
    exit_code: int
    diagnostic: str
    suggested_action: str
    can_recover: bool = False


class ConversionError(Exception):
    """Base exception for conversion errors."""

    def __init__(self, message: str, error_type: ErrorType,
                 line_number: Optional[int] = None, context: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.line_number = line_number
        self.context = context

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"{self.message} on line {self.line_number}"


class StructuralError(ConversionError):
    """A key line appeared where the grammar does not allow it."""

    def __init__(self, message: str, line_number: Optional[int] = None,
                 context: Optional[Any] = None):
        super().__init__(message, ErrorType.STRUCTURE, line_number, context)


class LiteralFormatError(ConversionError):
    """A boolean, null or number literal did not match its required form."""

    def __init__(self, message: str, line_number: Optional[int] = None,
                 context: Optional[Any] = None):
        super().__init__(message, ErrorType.LITERAL, line_number, context)


class UnexpectedEndOfInput(ConversionError):
    """Input ended while a container was still open."""

    def __init__(self, message: str = "Unexpected end of input",
                 line_number: Optional[int] = None, context: Optional[Any] = None):
        super().__init__(message, ErrorType.END_OF_INPUT, line_number, context)


class AllocationError(ConversionError):
    """Memory was exhausted during conversion."""

    def __init__(self, message: str = "Memory allocation error",
                 line_number: Optional[int] = None, context: Optional[Any] = None):
        super().__init__(message, ErrorType.MEMORY, line_number, context)


class IndentTooWide(ConversionError):
    """Text wrapping was requested at an indentation not below the width."""

    def __init__(self, message: str = "Indent must be less than width",
                 line_number: Optional[int] = None, context: Optional[Any] = None):
        super().__init__(message, ErrorType.INDENT, line_number, context)


class JSONInputError(ConversionError):
    """The JSON input of an encode run could not be decoded."""

    def __init__(self, message: str, line_number: Optional[int] = None,
                 context: Optional[Any] = None):
        super().__init__(message, ErrorType.SYNTAX, line_number, context)
