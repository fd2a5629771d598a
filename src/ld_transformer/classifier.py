"""Key-line classification for LD input."""

import logging
from typing import Optional

from .types import KEY_ESCAPE, KEY_PREFIX, KeyLine, KeyType, StructuralError


def count_indent(line: str) -> int:
    """Return the number of leading space characters."""
    return len(line) - len(line.lstrip(" "))


def is_blank(line: str) -> bool:
    """Return True if the line is empty or whitespace only."""
    return line.strip() == ""


def strip_indent(line: str, indent: int) -> str:
    """Remove at most ``indent`` leading spaces."""
    return line[min(indent, count_indent(line)):]


class KeyLineClassifier:
    """
    Decides whether a raw line declares a typed key or carries data.

    A key line is optional leading spaces, the ``~~:`` prefix, a type sigil
    and an optional key name. A prefix followed by a backslash marks an
    escaped data line instead.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the classifier.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def classify(self, line: str, line_number: int = 0) -> Optional[KeyLine]:
        """
        Classify a raw line.

        Args:
            line: Raw line without its trailing newline
            line_number: Line number used in diagnostics

        Returns:
            KeyLine for a key line, None for a data line

        Raises:
            StructuralError: If the prefix is followed by an unknown sigil
        """
        indent = count_indent(line)
        body = line[indent:]

        if not body.startswith(KEY_PREFIX):
            return None

        rest = body[len(KEY_PREFIX):]
        if rest.startswith(KEY_ESCAPE):
            return None

        key_type = KeyType.from_sigil(rest[:1]) if rest else None
        if key_type is None:
            raise StructuralError(f'Invalid key type: "{body}"', line_number)

        key_line = KeyLine(
            type=key_type,
            name=rest[1:].rstrip(),
            indent=indent,
            line_number=line_number,
        )
        self.logger.debug(f"Line {line_number}: key {key_type.name} {key_line.name!r} "
                          f"at indent {indent}")
        return key_line

    @staticmethod
    def data_text(line: str) -> str:
        """Return a data line with an escaped key prefix unescaped."""
        indent = count_indent(line)
        escaped = KEY_PREFIX + KEY_ESCAPE
        if line.startswith(escaped, indent):
            return line[:indent] + KEY_PREFIX + line[indent + len(escaped):]
        return line
