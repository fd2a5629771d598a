"""Rendering of JSON values as LD text."""

import logging
import math
from typing import Any, Iterator, Optional, TextIO

from .config import ConverterConfig
from .types import KEY_ESCAPE, KEY_PREFIX, ConversionError, ErrorType, KeyType
from .utils.text_wrap import literalize_newlines, wrap


class LDSerializer:
    """
    Serializer from JSON values to indented LD text.

    Every value gets a key line; containers also get a closing key line.
    Nesting adds ``config.indent_step`` spaces per level and string data is
    wrapped at ``config.wrap_width`` columns.
    """

    def __init__(self, config: Optional[ConverterConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the LD serializer.

        Args:
            config: Optional converter configuration
            logger: Optional logger instance
        """
        self.config = config or ConverterConfig()
        self.logger = logger or logging.getLogger(__name__)

    def serialize(self, value: Any, key: str = "") -> str:
        """
        Render a value as LD text.

        Args:
            value: JSON-compatible value
            key: Key name for the top-level key line

        Returns:
            LD text ending with a newline
        """
        return "".join(line + "\n" for line in self.iter_lines(value, key))

    def write(self, value: Any, stream: TextIO, key: str = "") -> int:
        """
        Write a value as LD text to a stream.

        Returns:
            Number of lines written
        """
        count = 0
        for line in self.iter_lines(value, key):
            stream.write(line + "\n")
            count += 1
        return count

    def iter_lines(self, value: Any, key: str = "", indent: int = 0) -> Iterator[str]:
        """
        Yield the LD lines of a value depth-first.

        Args:
            value: JSON-compatible value
            key: Key name, empty for anonymous values
            indent: Indentation of the value's key line

        Raises:
            ConversionError: For values that have no LD form
            IndentTooWide: If string data is nested too deep to wrap
        """
        if indent // self.config.indent_step >= self.config.max_depth:
            raise ConversionError(
                f"Maximum nesting depth of {self.config.max_depth} exceeded", ErrorType.STRUCTURE
            )

        pad = " " * indent

        if isinstance(value, dict):
            yield self._key_line(pad, KeyType.START_OBJECT, key)
            for child_key, child in value.items():
                yield from self.iter_lines(child, str(child_key), indent + self.config.indent_step)
            yield self._key_line(pad, KeyType.END_OBJECT)

        elif isinstance(value, list):
            yield self._key_line(pad, KeyType.START_ARRAY, key)
            for child in value:
                yield from self.iter_lines(child, "", indent + self.config.indent_step)
            yield self._key_line(pad, KeyType.END_ARRAY)

        elif isinstance(value, bool):
            # Booleans share the number sigil on output.
            yield self._key_line(pad, KeyType.NUMBER, key)
            yield pad + ("true" if value else "false")

        elif isinstance(value, int):
            yield self._key_line(pad, KeyType.NUMBER, key)
            yield pad + str(value)

        elif isinstance(value, float):
            if not math.isfinite(value):
                raise ConversionError(f"Cannot represent {value} as LD", ErrorType.VALUE)
            yield self._key_line(pad, KeyType.NUMBER, key)
            yield pad + repr(value)

        elif value is None:
            yield self._key_line(pad, KeyType.NULL, key)
            yield pad + "null"

        elif isinstance(value, str):
            yield self._key_line(pad, KeyType.STRING, key)
            for line in wrap(value, self.config.wrap_width, indent):
                yield self._escape(line)

        else:
            raise ConversionError(
                f"Unsupported value type: {type(value).__name__}", ErrorType.VALUE
            )

    @staticmethod
    def _key_line(pad: str, key_type: KeyType, key: str = "") -> str:
        return f"{pad}{KEY_PREFIX}{key_type.value}{literalize_newlines(key)}"

    @staticmethod
    def _escape(line: str) -> str:
        """Escape a data line that would otherwise read as a key line."""
        body = line.lstrip(" ")
        if body.startswith(KEY_PREFIX):
            start = len(line) - len(body) + len(KEY_PREFIX)
            return line[:start] + KEY_ESCAPE + line[start:]
        return line
