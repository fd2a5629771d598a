"""Streaming reader for concatenated JSON values."""

import json
import logging
from typing import Any, Iterable, Iterator, List, Optional

from ..types import JSONInputError


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-finite number {name} is not valid JSON")


class JSONStreamReader:
    """
    Reads a stream of JSON values one top-level value at a time.

    Values may share a line or span many lines. A value is only decoded once
    its brackets balance, so memory stays bounded by the largest single value.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON stream reader.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.decoder = json.JSONDecoder(parse_constant=_reject_constant)
        self.line_number = 0

    def iter_values(self, lines: Iterable[str]) -> Iterator[Any]:
        """
        Decode top-level JSON values from an iterable of text lines.

        Args:
            lines: Text lines, e.g. an open text stream

        Yields:
            Each decoded top-level value, as soon as it is complete

        Raises:
            JSONInputError: If the input is not a sequence of valid JSON values
        """
        parts: List[str] = []
        depth = 0
        in_string = False
        escaped = False

        for line in lines:
            self.line_number += 1
            parts.append(line)

            # Track bracket depth outside strings to know when to try decoding.
            for char in line:
                if in_string:
                    if escaped:
                        escaped = False
                    elif char == "\\":
                        escaped = True
                    elif char == '"':
                        in_string = False
                elif char == '"':
                    in_string = True
                elif char in "{[":
                    depth += 1
                elif char in "}]":
                    depth -= 1

            if depth > 0 or in_string:
                continue

            remainder = yield from self._drain("".join(parts))
            parts = [remainder] if remainder else []
            depth = 0

        if "".join(parts).strip():
            raise JSONInputError("Unexpected end of JSON input", self.line_number)

    def _drain(self, buffer: str) -> Iterator[Any]:
        """Yield every complete value in the buffer and return the remainder."""
        position = 0
        size = len(buffer)
        while True:
            while position < size and buffer[position].isspace():
                position += 1
            if position == size:
                return ""

            try:
                value, end = self.decoder.raw_decode(buffer, position)
            except json.JSONDecodeError as e:
                if e.pos >= len(buffer.rstrip()):
                    # Incomplete value; wait for more input.
                    return buffer[position:]
                raise JSONInputError(f"Invalid JSON: {e.msg}", self.line_number)
            except RecursionError:
                raise JSONInputError("Invalid JSON: nesting too deep to decode", self.line_number)
            except ValueError as e:
                raise JSONInputError(f"Invalid JSON: {e}", self.line_number)

            self.logger.debug(f"Decoded JSON value ending on line {self.line_number}")
            yield value
            position = end
