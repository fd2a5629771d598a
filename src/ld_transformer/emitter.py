"""JSON output for decoded LD documents."""

import json
import logging
from typing import Any, Iterable, Optional, TextIO

from .config import ConverterConfig
from .types import LDDocument, OutputMode, StructuralError


class JSONEmitter:
    """
    Writes decoded documents as JSON.

    An anonymous top-level container switches to single-document mode: the
    value is held until end of input and written once. Otherwise every
    document is written as one compact JSON line as soon as it completes.
    """

    def __init__(self, stream: TextIO,
                 config: Optional[ConverterConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON emitter.

        Args:
            stream: Text stream to write JSON to
            config: Optional converter configuration
            logger: Optional logger instance
        """
        self.stream = stream
        self.config = config or ConverterConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.mode: Optional[OutputMode] = None

    def emit(self, documents: Iterable[LDDocument]) -> int:
        """
        Write every document from an iterable.

        Args:
            documents: Documents in input order, typically a parser stream

        Returns:
            Number of JSON values written

        Raises:
            StructuralError: If more than one value follows an anonymous container
        """
        iterator = iter(documents)
        first = next(iterator, None)
        if first is None:
            self.logger.debug("No top-level values in input")
            return 0

        if first.is_anonymous_container:
            self.mode = OutputMode.DOCUMENT
            extra = next(iterator, None)
            if extra is not None:
                raise StructuralError(
                    "Only one top-level value is allowed after an anonymous container",
                    extra.key_line.line_number,
                )
            self.write_document(first.value)
            return 1

        self.mode = OutputMode.JSON_LINES
        self.write_line(first.value)
        count = 1
        for document in iterator:
            self.write_line(document.value)
            count += 1
        return count

    def write_line(self, value: Any) -> None:
        """Write a value as one compact JSON line."""
        text = json.dumps(value, ensure_ascii=self.config.ensure_ascii, separators=(",", ":"))
        self.stream.write(text + "\n")
        self.logger.debug(f"Wrote JSON line of {len(text)} characters")

    def write_document(self, value: Any) -> None:
        """Write a value as a single JSON document."""
        if self.config.json_indent is None:
            text = json.dumps(value, ensure_ascii=self.config.ensure_ascii, separators=(",", ":"))
        else:
            text = json.dumps(value, ensure_ascii=self.config.ensure_ascii,
                              indent=self.config.json_indent)
        self.stream.write(text + "\n")
        self.logger.debug(f"Wrote JSON document of {len(text)} characters")
