"""Recursive-descent parser for LD text."""

import logging
from typing import Any, Dict, Iterator, List, Optional, Union

from .classifier import KeyLineClassifier, is_blank, strip_indent
from .coercer import ValueCoercer
from .config import ConverterConfig
from .io.line_source import LineSource
from .types import (
    KEY_PREFIX,
    KeyLine,
    KeyType,
    LDDocument,
    ParseContext,
    StructuralError,
    UnexpectedEndOfInput,
)

Container = Union[Dict[str, Any], List[Any]]

_TERMINATORS = {
    KeyType.START_OBJECT: KeyType.END_OBJECT,
    KeyType.START_ARRAY: KeyType.END_ARRAY,
}


class LDParser:
    """
    LD parser over a shared line source.

    Objects and arrays are parsed by mutually recursive calls; every open
    container owns its own ParseContext. Only the line counter, held by the
    line source, is shared.
    """

    def __init__(self, source: LineSource,
                 config: Optional[ConverterConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the LD parser.

        Args:
            source: Line source to read from
            config: Optional converter configuration
            logger: Optional logger instance
        """
        self.source = source
        self.config = config or ConverterConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.classifier = KeyLineClassifier(self.logger)
        self.coercer = ValueCoercer(self.logger)
        self._depth = 0

    @property
    def line_number(self) -> int:
        return self.source.line_number

    def iter_documents(self) -> Iterator[LDDocument]:
        """
        Parse the top level of the input.

        Free text outside any key is ignored. Containers and scalar keys
        become documents, yielded as soon as they are complete.

        Yields:
            LDDocument for each top-level value

        Raises:
            ConversionError: On the first malformed construct
        """
        context = ParseContext()

        for line in self.source:
            key_line = self.classifier.classify(line, self.line_number)

            if key_line is None:
                if context.pending is not None:
                    self._accumulate(context, line)
                continue

            document = self._flush_document(context)
            if document is not None:
                yield document

            if key_line.closes_container:
                raise StructuralError(
                    f'Unmatched terminator "{KEY_PREFIX}{key_line.type.value}"', self.line_number
                )

            if key_line.opens_container:
                value = self._parse_nested(key_line)
                self.logger.debug(f"Completed top-level {key_line.type.name} on line {self.line_number}")
                yield LDDocument(value=value, key_line=key_line)
                continue

            context.pending = key_line
            context.indent = key_line.indent

        document = self._flush_document(context)
        if document is not None:
            yield document

    def parse_object(self, opener: Optional[KeyLine] = None) -> Dict[str, Any]:
        """
        Parse object members up to and including the closing ``~~:}``.

        Args:
            opener: Key line that opened the object, if known

        Returns:
            Dictionary of members in input order
        """
        return self._parse_container(KeyType.START_OBJECT, opener)

    def parse_array(self, opener: Optional[KeyLine] = None) -> List[Any]:
        """
        Parse array elements up to and including the closing ``~~:]``.

        Args:
            opener: Key line that opened the array, if known

        Returns:
            List of elements in input order
        """
        return self._parse_container(KeyType.START_ARRAY, opener)

    def _parse_nested(self, key_line: KeyLine) -> Container:
        return self._parse_container(key_line.type, key_line)

    def _parse_container(self, kind: KeyType, opener: Optional[KeyLine]) -> Container:
        """Shared object/array rule; ``kind`` is the opening key type."""
        self._depth += 1
        try:
            if self._depth > self.config.max_depth:
                raise StructuralError(
                    f"Maximum nesting depth of {self.config.max_depth} exceeded", self.line_number
                )

            container: Container = {} if kind is KeyType.START_OBJECT else []
            terminator = _TERMINATORS[kind]
            context = ParseContext()
            if opener is not None:
                self.logger.debug(f"Entering {kind.name} from line {opener.line_number}, "
                                  f"depth {self._depth}")

            for line in self.source:
                key_line = self.classifier.classify(line, self.line_number)

                if key_line is None:
                    self._accumulate(context, line)
                    continue

                self._flush(container, context)

                if key_line.type is terminator:
                    self.logger.debug(f"Leaving {kind.name} at depth {self._depth}")
                    return container

                if key_line.closes_container:
                    raise StructuralError(
                        f'Unexpected "{KEY_PREFIX}{key_line.type.value}" inside '
                        f'{"object" if kind is KeyType.START_OBJECT else "array"}',
                        self.line_number,
                    )

                if (isinstance(container, dict) and key_line.is_anonymous
                        and key_line.type is not KeyType.COMMENT):
                    raise StructuralError("Anonymous value is not allowed", self.line_number)

                # Data is de-indented relative to the most recent key line.
                context.indent = key_line.indent

                if key_line.opens_container:
                    self._insert(container, key_line, self._parse_nested(key_line))
                else:
                    context.pending = key_line

            raise UnexpectedEndOfInput(line_number=self.line_number)
        finally:
            self._depth -= 1

    def _accumulate(self, context: ParseContext, line: str) -> None:
        """Fold a data line into the pending key's buffer."""
        if context.buffer is None and is_blank(line):
            return

        if context.pending is None:
            raise StructuralError("Data without a key", self.line_number)

        text = strip_indent(self.classifier.data_text(line), context.indent)
        context.append(text)

    def _flush(self, container: Container, context: ParseContext) -> None:
        """Coerce the pending key's data and insert it into the container."""
        pending = context.take()
        data = context.take_data()
        if pending is None or pending.type is KeyType.COMMENT:
            return

        value = self.coercer.coerce(pending.type, data, self.line_number)
        self._insert(container, pending, value)

    def _flush_document(self, context: ParseContext) -> Optional[LDDocument]:
        """Complete a pending top-level scalar, if any."""
        pending = context.take()
        data = context.take_data()
        if pending is None or pending.type is KeyType.COMMENT:
            return None

        value = self.coercer.coerce(pending.type, data, self.line_number)
        self.logger.debug(f"Completed top-level {pending.type.name} on line {self.line_number}")
        return LDDocument(value=value, key_line=pending)

    @staticmethod
    def _insert(container: Container, key_line: KeyLine, value: Any) -> None:
        if isinstance(container, dict):
            container[key_line.name] = value
        else:
            container.append(value)
