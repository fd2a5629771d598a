"""Conversion of accumulated LD data into typed values."""

import logging
from typing import Any, Optional

from .types import KeyType, LiteralFormatError, StructuralError
from .utils.validation import ValidationUtils


class ValueCoercer:
    """Turns the text gathered for a key into a value of the key's type."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the value coercer.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def coerce(self, key_type: KeyType, data: Optional[str], line_number: int = 0) -> Any:
        """
        Coerce accumulated data according to a key type.

        Args:
            key_type: Type of the pending key
            data: Joined data with trailing whitespace stripped, or None if
                no data line was seen
            line_number: Line number used in diagnostics

        Returns:
            The typed value

        Raises:
            LiteralFormatError: If a boolean, null or number literal is malformed
            StructuralError: If the key type does not carry a scalar value
        """
        if key_type is KeyType.STRING:
            return data if data is not None else ""

        if key_type is KeyType.BOOLEAN:
            return self._coerce_boolean(data, line_number)

        if key_type is KeyType.NULL:
            return self._coerce_null(data, line_number)

        if key_type is KeyType.NUMBER:
            return self._coerce_number(data, line_number)

        raise StructuralError(f"Key type {key_type.name} has no scalar value", line_number)

    def _coerce_boolean(self, data: Optional[str], line_number: int) -> bool:
        text = data or ""
        lowered = text.lower()
        if lowered not in ("true", "false"):
            raise LiteralFormatError(f'Invalid boolean value "{text}"', line_number)
        return lowered == "true"

    def _coerce_null(self, data: Optional[str], line_number: int) -> None:
        if data is not None and data.lower() != "null":
            raise LiteralFormatError(f'Invalid null value "{data}"', line_number)
        return None

    def _coerce_number(self, data: Optional[str], line_number: int) -> Any:
        text = data or ""
        try:
            return ValidationUtils.parse_number(text)
        except ValueError as e:
            self.logger.debug(f"Number conversion failed: {e}")
            raise LiteralFormatError(f'Invalid number value "{text}"', line_number)
