"""Error handling implementation for the LD Transformer."""

import logging
from typing import Optional

from .types import ConversionError, ErrorResponse, ErrorType

EXIT_FAILURE = 1


class ErrorHandler:
    """
    Error handler for LD Transformer conversions.

    Every conversion error is fatal. The handler logs it, formats the
    diagnostic and suggests how to fix the input.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def format_diagnostic(self, error: ConversionError) -> str:
        """Return the ``<message> on line <n>`` diagnostic for an error."""
        return str(error)

    def handle_conversion_error(self, error: ConversionError) -> ErrorResponse:
        """
        Handle a conversion error and provide a suggested action.

        Args:
            error: ConversionError to handle

        Returns:
            ErrorResponse with the diagnostic and exit code
        """
        diagnostic = self.format_diagnostic(error)
        self.logger.error(f"Conversion error: {error.error_type.value} - {diagnostic}")

        if error.error_type == ErrorType.STRUCTURE:
            action = self._handle_structure_error(error)
        elif error.error_type == ErrorType.LITERAL:
            action = self._handle_literal_error(error)
        elif error.error_type == ErrorType.END_OF_INPUT:
            action = self._handle_end_of_input_error(error)
        elif error.error_type == ErrorType.MEMORY:
            action = self._handle_memory_error(error)
        elif error.error_type == ErrorType.INDENT:
            action = self._handle_indent_error(error)
        elif error.error_type == ErrorType.SYNTAX:
            action = "Check the JSON input for syntax errors near the reported line."
        else:
            action = "Remove values that have no JSON or LD representation and retry."

        return ErrorResponse(
            exit_code=EXIT_FAILURE,
            diagnostic=diagnostic,
            suggested_action=action,
            can_recover=False
        )

    def _handle_structure_error(self, error: ConversionError) -> str:
        """Handle misplaced key lines."""
        return ("Check that every ~~:{ and ~~:[ has a matching ~~:} or ~~:], "
                "that object keys are named, and that data follows a key line.")

    def _handle_literal_error(self, error: ConversionError) -> str:
        """Handle malformed boolean, null and number literals."""
        return ("Use true/false for ~~:? keys, null for ~~:! keys and a plain "
                "decimal number for ~~:# keys.")

    def _handle_end_of_input_error(self, error: ConversionError) -> str:
        """Handle containers left open at end of input."""
        return "Close every open container before the end of the input."

    def _handle_memory_error(self, error: ConversionError) -> str:
        """Handle memory exhaustion."""
        return ("Reduce the size of individual top-level records or increase "
                "available memory.")

    def _handle_indent_error(self, error: ConversionError) -> str:
        """Handle wrapping at an indentation not below the width."""
        width = error.context.get("width") if error.context else None
        if width is not None:
            return (f"Nesting is too deep to wrap within {width} columns; "
                    "increase the wrap width or reduce the indent step.")
        return "Increase the wrap width or reduce the indent step."
