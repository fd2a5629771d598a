"""Tests for error handler."""

import pytest

from ld_transformer.error_handler import EXIT_FAILURE, ErrorHandler
from ld_transformer.types import (
    AllocationError,
    ConversionError,
    ErrorType,
    IndentTooWide,
    JSONInputError,
    LiteralFormatError,
    StructuralError,
    UnexpectedEndOfInput,
)


class TestConversionErrors:
    """Tests for the conversion error hierarchy."""

    def test_str_includes_line(self):
        """Test the diagnostic format."""
        error = StructuralError("Anonymous value is not allowed", 2)

        assert str(error) == "Anonymous value is not allowed on line 2"
        assert error.error_type == ErrorType.STRUCTURE

    def test_str_without_line(self):
        """Test errors raised before a line number is known."""
        assert str(IndentTooWide()) == "Indent must be less than width"

    def test_default_messages(self):
        """Test the fixed messages of the parameterless errors."""
        assert UnexpectedEndOfInput(line_number=7).message == "Unexpected end of input"
        assert AllocationError().message == "Memory allocation error"

    @pytest.mark.parametrize("error, error_type", [
        (StructuralError("x"), ErrorType.STRUCTURE),
        (LiteralFormatError("x"), ErrorType.LITERAL),
        (UnexpectedEndOfInput(), ErrorType.END_OF_INPUT),
        (AllocationError(), ErrorType.MEMORY),
        (IndentTooWide(), ErrorType.INDENT),
        (JSONInputError("x"), ErrorType.SYNTAX),
    ])
    def test_error_types(self, error, error_type):
        """Test that every subclass carries its error type."""
        assert isinstance(error, ConversionError)
        assert error.error_type == error_type


class TestErrorHandler:
    """Tests for ErrorHandler class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.error_handler = ErrorHandler()

    def test_format_diagnostic(self):
        """Test that the diagnostic is the error text."""
        error = LiteralFormatError('Invalid number value "5.2.3"', 4)

        assert self.error_handler.format_diagnostic(error) == 'Invalid number value "5.2.3" on line 4'

    def test_handle_structure_error(self):
        """Test handling of structural errors."""
        response = self.error_handler.handle_conversion_error(
            StructuralError('Unmatched terminator "~~:}"', 1)
        )

        assert response.exit_code == EXIT_FAILURE
        assert response.diagnostic == 'Unmatched terminator "~~:}" on line 1'
        assert not response.can_recover
        assert "matching" in response.suggested_action

    def test_handle_literal_error(self):
        """Test handling of literal errors."""
        response = self.error_handler.handle_conversion_error(
            LiteralFormatError('Invalid boolean value "yes"', 3)
        )

        assert "true/false" in response.suggested_action

    def test_handle_end_of_input(self):
        """Test handling of containers left open."""
        response = self.error_handler.handle_conversion_error(UnexpectedEndOfInput(line_number=9))

        assert response.diagnostic == "Unexpected end of input on line 9"
        assert "close" in response.suggested_action.lower()

    def test_handle_memory_error(self):
        """Test handling of memory errors."""
        response = self.error_handler.handle_conversion_error(AllocationError(line_number=1))

        assert "memory" in response.suggested_action.lower()
        assert not response.can_recover

    def test_handle_indent_error(self):
        """Test that the indent suggestion names the width."""
        error = IndentTooWide(line_number=1, context={"width": 80, "indent": 80})
        response = self.error_handler.handle_conversion_error(error)

        assert response.diagnostic == "Indent must be less than width on line 1"
        assert "80 columns" in response.suggested_action

    def test_handle_indent_error_without_context(self):
        """Test the indent suggestion without width details."""
        response = self.error_handler.handle_conversion_error(IndentTooWide())

        assert "wrap width" in response.suggested_action

    def test_handle_syntax_error(self):
        """Test handling of invalid JSON input."""
        response = self.error_handler.handle_conversion_error(
            JSONInputError("Invalid JSON: Expecting value", 2)
        )

        assert "JSON" in response.suggested_action

    def test_handle_value_error(self):
        """Test handling of values without a representation."""
        error = ConversionError("Unsupported value type: set", ErrorType.VALUE)
        response = self.error_handler.handle_conversion_error(error)

        assert response.exit_code == EXIT_FAILURE
        assert "representation" in response.suggested_action

    def test_errors_are_logged(self, caplog):
        """Test that handled errors are logged at error level."""
        with caplog.at_level("ERROR"):
            self.error_handler.handle_conversion_error(StructuralError("Data without a key", 4))

        assert "Data without a key on line 4" in caplog.text
