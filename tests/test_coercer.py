"""Tests for the value coercer."""

import pytest

from ld_transformer.coercer import ValueCoercer
from ld_transformer.types import ErrorType, KeyType, LiteralFormatError, StructuralError


class TestValueCoercer:
    """Tests for ValueCoercer class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.coercer = ValueCoercer()

    def test_string(self):
        """Test that strings are taken as is."""
        assert self.coercer.coerce(KeyType.STRING, "  spaced \\n text") == "  spaced \\n text"

    def test_string_without_data(self):
        """Test that a string key with no data is empty."""
        assert self.coercer.coerce(KeyType.STRING, None) == ""

    @pytest.mark.parametrize("data, expected", [
        ("true", True), ("TRUE", True), ("True", True),
        ("false", False), ("FaLsE", False),
    ])
    def test_boolean(self, data, expected):
        """Test case-insensitive boolean literals."""
        assert self.coercer.coerce(KeyType.BOOLEAN, data) is expected

    @pytest.mark.parametrize("data", ["yes", "1", "", None, " true", "truex"])
    def test_invalid_boolean(self, data):
        """Test rejection of anything but true or false."""
        with pytest.raises(LiteralFormatError, match="Invalid boolean value"):
            self.coercer.coerce(KeyType.BOOLEAN, data, line_number=4)

    def test_null(self):
        """Test null literals and null keys without data."""
        assert self.coercer.coerce(KeyType.NULL, "null") is None
        assert self.coercer.coerce(KeyType.NULL, "NULL") is None
        assert self.coercer.coerce(KeyType.NULL, None) is None

    def test_invalid_null(self):
        """Test rejection of other null data."""
        with pytest.raises(LiteralFormatError) as exc_info:
            self.coercer.coerce(KeyType.NULL, "none", line_number=9)

        error = exc_info.value
        assert error.error_type == ErrorType.LITERAL
        assert str(error) == 'Invalid null value "none" on line 9'

    def test_number(self):
        """Test number coercion and classification."""
        assert self.coercer.coerce(KeyType.NUMBER, "42") == 42
        assert isinstance(self.coercer.coerce(KeyType.NUMBER, "5.0"), int)
        assert self.coercer.coerce(KeyType.NUMBER, "5.01") == 5.01

    def test_invalid_number(self):
        """Test the diagnostic for a malformed number."""
        with pytest.raises(LiteralFormatError) as exc_info:
            self.coercer.coerce(KeyType.NUMBER, "5.2.3", line_number=12)

        assert str(exc_info.value) == 'Invalid number value "5.2.3" on line 12'

    def test_number_without_data(self):
        """Test that a number key needs data."""
        with pytest.raises(LiteralFormatError, match='Invalid number value ""'):
            self.coercer.coerce(KeyType.NUMBER, None)

    def test_container_type_has_no_scalar(self):
        """Test that container key types cannot be coerced."""
        with pytest.raises(StructuralError):
            self.coercer.coerce(KeyType.START_OBJECT, "x")
