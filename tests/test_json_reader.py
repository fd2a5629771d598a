"""Tests for the streaming JSON reader."""

import io

import pytest

from ld_transformer.io.json_reader import JSONStreamReader
from ld_transformer.types import ErrorType, JSONInputError


class TestJSONStreamReader:
    """Tests for JSONStreamReader class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.reader = JSONStreamReader()

    def _read(self, text):
        return list(self.reader.iter_values(io.StringIO(text)))

    def test_single_document(self):
        """Test a pretty-printed document spanning several lines."""
        text = '{\n  "a": [1, 2],\n  "b": {"c": null}\n}\n'

        assert self._read(text) == [{"a": [1, 2], "b": {"c": None}}]
        assert self.reader.line_number == 4

    def test_json_lines(self):
        """Test one value per line."""
        assert self._read('{"n": 1}\n{"n": 2}\n[3]\n') == [{"n": 1}, {"n": 2}, [3]]

    def test_values_sharing_a_line(self):
        """Test concatenated values on one line."""
        assert self._read('{"a":1} [2] "x" 4 true null\n') == [{"a": 1}, [2], "x", 4, True, None]

    def test_brackets_inside_strings(self):
        """Test that brackets in strings do not affect value boundaries."""
        text = '{"s": "}]{[", "t": "quote \\" }"}\n{"u": 1}\n'

        assert self._read(text) == [{"s": "}]{[", "t": 'quote " }'}, {"u": 1}]

    def test_unterminated_string(self):
        """Test input ending inside a string literal."""
        text = '["a\n'

        with pytest.raises(JSONInputError):
            self._read(text)

    def test_values_are_streamed(self):
        """Test that a value is yielded before later lines are read."""
        values = self.reader.iter_values(io.StringIO('{"a": 1}\n{"b":\n2}\n'))

        assert next(values) == {"a": 1}
        assert self.reader.line_number == 1
        assert next(values) == {"b": 2}
        assert self.reader.line_number == 3

    def test_empty_input(self):
        """Test that blank input yields nothing."""
        assert self._read("") == []
        assert self._read("\n  \n") == []

    def test_key_order_preserved(self):
        """Test that object keys keep input order."""
        value = self._read('{"z": 1, "a": 2, "m": 3}')[0]

        assert list(value) == ["z", "a", "m"]

    def test_invalid_json(self):
        """Test a syntax error with its line number."""
        with pytest.raises(JSONInputError) as exc_info:
            self._read('{"a": 1}\n{"b": }\n')

        error = exc_info.value
        assert error.error_type == ErrorType.SYNTAX
        assert error.line_number == 2
        assert error.message.startswith("Invalid JSON")

    def test_stray_closing_bracket(self):
        """Test a closing bracket without an opener."""
        with pytest.raises(JSONInputError, match="Invalid JSON"):
            self._read("]\n")

    def test_truncated_input(self):
        """Test input ending inside a value."""
        with pytest.raises(JSONInputError) as exc_info:
            self._read('{"a": [1,\n2')

        assert str(exc_info.value) == "Unexpected end of JSON input on line 2"

    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_constants_rejected(self, literal):
        """Test that non-standard constants are not accepted."""
        with pytest.raises(JSONInputError, match="Non-finite number"):
            self._read(f'{{"x": {literal}}}\n')

    def test_value_over_many_lines(self):
        """Test a large array written one element per line."""
        text = "[\n" + "1,\n" * 2000 + "1\n]\n"

        assert self._read(text) == [[1] * 2001]
        assert self.reader.line_number == 2003

    def test_nesting_too_deep_to_decode(self):
        """Test that very deep nesting is a diagnostic, not a RecursionError."""
        depth = 100000
        with pytest.raises(JSONInputError) as exc_info:
            self._read("[" * depth + "]" * depth + "\n")

        assert str(exc_info.value) == "Invalid JSON: nesting too deep to decode on line 1"
