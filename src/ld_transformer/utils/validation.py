"""Validation utilities for LD literals."""

from decimal import Decimal, InvalidOperation
import math
from typing import Union

DIGITS = "0123456789"
NONZERO_DIGITS = "123456789"
SIGNS = "+-"
EXPONENT_MARKERS = "eE"

# Integral values with more digits than this are not rendered by json.
MAX_INTEGER_DIGITS = 4300


class ValidationUtils:
    """Utility class for validating and converting literal text."""

    @staticmethod
    def is_valid_number(text: str) -> bool:
        """
        Check a numeric literal against the LD number grammar.

        Surrounding spaces are ignored. The literal is an optional sign, digits
        with at most one decimal point (each point followed by a digit), and an
        optional exponent marker preceded by a digit and followed by an
        optional sign and at least one digit.

        Args:
            text: Literal text to check

        Returns:
            True if the literal is a valid number
        """
        s = text.strip(" ")
        if not s:
            return False

        i = 0
        n = len(s)
        if s[i] in SIGNS:
            i += 1

        mantissa_digits = 0
        seen_dot = False
        while i < n and s[i] not in EXPONENT_MARKERS:
            char = s[i]
            if char in DIGITS:
                mantissa_digits += 1
            elif char == ".":
                if seen_dot:
                    return False
                if i + 1 >= n or s[i + 1] not in DIGITS:
                    return False
                seen_dot = True
            else:
                return False
            i += 1

        if mantissa_digits == 0:
            return False

        if i == n:
            return True

        # Exponent
        if s[i - 1] not in DIGITS:
            return False
        i += 1
        if i < n and s[i] in SIGNS:
            i += 1
        if i == n:
            return False
        return all(char in DIGITS for char in s[i:])

    @staticmethod
    def is_real_literal(text: str) -> bool:
        """
        Decide whether a valid literal is written as a real number.

        Only a fractional part containing a nonzero digit counts, so ``5.0``
        and ``5.00`` are integers while ``5.01`` is real.
        """
        s = text.strip(" ")
        for marker in EXPONENT_MARKERS:
            s = s.split(marker)[0]
        if "." not in s:
            return False
        fraction = s.split(".", 1)[1]
        return any(char in NONZERO_DIGITS for char in fraction)

    @staticmethod
    def parse_number(text: str) -> Union[int, float]:
        """
        Convert a valid numeric literal to an int or float.

        Args:
            text: Literal that passed ``is_valid_number``

        Returns:
            int for integer literals, float for real literals

        Raises:
            ValueError: If the literal is invalid or out of range
        """
        if not ValidationUtils.is_valid_number(text):
            raise ValueError(f"Invalid number literal: {text!r}")

        s = text.strip(" ")
        if not ValidationUtils.is_real_literal(s):
            try:
                value = Decimal(s)
            except InvalidOperation:
                raise ValueError(f"Invalid number literal: {text!r}")

            # Exponent literals such as 1e-3 are only integers when integral.
            if value == value.to_integral_value():
                if value != 0 and value.adjusted() >= MAX_INTEGER_DIGITS:
                    raise ValueError(f"Number out of range: {text!r}")
                return int(value)

        result = float(s)
        if math.isinf(result):
            raise ValueError(f"Number out of range: {text!r}")
        return result
