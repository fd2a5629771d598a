"""Utility functions for the LD Transformer."""

from .text_wrap import wrap
from .validation import ValidationUtils

__all__ = ["ValidationUtils", "wrap"]
