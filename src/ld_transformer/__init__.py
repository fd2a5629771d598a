"""
LD Transformer - Bidirectional LD/JSON conversion tool.

Converts between the line-oriented LD notation, where each line introduces
a typed key followed by its literal data, and JSON.
"""

import logging

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .config import ConverterConfig
from .ld_transformer import LDTransformer
from .types import (
    AllocationError,
    ConversionError,
    ConversionResult,
    IndentTooWide,
    JSONInputError,
    LiteralFormatError,
    StructuralError,
    UnexpectedEndOfInput,
)

__all__ = [
    "LDTransformer",
    "ConverterConfig",
    "ConversionResult",
    "ConversionError",
    "StructuralError",
    "LiteralFormatError",
    "UnexpectedEndOfInput",
    "AllocationError",
    "IndentTooWide",
    "JSONInputError",
]
