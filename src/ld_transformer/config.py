"""Converter configuration."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ConverterConfig:
    """
    Settings shared by both conversion directions.

    Attributes:
        wrap_width: Column width used when wrapping string data on encode
        indent_step: Spaces added per nesting level on encode
        json_indent: Indent for single-document JSON output (None = compact)
        ensure_ascii: Escape non-ASCII characters in JSON output
        max_depth: Maximum container nesting accepted in either direction
        enable_profiling: Profile each conversion and log a summary
    """

    wrap_width: int = 80
    indent_step: int = 4
    json_indent: Optional[int] = None
    ensure_ascii: bool = False
    max_depth: int = 256
    enable_profiling: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        if self.wrap_width <= 0:
            raise ValueError("wrap_width must be positive")

        if self.indent_step <= 0:
            raise ValueError("indent_step must be positive")

        if self.json_indent is not None and self.json_indent < 0:
            raise ValueError("json_indent must be non-negative")

        if self.max_depth <= 0:
            raise ValueError("max_depth must be positive")
