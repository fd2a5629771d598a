"""Input readers for the LD Transformer."""

from .json_reader import JSONStreamReader
from .line_source import LineSource

__all__ = ["JSONStreamReader", "LineSource"]
