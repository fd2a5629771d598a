"""Line reader for LD input."""

import io
import logging
from pathlib import Path
from typing import Iterator, Optional, TextIO, Union


class LineSource:
    """
    Lazy, non-restartable reader of raw text lines.

    Trailing newline and carriage-return characters are removed from every
    line. The 1-based line counter is used only for diagnostics.
    """

    def __init__(self, stream: TextIO, logger: Optional[logging.Logger] = None):
        """
        Initialize the line source.

        Args:
            stream: Text stream to read from
            logger: Optional logger instance
        """
        self.stream = stream
        self.logger = logger or logging.getLogger(__name__)
        self.line_number = 0
        self._exhausted = False

    @classmethod
    def from_text(cls, text: str, logger: Optional[logging.Logger] = None) -> "LineSource":
        """Create a line source over an in-memory string."""
        return cls(io.StringIO(text), logger)

    @classmethod
    def from_path(cls, path: Union[str, Path],
                  logger: Optional[logging.Logger] = None) -> "LineSource":
        """Create a line source over a file; the caller owns closing ``source.stream``."""
        return cls(open(path, "r", encoding="utf-8", newline="\n"), logger)

    def next_line(self) -> Optional[str]:
        """
        Read the next line.

        Returns:
            The line without its trailing newline, or None at end of input
        """
        if self._exhausted:
            return None

        line = self.stream.readline()
        if line == "":
            self._exhausted = True
            self.logger.debug(f"End of input after {self.line_number} lines")
            return None

        self.line_number += 1
        return line.rstrip("\r\n")

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        line = self.next_line()
        if line is None:
            raise StopIteration
        return line
