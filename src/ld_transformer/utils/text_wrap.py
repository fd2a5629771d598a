"""Word wrapping for string data written as LD."""

from typing import List

from ..types import IndentTooWide


def literalize_newlines(text: str) -> str:
    """Replace newline characters with the two characters backslash and n."""
    return text.replace("\n", "\\n")


def _columns(char: str) -> int:
    return 2 if char == "\n" else 1


def _is_break(char: str) -> bool:
    # A carriage return at the end of a line would be read back as a line ending.
    return char.isspace() and char != "\r"


def _is_blank_on_output(char: str) -> bool:
    return char.isspace() and char != "\n"


def _fit(text: str, limit: int) -> int:
    """Return how many leading characters of ``text`` fit in ``limit`` columns."""
    used = 0
    for position, char in enumerate(text):
        used += _columns(char)
        if used > limit:
            return max(position, 1)
    return len(text)


def wrap(text: str, width: int = 80, indent: int = 0) -> List[str]:
    """
    Wrap text into indented lines no wider than ``width`` columns.

    Each line takes the longest prefix of the remaining text that fits in
    ``width - indent`` columns, breaking after the last whitespace character
    within that limit, or at the limit when there is none. The whitespace
    stays at the end of its line, so joining the de-indented lines with no
    separator restores the text. Newlines are written as ``\\n`` and take
    two columns.

    A first line would be blank if the text opens with a run of whitespace
    longer than the limit. Blank lines before any data are not read back, so
    the first line then runs on to the first visible character.

    Args:
        text: Text to wrap
        width: Total line width
        indent: Spaces placed before every line

    Returns:
        Wrapped lines without trailing newlines

    Raises:
        IndentTooWide: If indent is not less than width
    """
    if indent >= width:
        raise IndentTooWide(context={"width": width, "indent": indent})

    if not text:
        return [""]

    limit = width - indent
    pad = " " * indent
    lines = []
    remaining = text

    while True:
        fit = _fit(remaining, limit)
        if fit == len(remaining):
            break

        cut = fit
        for position in range(fit - 1, 0, -1):
            if _is_break(remaining[position]):
                cut = position + 1
                break
        else:
            if cut > 1 and remaining[cut - 1] == "\r":
                cut -= 1

        if not lines and all(_is_blank_on_output(char) for char in remaining[:cut]):
            cut = next(
                (position + 1 for position, char in enumerate(remaining)
                 if not _is_blank_on_output(char)),
                len(remaining),
            )

        lines.append(pad + literalize_newlines(remaining[:cut]))
        remaining = remaining[cut:]
        if not remaining:
            return lines

    lines.append(pad + literalize_newlines(remaining))
    return lines
