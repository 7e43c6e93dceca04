"""
Reversing Scanner — feeds the body to the segmenter bottom-up.

The whole text is reversed at character level, not just the line order: a
line starting with ">" then ends with ">" and the classifiers in patterns.py
can anchor on the end of the reversed line. Hidden fragments are a suffix of
the email, so walking from the bottom lets the segmenter settle hidden/visible
in the same pass.
"""
from typing import Iterator

from mailstrip.exceptions import LineTooLongError


def reverse_text(text: str) -> str:
    """Code-point reversal."""
    return text[::-1]


def iter_reversed_lines(text: str, max_line_bytes: int) -> Iterator[str]:
    """
    Yield the lines of *text*, last line first, each reversed.

    A body ending in a newline yields an empty line first; an empty body
    yields a single empty line.

    Raises:
        LineTooLongError: a line is larger than *max_line_bytes* once UTF-8
            encoded. Nothing after it is yielded.
    """
    lines = reverse_text(text).split("\n")
    total = len(lines)

    for position, line in enumerate(lines):
        # Characters are at most 4 bytes, so short lines skip the encode.
        if len(line) * 4 > max_line_bytes:
            size = len(line.encode("utf-8", errors="surrogatepass"))
            if size > max_line_bytes:
                raise LineTooLongError(
                    line_number=total - position,
                    size=size,
                    limit=max_line_bytes,
                )
        yield line
