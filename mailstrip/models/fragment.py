"""
Fragment — a run of body lines sharing the same quoted-ness.
"""
from typing import List, Optional

from mailstrip.config.constants import WHITESPACE_CHARS


class Fragment:
    """
    A parsed section of an email body.

    While the segmenter holds a fragment open, ``lines`` buffers the lines in
    scan order (bottom-up, each line reversed) and the ``add_line`` / ``mark_*``
    methods may change it. ``finish()`` freezes the lines into ``content`` in
    natural reading order; content and flags are read-only from then on.
    """

    def __init__(self, quoted: bool = False, lines: Optional[List[str]] = None) -> None:
        self._quoted = quoted
        self._lines: List[str] = list(lines or [])
        self._content = ""
        self._signature = False
        self._forwarded = False
        self._hidden = False
        self._finished = False

    # ------------------------------------------------------------------
    # Read-only view
    # ------------------------------------------------------------------

    @property
    def quoted(self) -> bool:
        return self._quoted

    @property
    def signature(self) -> bool:
        return self._signature

    @property
    def forwarded(self) -> bool:
        return self._forwarded

    @property
    def hidden(self) -> bool:
        return self._hidden

    @property
    def content(self) -> str:
        return self._content

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def first_line(self) -> str:
        """Chronologically first buffered line (still reversed)."""
        return self._lines[-1]

    @property
    def is_visible(self) -> bool:
        return not self._hidden

    # ------------------------------------------------------------------
    # Building (open fragments only)
    # ------------------------------------------------------------------

    def _check_open(self) -> None:
        if self._finished:
            raise RuntimeError("fragment already finished")

    def add_line(self, line: str) -> None:
        self._check_open()
        self._lines.append(line)

    def mark_quoted(self) -> None:
        self._check_open()
        self._quoted = True

    def mark_signature(self) -> None:
        self._check_open()
        self._signature = True

    def mark_forwarded(self) -> None:
        self._check_open()
        self._forwarded = True

    def finish(self, trailing: bool = False) -> None:
        """
        Join the buffered lines and restore reading order.

        A *trailing* fragment (nothing visible found below it yet) is hidden
        when it is quoted, a signature, or blank. Calling finish() on a
        finished fragment does nothing.
        """
        if self._finished:
            return
        self._content = "\n".join(self._lines)[::-1]
        self._lines = []
        if trailing and (
            self._quoted or self._signature or self._content.strip(WHITESPACE_CHARS) == ""
        ):
            self._hidden = True
        self._finished = True

    def to_dict(self) -> dict:
        return {
            "content": self._content,
            "quoted": self._quoted,
            "signature": self._signature,
            "forwarded": self._forwarded,
            "hidden": self._hidden,
        }

    def __str__(self) -> str:
        return self._content

    def __repr__(self) -> str:
        flags = [
            name
            for name in ("quoted", "signature", "forwarded", "hidden")
            if getattr(self, name)
        ]
        preview = self._content[:20].replace("\n", "\\n")
        return f"Fragment('{preview}', {'|'.join(flags) or 'plain'})"
