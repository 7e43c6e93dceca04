"""
Fragment Segmenter — the line-by-line state machine.

Fed reversed lines bottom-up by the scanner. For each line it decides whether
the line extends the open fragment or closes it and opens a new one, and tags
closed fragments as quoted / signature / forwarded / hidden.

States:
    EMPTY         nothing fed yet
    ACCUMULATING  one fragment open
    CLOSED        finish() called; closed fragments handed out

Hidden rule (applied once, at close time): scanning from the bottom, quoted,
signature and blank fragments are hidden until the first fragment with
original content is closed. From then on nothing is hidden.

    some original text            (visible)

    > do you have any two's?      (quoted, visible)

    Go fish!                      (visible)

    > -- > Player 1               (quoted, hidden)

    -- Player 2                   (signature, hidden)
"""
import logging
from enum import Enum
from typing import List, Optional

from mailstrip.models.fragment import Fragment
from mailstrip.parsing.patterns import (
    ScannedLine,
    classify_line,
    is_forwarded_banner,
    is_signature_line,
)

logger = logging.getLogger(__name__)


class SegmenterState(Enum):
    EMPTY = "empty"
    ACCUMULATING = "accumulating"
    CLOSED = "closed"


class FragmentSegmenter:
    """
    Single-use segmentation state for one body.

    Usage::

        segmenter = FragmentSegmenter()
        for line in iter_reversed_lines(text, limit):
            segmenter.feed(line)
        closed = segmenter.finish()   # bottom-up order
    """

    def __init__(self) -> None:
        self.state = SegmenterState.EMPTY
        # Once any visible fragment is found, stop looking for hidden ones.
        self.found_visible = False
        self._fragment: Optional[Fragment] = None
        self._closed: List[Fragment] = []

    @property
    def open_fragment(self) -> Optional[Fragment]:
        return self._fragment

    @property
    def closed_fragments(self) -> List[Fragment]:
        return list(self._closed)

    def feed(self, raw_line: str) -> ScannedLine:
        """Consume one reversed line. Returns its classification."""
        if self.state is SegmenterState.CLOSED:
            raise RuntimeError("segmenter already finished")

        line = classify_line(raw_line)

        if self._fragment is not None and line.blank:
            self._close_on_boundary()

        # Yahoo! does not use ">" in replies: a quote header appearing under
        # an unquoted fragment makes that fragment quoted.
        if self._fragment is not None and line.quote_header:
            self._fragment.mark_quoted()

        if self._extends_open_fragment(line):
            self._fragment.add_line(line.text)
        else:
            self._close_fragment()
            self._fragment = Fragment(quoted=line.quoted, lines=[line.text])

        self.state = SegmenterState.ACCUMULATING
        return line

    def finish(self) -> List[Fragment]:
        """Close the last open fragment and return closed fragments, bottom-up."""
        if self.state is not SegmenterState.CLOSED:
            self._close_fragment()
            self.state = SegmenterState.CLOSED
        return list(self._closed)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _close_on_boundary(self) -> None:
        """
        A blank line sits above the open fragment. Its first line (the last
        buffered one, lines are still reversed) decides whether the fragment
        was a forwarded block or a signature.
        """
        first_line = self._fragment.first_line

        if is_forwarded_banner(first_line):
            self._fragment.mark_forwarded()
            self._close_fragment()
        elif is_signature_line(first_line):
            self._fragment.mark_signature()
            self._close_fragment()

    def _extends_open_fragment(self, line: ScannedLine) -> bool:
        # A quote header or blank line still counts as part of a quoted
        # fragment even though it has no ">".
        fragment = self._fragment
        if fragment is None:
            return False
        if fragment.quoted == line.quoted:
            return True
        return fragment.quoted and (line.quote_header or line.blank)

    def _close_fragment(self) -> None:
        fragment = self._fragment
        if fragment is None:
            return

        fragment.finish(trailing=not self.found_visible)
        if not self.found_visible and fragment.is_visible:
            self.found_visible = True
            logger.debug(
                "First visible fragment closed after %d hidden", len(self._closed)
            )

        self._closed.append(fragment)
        self._fragment = None
