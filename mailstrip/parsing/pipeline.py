"""
Parser Pipeline — main entry point for splitting an email body.

Executes the 4-stage flow:
    1. Normalize (line endings, multi-line reply headers)
    2. Scan bottom-up with every line reversed
    3. Segment + classify (quoted / signature / forwarded / hidden)
    4. Assemble fragments back into reading order
"""
import logging
import time
from typing import Optional

from mailstrip.config import settings
from mailstrip.exceptions import LineTooLongError
from mailstrip.models.parsed_email import Email
from mailstrip.parsing.assembler import assemble_email, render_visible
from mailstrip.parsing.metrics import record_fragments, record_parse, timed_stage
from mailstrip.parsing.normalizer import normalize_text
from mailstrip.parsing.scanner import iter_reversed_lines
from mailstrip.parsing.segmenter import FragmentSegmenter

logger = logging.getLogger(__name__)


def parse(text: str, max_line_bytes: Optional[int] = None) -> Email:
    """
    Split a plain-text email body into classified fragments.

    Args:
        text: Decoded plain-text body.
        max_line_bytes: Per-line size limit. Defaults to
                        settings.MAX_LINE_BYTES (64 KiB).

    Returns:
        Email with fragments in original top-to-bottom order.

    Raises:
        LineTooLongError: a line exceeds the limit. No partial result.
    """
    start_time = time.monotonic()

    if max_line_bytes is None:
        max_line_bytes = settings.MAX_LINE_BYTES

    # ==================================================================
    # Stage 1: Normalize
    # ==================================================================
    with timed_stage("normalize"):
        normalized = normalize_text(text)

    # ==================================================================
    # Stage 2 + 3: Scan bottom-up and segment
    # ==================================================================
    segmenter = FragmentSegmenter()
    try:
        with timed_stage("segment"):
            for line in iter_reversed_lines(normalized, max_line_bytes):
                segmenter.feed(line)
            closed = segmenter.finish()
    except LineTooLongError as e:
        record_parse("line_too_long")
        logger.warning(
            "Parse aborted: %s (body starts '%s')",
            e.message,
            text[: settings.MAX_BODY_LOG_CHARS],
        )
        raise

    # ==================================================================
    # Stage 4: Assemble
    # ==================================================================
    with timed_stage("assemble"):
        email = assemble_email(closed)

    record_parse("ok")
    record_fragments(email)

    elapsed_ms = int((time.monotonic() - start_time) * 1000)
    logger.debug(
        "Parsed %d chars into %d fragments (%d visible) in %d ms",
        len(text),
        len(email),
        len(email.visible_fragments),
        elapsed_ms,
    )
    return email


def parse_reply(text: str, max_line_bytes: Optional[int] = None) -> str:
    """Visible reply text of *text*: quoted history and signatures removed."""
    return render_visible(parse(text, max_line_bytes=max_line_bytes))
