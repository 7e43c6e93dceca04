"""
Line classifiers — the process-wide compiled pattern table.

The segmenter scans the body bottom-up with every line reversed, so the
per-line patterns below are written against reversed text:

    "> Hi Bob,"                         ->  ",boB iH >"      (quoted: ends with >)
    "On Mon, Alice wrote:"              ->  ":etorw ... nO"  (quote header)
    "-Abhishek"                         ->  "kehsihbA-"      (signature: \\w-$)

Forward-orientation phrases come from config.constants and are reversed at
import time. The multi-line header patterns run on the whole normalized body
before reversal, so they stay in forward orientation.
"""
import re
from dataclasses import dataclass
from typing import List, Pattern

from mailstrip.config.constants import (
    FORWARDED_PHRASE,
    MULTILINE_HEADER_PATTERNS,
    QUOTE_HEADER_CLOSER,
    QUOTE_HEADER_OPENER,
    SENT_FROM_PHRASE,
    WHITESPACE_CHARS,
)


def _reverse(text: str) -> str:
    return text[::-1]


# ==========================================================================
# Compiled once, shared read-only by every parse call
# ==========================================================================

# "--" or "__" anywhere, "-Name" style sign-off, or "Sent from my <1-3 words>".
SIGNATURE_PATTERN: Pattern[str] = re.compile(
    r"(--|__|\w-$)|(^(\w+\s*){1,3} " + re.escape(_reverse(SENT_FROM_PHRASE)) + r"$)"
)

# Original line starts with one or more ">".
QUOTED_PATTERN: Pattern[str] = re.compile(r"(>+)$")

# "On ... wrote:" or "yyyy/mm/dd ... <addr>" (the latter reversed by hand).
QUOTE_HEADER_PATTERN: Pattern[str] = re.compile(
    r"^" + re.escape(_reverse(QUOTE_HEADER_CLOSER)) + r".*"
    + re.escape(_reverse(QUOTE_HEADER_OPENER)) + r"$"
    r"|^>.*\d{2}/\d{2}/\d{4}$"
)

# "---------- Forwarded message ----------"
FORWARDED_PATTERN: Pattern[str] = re.compile(
    r"^--+\s*" + re.escape(_reverse(FORWARDED_PHRASE)) + r"\s*--+$",
    re.IGNORECASE,
)

MULTILINE_HEADER_REGEXES: List[Pattern[str]] = [
    re.compile(pattern, re.MULTILINE | re.DOTALL)
    for pattern in MULTILINE_HEADER_PATTERNS
]


# ==========================================================================
# Predicates (reversed lines)
# ==========================================================================

def is_signature_line(line: str) -> bool:
    return SIGNATURE_PATTERN.search(line) is not None


def is_quoted_line(line: str) -> bool:
    return QUOTED_PATTERN.search(line) is not None


def is_quote_header(line: str) -> bool:
    """Header above a quoted area, with or without a leading ``>``."""
    return QUOTE_HEADER_PATTERN.search(line) is not None


def is_forwarded_banner(line: str) -> bool:
    return FORWARDED_PATTERN.search(line) is not None


@dataclass(frozen=True)
class ScannedLine:
    """A reversed body line with its classifier results."""

    text: str
    signature: bool
    quoted: bool
    quote_header: bool

    @property
    def blank(self) -> bool:
        return self.text == ""


def classify_line(raw: str) -> ScannedLine:
    """
    Run the classifiers on one reversed line.

    Lines that look like a signature start are kept verbatim, since sign-offs
    may be indented on purpose. Every other line loses its leading whitespace,
    which in reading order is the line's trailing whitespace.
    """
    signature = is_signature_line(raw)
    text = raw if signature else raw.lstrip(WHITESPACE_CHARS)

    return ScannedLine(
        text=text,
        signature=signature,
        quoted=is_quoted_line(text),
        quote_header=is_quote_header(text),
    )
