"""
Constants used across the parser.
Versioned and pinned for determinism.
"""
from typing import List

# =============================================================================
# Versions
# =============================================================================
PARSER_VERSION: str = "mailstrip-1.0.0"
REPORT_SCHEMA_VERSION: str = "mailstrip-report-v1"

# =============================================================================
# Scanner limits
# =============================================================================
# Largest single line (UTF-8 bytes) the scanner accepts.
DEFAULT_MAX_LINE_BYTES: int = 64 * 1024

# =============================================================================
# Whitespace trimmed from lines and fragments
# Unicode White_Space only: the separators \x1c-\x1f count as content even
# though str.isspace() accepts them.
# =============================================================================
WHITESPACE_CHARS: str = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

# =============================================================================
# Heuristic phrases (forward orientation)
# The line patterns run on reversed text, so these are reversed at compile time.
# =============================================================================
SENT_FROM_PHRASE: str = "Sent from my"
FORWARDED_PHRASE: str = "Forwarded message"
QUOTE_HEADER_OPENER: str = "On"
QUOTE_HEADER_CLOSER: str = "wrote:"

# =============================================================================
# Multi-line reply headers (forward orientation, matched on the whole body)
# =============================================================================
# Greedy under DOTALL: a match runs from the first opener to the last closer.
MULTILINE_HEADER_PATTERNS: List[str] = [
    # On Aug 22, 2011, at 7:37 PM, defunkt<reply@reply.github.com> wrote:
    r"^(On\s(?:.+)wrote:)$",
    # 2013/11/13 John Smith <john@smith.org>
    r"^(\d{4}/\d{2}/\d{2} .*<.+@.+>)$",
]
