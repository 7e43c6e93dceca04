"""
Normalizer — canonical line endings and single-line reply headers.

Some clients break the "On DATE, NAME <EMAIL> wrote:" line (and the
"yyyy/mm/dd NAME <EMAIL>" variant) across several physical lines, e.g. gmail
for headers over 80 chars. The segmenter works line by line, so the header is
glued back together first.
"""
import logging

from mailstrip.parsing.patterns import MULTILINE_HEADER_REGEXES

logger = logging.getLogger(__name__)


def normalize_line_endings(text: str) -> str:
    return text.replace("\r\n", "\n")


def collapse_multiline_headers(text: str) -> str:
    """
    Remove the line breaks inside the first multi-line reply header.

    Only the first match of each pattern is looked up; every occurrence of
    that exact matched string is then flattened. The patterns are greedy, so
    with several "wrote:" lines the match (and the flattening) spans from the
    first header opener down to the last of them.
    """
    for regex in MULTILINE_HEADER_REGEXES:
        match = regex.search(text)
        if match is None:
            continue

        header = match.group(1)
        if "\n" not in header:
            continue

        logger.debug("Collapsing %d-line reply header", header.count("\n") + 1)
        text = text.replace(header, header.replace("\n", ""))

    return text


def normalize_text(text: str) -> str:
    """Line endings first, so header patterns only ever see ``\\n``."""
    return collapse_multiline_headers(normalize_line_endings(text))
