"""
Email Assembler — reading order and visible rendering.
"""
from typing import Iterable, List

from mailstrip.models.fragment import Fragment
from mailstrip.models.parsed_email import Email


def assemble_email(closed_fragments: List[Fragment]) -> Email:
    """Reverse the bottom-up fragment list into an Email in reading order."""
    return Email(fragments=tuple(reversed(closed_fragments)))


def render_visible(fragments: Iterable[Fragment]) -> str:
    """
    Join the content of every non-hidden fragment with newlines and strip
    trailing whitespace from the result.
    """
    return Email(fragments=tuple(fragments)).visible_text()
