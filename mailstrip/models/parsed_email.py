"""
Email — the parsed body as an ordered, immutable sequence of fragments.
"""
from dataclasses import dataclass, field
from typing import Iterator, Tuple

from mailstrip.config.constants import WHITESPACE_CHARS
from mailstrip.models.fragment import Fragment


@dataclass(frozen=True)
class Email:
    """Fragments of one body in original top-to-bottom order."""

    fragments: Tuple[Fragment, ...] = field(default=())

    @property
    def visible_fragments(self) -> Tuple[Fragment, ...]:
        return tuple(f for f in self.fragments if f.is_visible)

    def visible_text(self) -> str:
        """Non-hidden fragments joined by newlines, trailing whitespace removed."""
        return "\n".join(f.content for f in self.visible_fragments).rstrip(WHITESPACE_CHARS)

    def to_dict(self) -> dict:
        return {
            "fragments": [f.to_dict() for f in self.fragments],
            "visible_text": self.visible_text(),
        }

    def __iter__(self) -> Iterator[Fragment]:
        return iter(self.fragments)

    def __len__(self) -> int:
        return len(self.fragments)

    def __getitem__(self, index: int) -> Fragment:
        return self.fragments[index]

    def __str__(self) -> str:
        return self.visible_text()
