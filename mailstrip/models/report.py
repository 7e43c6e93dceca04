"""
Typed Pydantic models for the parse report.

The report is the serialisable view of an Email: what the runner writes to
disk and what downstream consumers read back. Field names mirror
PARSE_REPORT_SCHEMA.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from mailstrip.config.constants import PARSER_VERSION


class FragmentReport(BaseModel):
    """One fragment, flattened for output."""

    index: int = Field(..., ge=0, description="Position in reading order.")
    content: str = Field(..., description="Fragment text in reading order.")
    quoted: bool = Field(False, description="Quoted history (> markers or quote header).")
    signature: bool = Field(False, description="Sign-off block.")
    forwarded: bool = Field(False, description="Starts with a forwarded-message banner.")
    hidden: bool = Field(False, description="Excluded from the visible reply.")


class EmailReport(BaseModel):
    """
    Whole-body report.

    fragment_count is carried explicitly so a truncated file is detectable
    without re-parsing.
    """

    parser_version: str = PARSER_VERSION
    source: Optional[str] = Field(None, description="Input path, if the body came from a file.")
    fragment_count: int = Field(..., ge=0)
    visible_text: str
    fragments: List[FragmentReport] = Field(default_factory=list)

    @field_validator("fragments")
    @classmethod
    def validate_indices(cls, v: List[FragmentReport]) -> List[FragmentReport]:
        for expected, fragment in enumerate(v):
            if fragment.index != expected:
                raise ValueError(
                    f"fragment indices must be sequential: expected {expected}, got {fragment.index}"
                )
        return v

    @model_validator(mode="after")
    def validate_count(self) -> "EmailReport":
        if self.fragment_count != len(self.fragments):
            raise ValueError(
                f"fragment_count={self.fragment_count} but {len(self.fragments)} fragments present"
            )
        return self
