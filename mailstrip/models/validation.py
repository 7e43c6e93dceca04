"""
ValidationResult — outcome of checking a parse report read back from disk.
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ValidationResult:
    """Schema and consistency findings for one parse report."""

    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    data: Optional[dict] = None

    def raise_if_invalid(self, source: str) -> None:
        """Raise ValueError listing every error found in the report of *source*."""
        if not self.valid:
            raise ValueError(f"Invalid report for {source}: {'; '.join(self.errors)}")
