"""
Output Builder — Email → PARSE_REPORT_SCHEMA report.

Two steps:
    1. build_email_report: typed EmailReport (pydantic) dumped to a dict
    2. validate_email_report: jsonschema conformance + consistency checks
"""
import logging
from typing import List, Optional

from jsonschema import ValidationError, validate

from mailstrip.config.constants import PARSER_VERSION
from mailstrip.config.schemas import PARSE_REPORT_SCHEMA
from mailstrip.models.parsed_email import Email
from mailstrip.models.report import EmailReport, FragmentReport
from mailstrip.models.validation import ValidationResult

logger = logging.getLogger(__name__)


def build_email_report(email: Email, source: Optional[str] = None) -> dict:
    """
    Flatten *email* into a report dict.

    Args:
        email: Parsed Email.
        source: Where the body came from (file path), if known.

    Returns:
        Dict conforming to PARSE_REPORT_SCHEMA.
    """
    fragments = [
        FragmentReport(
            index=i,
            content=fragment.content,
            quoted=fragment.quoted,
            signature=fragment.signature,
            forwarded=fragment.forwarded,
            hidden=fragment.hidden,
        )
        for i, fragment in enumerate(email)
    ]

    report = EmailReport(
        parser_version=PARSER_VERSION,
        source=source,
        fragment_count=len(fragments),
        visible_text=email.visible_text(),
        fragments=fragments,
    )
    return report.model_dump()


def validate_email_report(report: dict) -> ValidationResult:
    """
    Validate a report dict (e.g. read back from disk).

    Stages:
        1. Schema conformance (jsonschema)
        2. Consistency (fragment_count, indices, hidden suffix)

    Returns:
        ValidationResult with valid flag, errors, warnings, and the report.
    """
    errors: List[str] = []
    warnings: List[str] = []

    # ------------------------------------------------------------------
    # Stage 1: Schema validation
    # ------------------------------------------------------------------
    try:
        validate(instance=report, schema=PARSE_REPORT_SCHEMA["schema"])
    except ValidationError as e:
        errors.append(f"Schema violation: {e.message}")
        logger.error("Parse report failed schema validation: %s", e.message)
        return ValidationResult(valid=False, errors=errors, warnings=warnings)

    # ------------------------------------------------------------------
    # Stage 2: Consistency
    # ------------------------------------------------------------------
    fragments = report["fragments"]
    if report["fragment_count"] != len(fragments):
        errors.append(
            f"fragment_count={report['fragment_count']} but {len(fragments)} fragments present"
        )

    for expected, fragment in enumerate(fragments):
        if fragment["index"] != expected:
            errors.append(f"Fragment index {fragment['index']} at position {expected}")

    hidden_flags = [f["hidden"] for f in fragments]
    if hidden_flags != sorted(hidden_flags):
        errors.append("Hidden fragments do not form a suffix")

    if fragments and all(f["hidden"] for f in fragments):
        warnings.append("No visible fragment: body has no original content")

    if report["parser_version"] != PARSER_VERSION:
        warnings.append(
            f"Report written by {report['parser_version']}, current is {PARSER_VERSION}"
        )

    valid = len(errors) == 0
    if not valid:
        logger.error("Parse report inconsistent: %s", errors)
    return ValidationResult(valid=valid, errors=errors, warnings=warnings, data=report)
