"""
Prometheus Metrics — parser observability.

Exposes counters and histograms for:
- Parse outcomes (ok / line_too_long)
- Fragment kinds produced
- Per-stage processing latency

Usage
-----
    from mailstrip.parsing.metrics import record_parse, timed_stage

    with timed_stage("segment"):
        ...
    record_parse("ok")
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Generator, Iterable

from prometheus_client import Counter, Histogram

from mailstrip.models.fragment import Fragment


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Parse calls, labelled by outcome.
PARSES: Counter = Counter(
    "mailstrip_parses_total",
    "Total parse calls by outcome",
    ["outcome"],
)

# Fragments produced, labelled by kind (a fragment may count under several).
FRAGMENTS: Counter = Counter(
    "mailstrip_fragments_total",
    "Fragments produced by kind (quoted / signature / forwarded / hidden / visible)",
    ["kind"],
)

# Processing latency per stage (seconds).
STAGE_LATENCY: Histogram = Histogram(
    "mailstrip_stage_processing_seconds",
    "Processing time per parser stage in seconds",
    ["stage"],
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_parse(outcome: str) -> None:
    """Increment the parse counter for *outcome*."""
    PARSES.labels(outcome=outcome).inc()


def record_fragments(fragments: Iterable[Fragment]) -> None:
    """Count every fragment under each kind it belongs to."""
    for fragment in fragments:
        if fragment.quoted:
            FRAGMENTS.labels(kind="quoted").inc()
        if fragment.signature:
            FRAGMENTS.labels(kind="signature").inc()
        if fragment.forwarded:
            FRAGMENTS.labels(kind="forwarded").inc()
        FRAGMENTS.labels(kind="hidden" if fragment.hidden else "visible").inc()


@contextmanager
def timed_stage(stage: str) -> Generator[None, None, None]:
    """
    Context manager that records stage processing latency.

    Usage::

        with timed_stage("normalize"):
            text = normalize_text(text)
    """
    with STAGE_LATENCY.labels(stage=stage).time():
        yield
