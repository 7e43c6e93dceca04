"""
JSON Schema for the parse report produced by output_builder.

The report is what run_mailstrip.py writes to disk: one entry per fragment,
in reading order, plus the rendered visible reply.
"""
from mailstrip.config.constants import REPORT_SCHEMA_VERSION

# =============================================================================
# Fragment entry
# =============================================================================
FRAGMENT_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["index", "content", "quoted", "signature", "forwarded", "hidden"],
    "properties": {
        "index": {
            "type": "integer",
            "minimum": 0,
            "description": "Position of the fragment in reading order",
        },
        "content": {
            "type": "string",
            "description": "Fragment text in natural reading order",
        },
        "quoted": {"type": "boolean"},
        "signature": {"type": "boolean"},
        "forwarded": {"type": "boolean"},
        "hidden": {"type": "boolean"},
    },
}

# =============================================================================
# Parse report
# =============================================================================
PARSE_REPORT_SCHEMA: dict = {
    "name": REPORT_SCHEMA_VERSION,
    "strict": True,
    "schema": {
        "type": "object",
        "additionalProperties": False,
        "required": [
            "parser_version",
            "source",
            "fragment_count",
            "visible_text",
            "fragments",
        ],
        "properties": {
            "parser_version": {"type": "string"},
            "source": {
                "type": ["string", "null"],
                "description": "Where the body came from (file path), if known",
            },
            "fragment_count": {"type": "integer", "minimum": 0},
            "visible_text": {
                "type": "string",
                "description": "Non-hidden fragments joined by newlines, right-stripped",
            },
            "fragments": {
                "type": "array",
                "items": FRAGMENT_SCHEMA,
            },
        },
    },
}
