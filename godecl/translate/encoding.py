"""
Output Encoding

Renders a translated declaration list as the JSON document downstream tools
read: one compact element per line inside a top-level array.
"""

import json
from typing import Iterable

from godecl.translate.models import Declaration


def encode_value(value: Declaration) -> str:
    """Compact JSON for one declaration (no whitespace, key order preserved)."""
    return json.dumps(value.to_json(), separators=(",", ":"), ensure_ascii=False)


def encode_declarations(declarations: Iterable[Declaration]) -> str:
    """
    Encode declarations as the final document.

    Layout is `[`, the elements separated by `,` plus newline, then `]`;
    an empty list still gets the blank line between the brackets.
    """
    body = ",\n".join(encode_value(d) for d in declarations)
    return f"[\n{body}\n]\n"


def to_json_data(declarations: Iterable[Declaration]) -> list[dict]:
    """Plain list/dict form of the document, for callers that skip the text."""
    return [d.to_json() for d in declarations]
