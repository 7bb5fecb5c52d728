"""Centralized serialization of the merged language dictionary.

This module provides the single rendering function used for the output
artifact and for test snapshots.

Critical: identical merged contents must always produce byte-identical output,
whatever order the keys were inserted in.
"""

import json
from typing import Any, Dict


def sort_merged(merged: Dict[str, Any]) -> Dict[str, Any]:
    """Rebuild a mapping with its top-level keys in ascending code point order.

    Nested values are left untouched.
    """
    return {key: merged[key] for key in sorted(merged)}


def canonical_dumps(merged: Dict[str, Any]) -> str:
    """
    Canonical text rendering of a merged mapping.

    Rules:
    - Top-level keys sorted lexicographically
    - 4-space indentation, ", " / ": " separators as json.dumps(indent=...) emits
    - Non-ASCII characters written as-is (no \\u escapes)
    - No trailing newline

    Args:
        merged: Mapping of prefixed key to value

    Returns:
        JSON document as a string
    """
    return json.dumps(sort_merged(merged), indent=4, ensure_ascii=False)


def render_merged(merged: Dict[str, Any]) -> bytes:
    """Render a merged mapping to the UTF-8 bytes written to disk."""
    return canonical_dumps(merged).encode("utf-8")
