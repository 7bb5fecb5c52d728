"""Parsing and merging of translation documents.

Keys from every artifact are written into one mapping under the artifact's
namespace prefix. Collisions resolve last-write-wins; they are recorded so
callers can surface them, but never stop the merge.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


class ArtifactParseError(ValueError):
    """Raised when an artifact's content is not a JSON object."""


@dataclass
class ParsedDocument:
    """Top-level mapping of one translation file."""
    mapping: Dict[str, Any]
    duplicate_keys: List[str] = field(default_factory=list)  # Repeated top-level keys, first-seen order


@dataclass
class KeyCollision:
    """A prefixed key written more than once."""
    key: str
    origin: str  # Logical path of the artifact that now owns the key
    previous_origin: str  # Logical path whose value was overwritten


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_artifact(contents: bytes) -> ParsedDocument:
    """Parse raw file contents into a top-level mapping.

    Values are kept as parsed; nested objects are not flattened.

    Raises:
        ArtifactParseError: On invalid UTF-8, invalid JSON, or a non-object document
    """
    try:
        text = contents.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ArtifactParseError(f"Content is not valid UTF-8: {e}") from e

    # Objects are decoded innermost first, so the top-level object's pairs land last.
    decoded_pairs: List[List[tuple]] = []

    def _pairs_hook(pairs):
        decoded_pairs.append(pairs)
        return dict(pairs)

    try:
        document = json.loads(text, object_pairs_hook=_pairs_hook, parse_constant=_reject_constant)
    except ValueError as e:
        raise ArtifactParseError(str(e)) from e

    if not isinstance(document, dict):
        raise ArtifactParseError(
            f"Top-level value must be an object, got {type(document).__name__}"
        )

    seen = set()
    duplicates: List[str] = []
    for key, _ in decoded_pairs[-1]:
        if key in seen and key not in duplicates:
            duplicates.append(key)
        seen.add(key)
    return ParsedDocument(mapping=document, duplicate_keys=duplicates)


def add_properties(target: Dict[str, Any], source: Dict[str, Any], prefix: str) -> None:
    """Copy every entry of ``source`` into ``target`` with ``prefix`` prepended to its key.

    Existing entries in ``target`` are overwritten silently.
    """
    for key, value in source.items():
        target[f"{prefix}{key}"] = value


class LangMerger:
    """Accumulates prefixed translation keys across artifacts.

    The merged mapping has exactly one writer: artifacts are merged one at a
    time, in discovery order.
    """

    def __init__(self) -> None:
        self.merged: Dict[str, Any] = {}
        self._origins: Dict[str, str] = {}
        self.artifact_count = 0

    def merge(self, source: Dict[str, Any], prefix: str, origin: str) -> List[KeyCollision]:
        """Merge one artifact's mapping and return the keys it overwrote.

        Args:
            source: Parsed top-level mapping of the artifact
            prefix: Namespace prefix for every key of the artifact
            origin: Logical path of the artifact (for collision reports)

        Returns:
            Collisions in source key order; empty when nothing was overwritten
        """
        collisions: List[KeyCollision] = []
        for key in source:
            prefixed = f"{prefix}{key}"
            previous: Optional[str] = self._origins.get(prefixed)
            if previous is not None:
                collisions.append(KeyCollision(key=prefixed, origin=origin, previous_origin=previous))
            self._origins[prefixed] = origin

        add_properties(self.merged, source, prefix)
        self.artifact_count += 1
        return collisions
