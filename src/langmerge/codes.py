"""Issue code constants for langmerge.api.build_lang().

These constants prevent stringly-typed issue codes and ensure
client code matches on the correct codes.
"""

from enum import Enum


class IssueCode(str, Enum):
    """Build issue codes."""

    # Errors (artifact skipped, build continues)
    PARSE_ERROR = "PARSE_ERROR"
    PATH_UNRESOLVED = "PATH_UNRESOLVED"

    # Warnings (non-blocking)
    KEY_COLLISION = "KEY_COLLISION"
