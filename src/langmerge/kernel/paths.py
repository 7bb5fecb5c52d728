"""Logical path extraction for translation files.

A file's logical path is its location relative to the application source
root, independent of where the checkout lives or which separator the host
OS uses. Example:

    C:\\work\\app\\src\\app\\core\\features\\login\\lang.json
        -> core/features/login/lang.json
"""

from typing import Tuple


class PathResolutionError(ValueError):
    """Raised when a path contains no recognized source-root marker."""


# Checked in order: the deep marker wins whenever it is present.
SOURCE_ROOT_MARKERS: Tuple[str, ...] = (
    "/src/app/",
    "/src/",
)


def to_forward_slashes(path: str) -> str:
    """Normalize path separators to forward slashes."""
    return path.replace("\\", "/")


def normalize_logical_path(path: str) -> str:
    """Return the part of ``path`` following the last source-root marker.

    Args:
        path: Absolute or relative filesystem path, either separator style

    Returns:
        Logical path using forward slashes, e.g. ``addons/mod/forum/lang.json``

    Raises:
        PathResolutionError: If no marker is found or nothing follows it
    """
    normalized = to_forward_slashes(str(path))
    if not normalized.startswith("/"):
        # Lets a relative "src/app/..." match the same markers.
        normalized = "/" + normalized

    for marker in SOURCE_ROOT_MARKERS:
        position = normalized.rfind(marker)
        if position < 0:
            continue
        logical = normalized[position + len(marker):]
        if not logical:
            raise PathResolutionError(f"Nothing follows source root in path: {path}")
        return logical

    raise PathResolutionError(
        f"No source root ({', '.join(m.strip('/') for m in SOURCE_ROOT_MARKERS)}) found in path: {path}"
    )
