"""Resolution of candidate paths into translation files to merge.

A candidate is either a JSON file path, a directory (the default language
filename is appended), or a glob pattern. Missing files are skipped and
empty files are dropped; only unreadable files abort discovery.
"""

import glob
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Union

from langmerge.kernel.paths import to_forward_slashes

DEFAULT_LANG_FILENAME = "lang.json"

_GLOB_CHARS = ("*", "?", "[")


class DiscoveryError(OSError):
    """Raised when a discovered file cannot be read."""


@dataclass(frozen=True)
class SourceFile:
    """A discovered translation file and its raw bytes."""
    path: str  # Absolute path, forward slashes
    contents: bytes


def resolve_candidate(candidate: Union[str, Path], default_filename: str = DEFAULT_LANG_FILENAME) -> str:
    """Turn a candidate into a file path or pattern.

    ``foo/bar.json`` is kept as-is; ``foo/bar`` and ``foo/bar/`` become
    ``foo/bar/<default_filename>``.
    """
    path = to_forward_slashes(str(candidate))
    if path.endswith(".json"):
        return path
    if not path.endswith("/"):
        path = path + "/"
    return path + default_filename


def _expand(pattern: str) -> List[Path]:
    """Return the files a resolved candidate refers to, in a stable order."""
    if any(char in pattern for char in _GLOB_CHARS):
        return [Path(match) for match in sorted(glob.glob(pattern, recursive=True))]
    return [Path(pattern)]


def discover_files(
    candidates: Iterable[Union[str, Path]],
    default_filename: str = DEFAULT_LANG_FILENAME,
) -> List[SourceFile]:
    """Read every existing, non-empty regular file the candidates refer to.

    Discovery order follows candidate order (glob matches sorted within a
    candidate). A file reached through more than one candidate is read once.

    Raises:
        DiscoveryError: If an existing path cannot be read
    """
    discovered: List[SourceFile] = []
    seen = set()
    for candidate in candidates:
        for path in _expand(resolve_candidate(candidate, default_filename)):
            if not path.is_file():
                continue
            absolute = to_forward_slashes(str(path.absolute()))
            if absolute in seen:
                continue
            seen.add(absolute)
            try:
                contents = path.read_bytes()
            except OSError as e:
                raise DiscoveryError(f"Cannot read {absolute}: {e}") from e
            if not contents:
                continue
            discovered.append(SourceFile(path=absolute, contents=contents))
    return discovered
