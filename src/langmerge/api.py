"""Public API for langmerge.

High-level functions that run the whole build and return structured results.
Per-artifact problems are reported on the result, never raised.
"""

import sys
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from pydantic import BaseModel, Field

from langmerge._internal.canonical_json import render_merged
from langmerge.codes import IssueCode
from langmerge.config import BuildConfig
from langmerge.kernel.discovery import discover_files
from langmerge.kernel.merge import ArtifactParseError, LangMerger, parse_artifact
from langmerge.kernel.paths import PathResolutionError, normalize_logical_path
from langmerge.kernel.prefix import compute_prefix


class BuildIssue(BaseModel):
    """A single problem found while merging (error or warning)."""
    code: IssueCode
    message: str
    path: Optional[str] = None  # File path (or logical path for collisions)
    key: Optional[str] = None  # Prefixed key, for KEY_COLLISION


class BuildResult(BaseModel):
    """Result of one build run."""
    ok: bool  # True if no artifact was skipped (warnings don't count)
    output_path: Optional[str] = None  # None when nothing was discovered
    discovered_count: int = 0  # Non-empty files that reached the merge stage
    merged_count: int = 0  # Files whose keys were merged
    key_count: int = 0
    errors: List[BuildIssue] = Field(default_factory=list)  # Skipped artifacts
    warnings: List[BuildIssue] = Field(default_factory=list)  # Collisions


def format_issue(issue: BuildIssue) -> str:
    """One-line operator message for an issue."""
    if issue.code is IssueCode.PARSE_ERROR:
        return f"Error parsing JSON: {issue.path}: {issue.message}"
    if issue.code is IssueCode.PATH_UNRESOLVED:
        return f"Error resolving path: {issue.message}"
    return f"Warning: {issue.message}"


def build_lang(
    candidate_paths: Iterable[Union[str, Path]],
    config: Optional[BuildConfig] = None,
) -> BuildResult:
    """Merge all translation files found from ``candidate_paths`` into one file.

    Pipeline: discover -> resolve logical path -> parse -> prefix -> merge ->
    sort -> serialize -> write once. If no non-empty file is discovered,
    nothing is written. If files were discovered but all were skipped, an
    empty document is written.

    Args:
        candidate_paths: JSON file paths, directories, or glob patterns
        config: Build configuration (defaults to BuildConfig())

    Returns:
        BuildResult describing what was written and every issue found

    Raises:
        DiscoveryError: If a discovered file cannot be read
        OSError: If the output file cannot be written
    """
    config = config or BuildConfig()
    files = discover_files(candidate_paths, default_filename=config.default_filename)

    errors: List[BuildIssue] = []
    warnings: List[BuildIssue] = []
    merger = LangMerger()

    for source in files:
        try:
            logical_path = normalize_logical_path(source.path)
            prefix = compute_prefix(logical_path)
        except PathResolutionError as e:
            errors.append(BuildIssue(
                code=IssueCode.PATH_UNRESOLVED,
                message=str(e),
                path=source.path,
            ))
            continue

        try:
            document = parse_artifact(source.contents)
        except ArtifactParseError as e:
            errors.append(BuildIssue(
                code=IssueCode.PARSE_ERROR,
                message=str(e),
                path=source.path,
            ))
            continue

        collisions = merger.merge(document.mapping, prefix, origin=logical_path)
        if not config.report_collisions:
            continue
        for key in document.duplicate_keys:
            warnings.append(BuildIssue(
                code=IssueCode.KEY_COLLISION,
                message=f"Key '{key}' is defined more than once in {logical_path}; last value kept",
                path=logical_path,
                key=f"{prefix}{key}",
            ))
        for collision in collisions:
            warnings.append(BuildIssue(
                code=IssueCode.KEY_COLLISION,
                message=(
                    f"Key '{collision.key}' from {collision.origin} overrides "
                    f"the value from {collision.previous_origin}"
                ),
                path=collision.origin,
                key=collision.key,
            ))

    output_path: Optional[str] = None
    if files:
        config.destination.mkdir(parents=True, exist_ok=True)
        config.output_path.write_bytes(render_merged(merger.merged))
        output_path = str(config.output_path)

    return BuildResult(
        ok=len(errors) == 0,
        output_path=output_path,
        discovered_count=len(files),
        merged_count=merger.artifact_count,
        key_count=len(merger.merged),
        errors=errors,
        warnings=warnings,
    )


def run(
    candidate_paths: Iterable[Union[str, Path]],
    on_done: Optional[Callable[[], None]] = None,
    config: Optional[BuildConfig] = None,
) -> BuildResult:
    """Build the merged language file, report issues on stderr, then call ``on_done``.

    ``on_done`` is called exactly once, with no arguments, after the output
    has been written (or skipped because nothing was discovered). It is not
    called when discovery fails.
    """
    result = build_lang(candidate_paths, config=config)
    for issue in result.errors + result.warnings:
        print(format_issue(issue), file=sys.stderr)
    if on_done is not None:
        on_done()
    return result
