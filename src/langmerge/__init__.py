"""langmerge: build-time merging of per-module translation files."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("langmerge")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from langmerge.api import build_lang, run, BuildIssue, BuildResult
from langmerge.config import BuildConfig
from langmerge.codes import IssueCode

__all__ = [
    "__version__",
    "build_lang",
    "run",
    "BuildIssue",
    "BuildResult",
    "BuildConfig",
    "IssueCode",
]
