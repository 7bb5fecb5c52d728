"""langmerge CLI: merge per-module translation files into one dictionary."""

import argparse
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path


def main():
    """Main CLI entry point for langmerge commands."""
    # Get version for --version argument (handle PackageNotFoundError)
    try:
        langmerge_version = get_version("langmerge")
    except PackageNotFoundError:
        langmerge_version = "dev"

    parser = argparse.ArgumentParser(
        prog="langmerge",
        description="langmerge: Merge per-module translation files into one language dictionary"
    )
    parser.add_argument("--version", action="version", version=f"langmerge {langmerge_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # build command
    build_parser = subparsers.add_parser(
        "build",
        help="Merge translation files into the combined language file",
        parents=[parent_parser]
    )
    build_parser.add_argument(
        "paths",
        nargs="*",
        help="Translation files, module directories (lang.json is appended) or glob patterns"
    )
    build_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a JSON build configuration"
    )
    build_parser.add_argument(
        "--dest",
        type=Path,
        default=None,
        help="Destination directory (defaults to www/assets/lang)"
    )
    build_parser.add_argument(
        "--name",
        default=None,
        help="Output filename (defaults to en.json)"
    )
    build_parser.add_argument(
        "--no-collisions",
        action="store_true",
        help="Do not report overwritten keys"
    )
    build_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any error or warning was reported"
    )

    # prefix command
    prefix_parser = subparsers.add_parser(
        "prefix",
        help="Show the namespace prefix computed for file paths",
        parents=[parent_parser]
    )
    prefix_parser.add_argument(
        "paths",
        nargs="+",
        help="File paths (containing src/ or src/app/)"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "build":
        # Lazy import: only import the pipeline when build is invoked
        from pydantic import ValidationError

        from .api import build_lang, format_issue
        from .config import BuildConfig, load_config_from_path

        try:
            config = load_config_from_path(args.config) if args.config else BuildConfig()
            overrides = {}
            if args.dest is not None:
                overrides["destination"] = args.dest
            if args.name is not None:
                overrides["output_name"] = args.name
            if args.no_collisions:
                overrides["report_collisions"] = False
            if overrides:
                config = BuildConfig(**{**config.model_dump(), **overrides})

            result = build_lang(args.paths, config=config)
        except ValidationError as e:
            print(f"Error: Invalid configuration: {e}", file=sys.stderr)
            sys.exit(1)
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        for issue in result.errors + result.warnings:
            print(format_issue(issue), file=sys.stderr)

        failed = args.strict and (result.errors or result.warnings)
        if not args.quiet:
            status = "FAILED" if failed else "OK"
            if result.output_path is None:
                print(f"[{status}] No translation files found, nothing written")
            else:
                print(f"[{status}] Language file built")
                print(f"  Output: {result.output_path}")
            print(f"  Files: {result.merged_count}/{result.discovered_count} merged")
            print(f"  Keys: {result.key_count}")
            print(f"  Errors: {len(result.errors)}")
            print(f"  Warnings: {len(result.warnings)}")
        if failed:
            sys.exit(1)
    elif args.command == "prefix":
        from .kernel.paths import PathResolutionError, normalize_logical_path
        from .kernel.prefix import compute_prefix

        failed = False
        for path in args.paths:
            try:
                prefix = compute_prefix(normalize_logical_path(path))
            except PathResolutionError as e:
                print(f"Error: {e}", file=sys.stderr)
                failed = True
                continue
            if not args.quiet:
                print(f"{path} -> {prefix}")
        if failed:
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
