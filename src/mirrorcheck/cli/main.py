"""CLI entrypoint for Mirrorcheck."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from mirrorcheck import __version__
from mirrorcheck.config import apply_overrides, load_config
from mirrorcheck.constants.branding import CLI_DESCRIPTION
from mirrorcheck.exceptions import ConfigError, MirrorCheckError
from mirrorcheck.exceptions.validation import format_errors
from mirrorcheck.reporting import StdoutReporter
from mirrorcheck.scanner import verify_mirror
from mirrorcheck.validation import preflight_validate


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="mirrorcheck",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    verify = subparsers.add_parser("verify", help="Verify archive files against a manifest")
    verify.add_argument("-r", "--root", type=Path, required=True, help="Directory holding the archive files")
    verify.add_argument("-m", "--manifest", default=None, help="Manifest file (relative paths resolve against root)")
    verify.add_argument("-C", "--cache", default=None, help="Fingerprint cache file (relative to root)")
    verify.add_argument("-c", "--config", type=Path, help="Explicit config file")
    verify.add_argument(
        "-p",
        "--pattern",
        default=None,
        help="Inclusion filter: regular expression matched against each file's name relative to root",
    )
    verify.add_argument("--index-suffix", default=None, help="Suffix identifying the index file (default: inpx)")
    verify.add_argument("-a", "--algorithm", default=None, help="hashlib digest name (default: md5)")
    verify.add_argument(
        "--manifest-encoding",
        default=None,
        help="Manifest text encoding (default: utf-8-sig, which also reads plain utf-8)",
    )
    verify.add_argument("-n", "--no-cache", action="store_true", help="Disable cache reads/writes")
    verify.add_argument("--no-progress", action="store_true", help="Hide per-chunk hashing progress")
    verify.add_argument("--no-color", action="store_true", help="Disable colored output")
    verify.add_argument("-v", "--verbose", action="store_true", help="Show run summary and debug logging")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without verifying")
    validate.add_argument("-r", "--root", type=Path, required=True, help="Directory holding the archive files")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return _handle_validate_config(args)

    if args.command != "verify":
        parser.error(f"Unsupported command: {args.command}")

    validation_errors = preflight_validate(root=args.root, config_path=args.config)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    root = args.root.absolute()
    try:
        config = apply_overrides(
            load_config(root, args.config),
            manifest=args.manifest,
            cache=args.cache,
            include_pattern=args.pattern,
            index_suffix=args.index_suffix,
            algorithm=args.algorithm,
            manifest_encoding=args.manifest_encoding,
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    interactive = sys.stdout.isatty()
    reporter = StdoutReporter(
        sys.stdout,
        color=interactive and not args.no_color,
        progress=interactive and not args.no_progress,
        manifest_label=str(config.manifest_path(root)),
    )

    try:
        result = verify_mirror(config, root=root, reporter=reporter, use_cache=not args.no_cache)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except MirrorCheckError as exc:
        print(f"Verification error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"I/O error: {exc}", file=sys.stderr)
        return 1

    if args.verbose:
        reporter.summary(result)

    return 0


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = preflight_validate(root=args.root, config_path=args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
