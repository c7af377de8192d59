"""Signature verification CLI commands."""

import argparse
import logging
import sys

from signed_codegen.verify.checker import CheckStatus, VerificationReport, verify_paths

USAGE = "usage: verify-signed <path> [path ...]"


def print_report(report: VerificationReport) -> None:
    for check in report.checks:
        if check.status is CheckStatus.OK:
            print(f"OK: {check.path}")
        elif check.status is CheckStatus.MODIFIED:
            print(f"MODIFIED: {check.path}", file=sys.stderr)
        elif check.status is CheckStatus.UNREADABLE:
            print(f"UNREADABLE: {check.path}: {check.reason}", file=sys.stderr)
    for path in report.unrecognized:
        print(f"ERROR: not a file or directory: {path}", file=sys.stderr)


def cmd_verify(args: argparse.Namespace) -> int:
    if not args.paths:
        print(USAGE, file=sys.stderr)
        return 1
    report = verify_paths(args.paths)
    print_report(report)
    return 0 if report.passed else 1


def verify_signed_main(argv: list[str] | None = None) -> int:
    """Entry point for the ``verify-signed`` script."""
    parser = argparse.ArgumentParser(
        prog="verify-signed",
        description="Verify signatures of generated files",
    )
    parser.add_argument("paths", nargs="*", help="Files or directories to check")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return cmd_verify(args)


if __name__ == "__main__":
    sys.exit(verify_signed_main())
