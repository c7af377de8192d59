"""Unified CLI for signed code generation.

Usage:
    signed-codegen verify <path> [path ...]
    signed-codegen status <file> [file ...]
    signed-codegen sections <file>
"""

import argparse
import logging
import sys

from signed_codegen.cli.inspect import cmd_sections, cmd_status
from signed_codegen.cli.verify import cmd_verify


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="signed-codegen",
        description="Inspect and verify signed generated files",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity",
    )
    sub = parser.add_subparsers(dest="command")

    ver = sub.add_parser("verify", help="Verify signatures of files and directories")
    ver.add_argument("paths", nargs="*", help="Files or directories to check")

    st = sub.add_parser("status", help="Show whether files are signed and valid")
    st.add_argument("files", nargs="+")

    sec = sub.add_parser("sections", help="List the manual sections of a file")
    sec.add_argument("file")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        "verify": cmd_verify,
        "status": cmd_status,
        "sections": cmd_sections,
    }
    return dispatch[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
