"""Commands that describe a single generated file."""

import argparse

from signed_codegen.errors import BadSignatureError, MalformedSectionsError
from signed_codegen.sections.extractor import extract_sections
from signed_codegen.signature import ContentKind
from signed_codegen.signature.scheme import content_kind, is_validly_signed


def cmd_status(args: argparse.Namespace) -> int:
    failures = 0
    for raw in args.files:
        try:
            with open(raw, encoding="utf-8", newline="") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            print(f"  ERROR      {raw}: {e}")
            failures += 1
            continue

        kind = content_kind(content)
        if kind is ContentKind.UNSIGNED:
            print(f"  {kind.value:<18} {raw}")
            continue
        try:
            valid = is_validly_signed(content)
        except BadSignatureError:
            valid = False
        if not valid:
            failures += 1
        print(f"  {kind.value:<18} {raw} [{'valid' if valid else 'MODIFIED'}]")
    return 1 if failures else 0


def cmd_sections(args: argparse.Namespace) -> int:
    try:
        with open(args.file, encoding="utf-8", newline="") as f:
            sections = extract_sections(f.read())
    except (OSError, UnicodeDecodeError, MalformedSectionsError) as e:
        print(f"ERROR: {args.file}: {e}")
        return 1

    if not sections:
        print("No manual sections.")
        return 0
    print(f"\n  {'Key':<40} {'Lines':>6}")
    print(f"  {'─' * 40} {'─' * 6}")
    for key, body in sections.items():
        print(f"  {key:<40} {len(body.splitlines()):>6}")
    print()
    return 0
