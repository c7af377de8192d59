"""Signed code generation.

Writes machine-generated source files that carry a tamper-evident
signature, preserves hand-written manual sections across regenerations,
and verifies signatures of files already on disk.
"""

from importlib.metadata import PackageNotFoundError, version

from signed_codegen.artifact import (
    Artifact,
    CommitOptions,
    CommitResult,
    FileLayout,
    commit,
    commit_many,
)
from signed_codegen.config import CodegenConfig, load_config
from signed_codegen.errors import (
    BadSignatureError,
    CodegenError,
    MalformedSectionsError,
    NoSignatureError,
    SigningError,
)
from signed_codegen.sections import begin_marker, end_marker
from signed_codegen.sections.extractor import extract_sections
from signed_codegen.sections.merger import RekeyMap, merge
from signed_codegen.signature import Variant
from signed_codegen.signature.scheme import (
    is_signed,
    is_validly_signed,
    sign_full,
    sign_partial,
)


def get_version() -> str:
    try:
        return version("signed-codegen")
    except PackageNotFoundError:
        return "0.0.0"


__all__ = [
    "Artifact",
    "BadSignatureError",
    "CodegenConfig",
    "CodegenError",
    "CommitOptions",
    "CommitResult",
    "FileLayout",
    "MalformedSectionsError",
    "NoSignatureError",
    "RekeyMap",
    "SigningError",
    "Variant",
    "begin_marker",
    "commit",
    "commit_many",
    "end_marker",
    "extract_sections",
    "get_version",
    "is_signed",
    "is_validly_signed",
    "load_config",
    "merge",
    "sign_full",
    "sign_partial",
]
