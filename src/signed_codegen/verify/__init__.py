"""Check signatures of generated files already on disk."""

from signed_codegen.verify.checker import FileCheck, VerificationReport, verify_file, verify_paths

__all__ = ["FileCheck", "VerificationReport", "verify_file", "verify_paths"]
