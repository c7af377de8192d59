"""Artifact commits: render, merge manual sections, sign, write if changed."""

from signed_codegen.artifact.batch import BatchReport, CommitJob, commit_many
from signed_codegen.artifact.committer import commit
from signed_codegen.artifact.layout import FileLayout
from signed_codegen.artifact.options import Artifact, CommitOptions, CommitResult

__all__ = [
    "Artifact",
    "BatchReport",
    "CommitJob",
    "CommitOptions",
    "CommitResult",
    "FileLayout",
    "commit",
    "commit_many",
]
