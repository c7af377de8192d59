"""Commit a set of artifacts, collecting per-artifact outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field

from signed_codegen.artifact.committer import Renderer, commit
from signed_codegen.artifact.options import Artifact, CommitOptions, CommitResult
from signed_codegen.config import CodegenConfig
from signed_codegen.errors import CodegenError
from signed_codegen.formatter import Formatter


@dataclass(frozen=True)
class CommitJob:
    artifact: Artifact
    render: Renderer
    options: CommitOptions = field(default_factory=CommitOptions)


@dataclass
class BatchReport:
    """Outcome of a commit_many run."""

    created: list[str] = field(default_factory=list)
    updated: list[str] = field(default_factory=list)
    unchanged: list[str] = field(default_factory=list)
    errors: list[dict[str, str]] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return len(self.errors) == 0

    def record(self, name: str, result: CommitResult) -> None:
        {
            CommitResult.CREATED: self.created,
            CommitResult.UPDATED: self.updated,
            CommitResult.UNCHANGED: self.unchanged,
        }[result].append(name)

    def summary(self) -> str:
        lines = [
            "Codegen Commit Results",
            "─" * 40,
            f"  Created:   {len(self.created)}",
            f"  Updated:   {len(self.updated)}",
            f"  Unchanged: {len(self.unchanged)}",
        ]
        if self.errors:
            lines.append(f"  Errors:    {len(self.errors)}")
            for e in self.errors:
                lines.append(f"    - {e['path']}: {e['error']}")
        return "\n".join(lines)


def commit_many(
    jobs: list[CommitJob],
    config: CodegenConfig | None = None,
    formatter: Formatter | None = None,
) -> BatchReport:
    """Commit each job in turn.

    A job that fails with a codegen, filesystem or value error is recorded in
    ``errors`` and the remaining jobs still run.
    """
    config = config or CodegenConfig()
    report = BatchReport()
    for job in jobs:
        name = job.artifact.relative_name
        try:
            result = commit(job.artifact, job.render, job.options, config, formatter)
        except (CodegenError, OSError, ValueError) as e:
            report.errors.append({"path": name, "error": str(e)})
            continue
        report.record(name, result)
    return report
