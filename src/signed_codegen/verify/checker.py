"""Walk files and directories and check each signed file's signature."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator

from signed_codegen.artifact.filesystem import read_text
from signed_codegen.errors import BadSignatureError
from signed_codegen.signature.scheme import is_signed, is_validly_signed

logger = logging.getLogger(__name__)


class CheckStatus(str, Enum):
    OK = "OK"
    MODIFIED = "MODIFIED"
    UNREADABLE = "UNREADABLE"
    UNSIGNED = "UNSIGNED"


@dataclass(frozen=True)
class FileCheck:
    path: Path
    status: CheckStatus
    reason: str | None = None

    @property
    def passed(self) -> bool:
        return self.status not in (CheckStatus.MODIFIED, CheckStatus.UNREADABLE)


@dataclass
class VerificationReport:
    """Result of verifying a set of paths."""

    checks: list[FileCheck] = field(default_factory=list)
    unrecognized: list[Path] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.unrecognized and all(c.passed for c in self.checks)

    @property
    def ok(self) -> list[FileCheck]:
        return [c for c in self.checks if c.status is CheckStatus.OK]

    @property
    def modified(self) -> list[FileCheck]:
        return [c for c in self.checks if c.status is CheckStatus.MODIFIED]


def verify_file(path: Path) -> FileCheck:
    """Check one file. Unsigned files pass with nothing to check.

    A file that cannot be read fails with the OS error as its reason.
    """
    try:
        content = read_text(path)
    except OSError as exc:
        return FileCheck(path, CheckStatus.UNREADABLE, str(exc))
    if content is None or not is_signed(content):
        return FileCheck(path, CheckStatus.UNSIGNED)
    try:
        valid = is_validly_signed(content)
    except BadSignatureError as exc:
        return FileCheck(path, CheckStatus.MODIFIED, exc.reason)
    logger.debug("%s: %s", path, "valid" if valid else "modified")
    return FileCheck(path, CheckStatus.OK if valid else CheckStatus.MODIFIED)


def iter_files(directory: Path) -> Iterator[Path]:
    """Regular files under ``directory``, recursively, in sorted order."""
    for path in sorted(directory.rglob("*")):
        if path.is_file():
            yield path


def verify_paths(paths: Iterable[Path | str]) -> VerificationReport:
    """Verify every file argument and every file under each directory argument."""
    report = VerificationReport()
    for raw in paths:
        path = Path(raw)
        if path.is_file():
            report.checks.append(verify_file(path))
        elif path.is_dir():
            report.checks.extend(verify_file(p) for p in iter_files(path))
        else:
            report.unrecognized.append(path)
    return report
