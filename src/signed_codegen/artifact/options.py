"""Values describing one commit: the artifact, its options and the outcome."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Iterable

from signed_codegen.artifact.layout import FileLayout
from signed_codegen.config import CodegenConfig
from signed_codegen.sections.merger import RekeyMap


class CommitResult(str, Enum):
    UNCHANGED = "unchanged"
    CREATED = "created"
    UPDATED = "updated"


@dataclass(frozen=True)
class CommitOptions:
    """Per-commit switches.

    clobber: skip signature checks on prior content.
    create_only: leave an existing target alone without rendering.
    rekey: section renames to honour when merging.
    signed: sign the output; unsigned artifacts skip all prior-content handling.
    dry_run: report the outcome without writing.
    """

    clobber: bool = False
    create_only: bool = False
    rekey: RekeyMap = field(default_factory=RekeyMap)
    signed: bool = True
    dry_run: bool = False


@dataclass(frozen=True)
class Artifact:
    """A generated file: where it goes and where its manual code may come from.

    ``legacy_paths`` are older files (e.g. before a rename) whose manual
    sections are harvested too. They are only ever read.
    """

    target: Path
    relative_name: str
    legacy_paths: tuple[Path, ...] = ()
    layout: FileLayout = field(default_factory=FileLayout)

    @classmethod
    def resolve(
        cls,
        config: CodegenConfig,
        name: Path | str,
        legacy: Iterable[Path | str] = (),
        layout: FileLayout | None = None,
    ) -> "Artifact":
        """Build an Artifact with paths resolved against ``config.root_dir``."""
        target = _absolute(config, name)
        return cls(
            target=target,
            relative_name=config.relative_name(target),
            legacy_paths=tuple(_absolute(config, p) for p in legacy),
            layout=layout or FileLayout(),
        )

    def with_legacy(self, *paths: Path) -> "Artifact":
        return replace(self, legacy_paths=self.legacy_paths + tuple(paths))

    def exists(self) -> bool:
        return self.target.exists()


def _absolute(config: CodegenConfig, name: Path | str) -> Path:
    path = Path(name)
    return path if path.is_absolute() else config.root_dir / path
