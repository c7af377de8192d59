"""Generation settings shared by every artifact in a run.

Example signed-codegen.yaml:

    root: .
    comment_style: hash
    file_header:
      - Copyright (c) Example Corp.
    formatter: [black, --quiet, -]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from signed_codegen.comments import HASH, CommentStyle, comment_style
from signed_codegen.errors import ConfigError
from signed_codegen.paths import find_config, project_root


@dataclass(frozen=True)
class CodegenConfig:
    """Immutable settings; build once, pass to every commit."""

    root_dir: Path = field(default_factory=project_root)
    file_header: tuple[str, ...] = ()
    comment: CommentStyle = HASH
    formatter: tuple[str, ...] | None = None

    def relative_name(self, path: Path) -> str:
        """Path relative to the root when inside it, else the path as given."""
        try:
            return str(path.relative_to(self.root_dir))
        except ValueError:
            return str(path)


def load_config(path: Path | str | None = None) -> CodegenConfig:
    """Load a CodegenConfig from YAML.

    Args:
        path: Config file. Defaults to the one found by ``find_config``;
            with no config file at all the defaults are returned.

    Raises:
        ConfigError: If the file is not a mapping or has invalid values.
    """
    config_path = Path(path) if path else find_config()
    if config_path is None:
        return CodegenConfig()
    if not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} is not a YAML mapping")

    return _from_mapping(data, config_path.parent.resolve())


def _from_mapping(data: dict, base_dir: Path) -> CodegenConfig:
    root = Path(str(data.get("root", "."))).expanduser()
    if not root.is_absolute():
        root = (base_dir / root).resolve()

    header = data.get("file_header") or []
    if isinstance(header, str):
        header = header.splitlines()
    if not isinstance(header, list):
        raise ConfigError("file_header must be a string or a list of lines")

    try:
        style = comment_style(str(data.get("comment_style", "hash")))
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc

    formatter = data.get("formatter")
    if isinstance(formatter, str):
        formatter = formatter.split()
    if formatter is not None and (not isinstance(formatter, list) or not formatter):
        raise ConfigError("formatter must be a command string or a non-empty list")

    return CodegenConfig(
        root_dir=root,
        file_header=tuple(str(line) for line in header),
        comment=style,
        formatter=tuple(str(arg) for arg in formatter) if formatter else None,
    )
