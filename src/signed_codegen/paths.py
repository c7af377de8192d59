"""Project root resolution.

Resolved once at process start and passed explicitly from then on.

Environment variables:
    SIGNED_CODEGEN_ROOT: root directory generated paths are relative to
        (default: current working directory)
    SIGNED_CODEGEN_CONFIG: explicit path to signed-codegen.yaml
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "signed-codegen.yaml"


def project_root() -> Path:
    """Return the project root directory."""
    env = os.environ.get("SIGNED_CODEGEN_ROOT")
    if env:
        return Path(env).expanduser().resolve()
    return Path.cwd().resolve()


def find_config(start: Path | str | None = None) -> Path | None:
    """Locate signed-codegen.yaml.

    Honours SIGNED_CODEGEN_CONFIG, otherwise walks from ``start`` (default:
    the current directory) up through its parents.
    """
    env = os.environ.get("SIGNED_CODEGEN_CONFIG")
    if env:
        return Path(env).expanduser().resolve()
    here = Path(start).resolve() if start else Path.cwd().resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
