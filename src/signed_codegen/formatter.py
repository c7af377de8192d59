"""External formatters run over generated code before it is signed."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol, Sequence

from signed_codegen.errors import FormatterError

logger = logging.getLogger(__name__)


class Formatter(Protocol):
    def format(self, code: str, path: Path) -> str: ...


class CommandFormatter:
    """Pipe code through a command that reads stdin and writes stdout.

    A ``{path}`` argument is replaced with the target path, for tools that
    pick settings by file name.
    """

    def __init__(self, argv: Sequence[str], timeout: float | None = 60):
        if not argv:
            raise ValueError("formatter command must not be empty")
        self.argv = list(argv)
        self.timeout = timeout

    def format(self, code: str, path: Path) -> str:
        argv = [arg.replace("{path}", str(path)) for arg in self.argv]
        logger.debug("Formatting %s with %s", path, argv[0])
        try:
            result = subprocess.run(
                argv,
                input=code,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as exc:
            raise FormatterError(f"Formatter {argv[0]} failed for {path}: {exc}") from exc
        if result.returncode != 0:
            raise FormatterError(
                f"Formatter {argv[0]} exited {result.returncode} for {path}: {result.stderr.strip()}"
            )
        return result.stdout
