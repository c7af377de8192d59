"""Byte-exact file reads and change-suppressing writes.

Files are decoded as UTF-8 with ``surrogateescape``, so bytes that are not
valid UTF-8 survive a read/write round trip unchanged.
"""

from __future__ import annotations

from pathlib import Path

ENCODING = "utf-8"
ERRORS = "surrogateescape"


def read_text(path: Path) -> str | None:
    """Return the file's text, or None if it does not exist."""
    if not path.is_file():
        return None
    return path.read_bytes().decode(ENCODING, ERRORS)


def write_if_changed(path: Path, content: str, dry_run: bool = False) -> bool:
    """Write ``content`` unless the file already holds exactly these bytes.

    Parent directories are created as needed. Returns True if the file was
    (or, with ``dry_run``, would be) written.
    """
    data = content.encode(ENCODING, ERRORS)
    if path.is_file() and path.read_bytes() == data:
        return False
    if not dry_run:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    return True
