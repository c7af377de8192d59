"""Find manual sections in generated text.

Text is split into an ordered stream of chunks. Generated chunks carry the
key ``None`` and include the delimiter lines themselves; manual chunks carry
their section key and hold exactly the lines between the delimiters. Joining
every chunk reproduces the input byte for byte.
"""

from __future__ import annotations

import re
from typing import Iterator

from signed_codegen.errors import MalformedSectionsError
from signed_codegen.sections import BEGIN_PHRASE, END_PHRASE

# A delimiter phrase counts only at the start of a line, after an optional
# comment opener, so prose that mentions the phrase is not a delimiter.
_LEAD = r"^[ \t]*(?:[#/*;%!<-]+[ \t]*)?"
# The phrase is followed by whitespace, end of line or a comment closer.
_BOUNDARY = r"(?![^\s*>-])"
_BEGIN_RE = re.compile(_LEAD + re.escape(BEGIN_PHRASE) + _BOUNDARY + r"(?:[ \t]+(?P<key>\S+))?", re.MULTILINE)
_END_RE = re.compile(_LEAD + re.escape(END_PHRASE) + _BOUNDARY, re.MULTILINE)
_COMMENT_CLOSERS = ("*/", "-->")


def _parse_key(line: str, lineno: int) -> str:
    match = _BEGIN_RE.match(line)
    key = (match.group("key") if match else None) or ""
    for closer in _COMMENT_CLOSERS:
        if key.endswith(closer):
            key = key[: -len(closer)]
    if not key:
        raise MalformedSectionsError("manual section begin without a key", lineno)
    return key


def iter_chunks(text: str) -> Iterator[tuple[str | None, str]]:
    """Yield ``(key, chunk)`` pairs in document order.

    Raises:
        MalformedSectionsError: On an end without a begin, a begin inside an
            open section, a begin without a key, a duplicate key, or a
            section left open at the end of the text.
    """
    seen: set[str] = set()
    current: str | None = None
    opened_at = 0
    chunk: list[str] = []

    for lineno, line in enumerate(text.splitlines(keepends=True), start=1):
        if _BEGIN_RE.match(line):
            if current is not None:
                raise MalformedSectionsError(
                    f"manual section begin inside open section '{current}'", lineno,
                )
            key = _parse_key(line, lineno)
            if key in seen:
                raise MalformedSectionsError(f"duplicate manual section key '{key}'", lineno)
            seen.add(key)
            chunk.append(line)
            yield None, "".join(chunk)
            chunk = []
            current = key
            opened_at = lineno
        elif _END_RE.match(line):
            if current is None:
                raise MalformedSectionsError("manual section end without a begin", lineno)
            yield current, "".join(chunk)
            chunk = [line]
            current = None
        else:
            chunk.append(line)

    if current is not None:
        raise MalformedSectionsError(
            f"manual section '{current}' is not closed before end of text", opened_at,
        )
    if chunk:
        yield None, "".join(chunk)


def contains_manual_section(text: str) -> bool:
    return _BEGIN_RE.search(text) is not None


def extract_sections(text: str) -> dict[str, str]:
    """Return ``{key: body}`` for every manual section, in document order."""
    return {key: body for key, body in iter_chunks(text) if key is not None}


def section_keys(text: str) -> list[str]:
    return [key for key, _ in iter_chunks(text) if key is not None]


def strip_manual_bodies(text: str) -> str:
    """Drop every manual body, keeping generated text and delimiter lines."""
    return "".join(chunk for key, chunk in iter_chunks(text) if key is None)


def validate_sections(text: str) -> None:
    """Raise MalformedSectionsError if the delimiters in ``text`` are not well-formed."""
    for _ in iter_chunks(text):
        pass
