"""Comment syntaxes used to render markers and header lines."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CommentStyle:
    """A single-line comment syntax: ``prefix text suffix``."""

    name: str
    prefix: str
    suffix: str = ""

    def line(self, text: str) -> str:
        if not text:
            return " ".join(part for part in (self.prefix.strip(), self.suffix.strip()) if part)
        return f"{self.prefix}{text}{self.suffix}"

    def lines(self, text: str) -> list[str]:
        return [self.line(part) for part in text.split("\n")]


HASH = CommentStyle("hash", "# ")
SLASH = CommentStyle("slash", "// ")
BLOCK = CommentStyle("block", "/* ", " */")

COMMENT_STYLES = {style.name: style for style in (HASH, SLASH, BLOCK)}


def comment_style(name: str) -> CommentStyle:
    """Look up a comment style by name (``hash``, ``slash`` or ``block``)."""
    try:
        return COMMENT_STYLES[name]
    except KeyError:
        valid = ", ".join(sorted(COMMENT_STYLES))
        raise ValueError(f"Unknown comment style: {name!r}. Valid: {valid}") from None
