"""Manual sections inside generated files.

A manual section is a hand-editable region bounded by delimiter lines:

    # BEGIN MANUAL SECTION my_key
    ...anything a human writes here survives regeneration...
    # END MANUAL SECTION

Delimiters are recognized by phrase at the start of a line, after an
optional comment opener, so any line-comment syntax works.
"""

from signed_codegen.comments import HASH, CommentStyle

BEGIN_PHRASE = "BEGIN MANUAL SECTION"
END_PHRASE = "END MANUAL SECTION"


def begin_marker(key: str, style: CommentStyle = HASH) -> str:
    """Render the opening delimiter line for section ``key``."""
    if not key or any(ch.isspace() for ch in key):
        raise ValueError(f"Manual section key must be non-empty without whitespace: {key!r}")
    return style.line(f"{BEGIN_PHRASE} {key}")


def end_marker(style: CommentStyle = HASH) -> str:
    """Render the closing delimiter line."""
    return style.line(END_PHRASE)


def manual_section(key: str, body: str = "", style: CommentStyle = HASH) -> str:
    """Render a complete placeholder section, body included."""
    if body and not body.endswith("\n"):
        body += "\n"
    return f"{begin_marker(key, style)}\n{body}{end_marker(style)}"
