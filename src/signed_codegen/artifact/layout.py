"""File preamble: shebang, language declaration, header and signature doc block."""

from __future__ import annotations

from dataclasses import dataclass

from signed_codegen.config import CodegenConfig
from signed_codegen.signature import Variant
from signed_codegen.signature.scheme import doc_block


@dataclass(frozen=True)
class FileLayout:
    """What goes above the rendered body of one artifact.

    ``generated_from`` names the script or input the file was generated
    from; it is added to the signature doc block.
    """

    shebang: str | None = None
    declaration: str | None = None
    doc_comment: str | None = None
    generated_from: str | None = None

    def __post_init__(self) -> None:
        if self.shebang is not None:
            if "\n" in self.shebang:
                raise ValueError("Shebang must be a single line")
            if not self.shebang.startswith("#!"):
                raise ValueError("Shebang lines start with #!")

    def signature_comment(self) -> str | None:
        parts = []
        if self.doc_comment:
            parts.append(self.doc_comment.rstrip("\n"))
        if self.generated_from:
            parts.append(f"Generated by: {self.generated_from}")
        return "\n".join(parts) or None

    def render(self, body: str, config: CodegenConfig, variant: Variant | None) -> str:
        """Assemble the full file text.

        With ``variant`` None the file is unsigned and carries no doc block.
        """
        lines: list[str] = []
        if self.shebang:
            lines.append(self.shebang)
        if self.declaration:
            lines.append(self.declaration)
        lines.extend(config.comment.line(line) for line in config.file_header)
        if variant is not None:
            lines.extend(config.comment.lines(doc_block(variant, self.signature_comment())))
        return "".join(line + "\n" for line in lines) + body
