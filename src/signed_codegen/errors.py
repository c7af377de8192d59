"""Error conditions raised while signing, verifying and committing artifacts."""

from __future__ import annotations


class CodegenError(Exception):
    """Base class for signed-codegen errors."""


class SignatureError(CodegenError):
    """Prior content at a path failed signature checks."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class NoSignatureError(SignatureError):
    def __init__(self, path: str):
        super().__init__(
            f"The existing generated file '{path}' does not have a signature",
            path,
        )


class BadSignatureError(SignatureError):
    def __init__(self, path: str | None = None, reason: str | None = None):
        message = (
            f"The signature of the existing generated file '{path}' is invalid"
            if path
            else "The signature is invalid"
        )
        if reason:
            message += f": {reason}"
        super().__init__(message, path)
        self.reason = reason


class MalformedSectionsError(CodegenError):
    """Manual-section delimiters are unbalanced, nested or duplicated."""

    def __init__(self, message: str, line: int | None = None):
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


class SigningError(CodegenError):
    """Text could not be signed (missing or repeated signing token)."""


class ConfigError(CodegenError):
    """Configuration file is missing, malformed or inconsistent."""


class FormatterError(CodegenError):
    """The external formatter failed."""
