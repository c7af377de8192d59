"""Sign generated text and verify embedded signatures."""

from __future__ import annotations

import hashlib
import logging
import re
from dataclasses import dataclass

from signed_codegen.errors import BadSignatureError, MalformedSectionsError, SigningError
from signed_codegen.sections.extractor import strip_manual_bodies
from signed_codegen.signature import (
    DETECTION_ORDER,
    DOC_BLOCK_TEXT,
    SIGNING_PLACEHOLDER,
    ContentKind,
    Variant,
)

logger = logging.getLogger(__name__)

_PATTERNS = {
    variant: re.compile(re.escape(variant.marker) + r" SignedSource<<(?P<digest>[a-f0-9]{32})>>")
    for variant in Variant
}


@dataclass(frozen=True)
class Signature:
    """A signature found in text: which signer produced it, and its digest."""

    variant: Variant
    digest: str


def signing_token(variant: Variant) -> str:
    """The marker plus placeholder a file carries before it is signed."""
    return f"{variant.marker} {SIGNING_PLACEHOLDER}"


def doc_block(variant: Variant, comment: str | None = None) -> str:
    """Text of the signature doc comment, without comment syntax."""
    parts = [DOC_BLOCK_TEXT[variant], ""]
    if comment:
        parts.extend([comment.rstrip("\n"), ""])
    parts.append(signing_token(variant))
    return "\n".join(parts)


def classify(text: str) -> Signature | None:
    """Return the signature embedded in ``text``, or None if unsigned."""
    for variant in DETECTION_ORDER:
        match = _PATTERNS[variant].search(text)
        if match:
            return Signature(variant, match.group("digest"))
    return None


def content_kind(text: str) -> ContentKind:
    signature = classify(text)
    if signature is None:
        return ContentKind.UNSIGNED
    if signature.variant is Variant.PARTIAL:
        return ContentKind.PARTIALLY_SIGNED
    return ContentKind.FULLY_SIGNED


def is_signed(text: str) -> bool:
    return classify(text) is not None


def is_validly_signed(text: str) -> bool:
    """True if ``text`` is signed and its digest matches its content.

    Unsigned text is reported as False, never as an error.

    Raises:
        BadSignatureError: If a partial signature is present but the manual
            sections are too broken to compute the canonical form.
    """
    signature = classify(text)
    if signature is None:
        return False
    unsigned = text.replace(f"SignedSource<<{signature.digest}>>", SIGNING_PLACEHOLDER)
    try:
        expected = _digest(signature.variant, unsigned)
    except MalformedSectionsError as exc:
        raise BadSignatureError(reason=str(exc)) from exc
    valid = expected == signature.digest
    logger.debug("Signature %s %s", signature.variant.marker, "valid" if valid else "mismatch")
    return valid


def sign(text: str, variant: Variant) -> str:
    """Replace the single signing placeholder in ``text`` with its digest.

    Raises:
        SigningError: If ``text`` has no placeholder, or more than one.
        MalformedSectionsError: If a partial text has malformed sections.
    """
    count = text.count(SIGNING_PLACEHOLDER)
    if count != 1:
        raise SigningError(
            f"Failed to sign file: expected exactly one signing token, found {count}"
        )
    digest = _digest(variant, text)
    return text.replace(SIGNING_PLACEHOLDER, f"SignedSource<<{digest}>>")


def sign_full(text: str) -> str:
    return sign(text, Variant.FULL)


def sign_partial(text: str) -> str:
    return sign(text, Variant.PARTIAL)


def _digest(variant: Variant, text: str) -> str:
    if variant is Variant.PARTIAL:
        text = strip_manual_bodies(text)
    return hashlib.md5(text.encode("utf-8", "surrogateescape"), usedforsecurity=False).hexdigest()
