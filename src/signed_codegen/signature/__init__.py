"""Tamper-evident signatures embedded in generated files.

A file to be signed carries a placeholder token next to a variant marker:

    @generated <<SignedSource::*O*zOeWoEQle#+L!plEphiEmie@IsG>>

Signing replaces the placeholder with the md5 of the file's canonical form:

    @generated SignedSource<<0123456789abcdef0123456789abcdef>>

Fully generated files are hashed as-is. Partially generated files are
hashed with every manual-section body removed, so hand edits inside
manual sections keep the signature valid.
"""

from enum import Enum

SIGNING_PLACEHOLDER = "<<SignedSource::*O*zOeWoEQle#+L!plEphiEmie@IsG>>"


class Variant(str, Enum):
    """Known signer variants, in detection priority order."""

    PARTIAL = "@partially-generated"
    FULL = "@generated"

    @property
    def marker(self) -> str:
        return self.value


class ContentKind(str, Enum):
    UNSIGNED = "unsigned"
    FULLY_SIGNED = "fully-signed"
    PARTIALLY_SIGNED = "partially-signed"


DETECTION_ORDER = (Variant.PARTIAL, Variant.FULL)

DOC_BLOCK_TEXT = {
    Variant.FULL: "This file is generated. Do not modify it manually!",
    Variant.PARTIAL: (
        "This file is partially generated. Only make modifications between "
        "BEGIN MANUAL SECTION and END MANUAL SECTION designators."
    ),
}
