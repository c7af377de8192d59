"""Splice previously written manual sections into a fresh skeleton."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Sequence

from signed_codegen.sections.extractor import iter_chunks

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RekeyMap:
    """New section key -> ordered candidate old keys.

    Consulted only when the old content has no section under the new key.
    The first candidate present in the old content supplies the body.
    """

    entries: tuple[tuple[str, tuple[str, ...]], ...] = ()

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Sequence[str]]) -> "RekeyMap":
        return cls(tuple((new, tuple(olds)) for new, olds in mapping.items()))

    def rekey(self, old_key: str, new_key: str) -> "RekeyMap":
        """Return a copy that also pulls ``old_key`` content into ``new_key``."""
        mapping = self.as_dict()
        mapping[new_key] = mapping.get(new_key, ()) + (old_key,)
        return RekeyMap.from_mapping(mapping)

    def candidates(self, new_key: str) -> tuple[str, ...]:
        for key, olds in self.entries:
            if key == new_key:
                return olds
        return ()

    def as_dict(self) -> dict[str, tuple[str, ...]]:
        return dict(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)


def combine_sections(section_sets: Sequence[Mapping[str, str]]) -> dict[str, str]:
    """Fold section sets in order; the earliest set wins on a shared key."""
    combined: dict[str, str] = {}
    for sections in section_sets:
        for key, body in sections.items():
            combined.setdefault(key, body)
    return combined


def merge(
    skeleton: str,
    old_section_sets: Sequence[Mapping[str, str]] = (),
    rekey: RekeyMap | None = None,
) -> str:
    """Fill the skeleton's manual sections from old content.

    For each section the skeleton declares: a body stored under the same key
    wins, then the first rekey candidate found, then the skeleton's own
    placeholder body. Old sections the skeleton no longer declares are
    dropped.

    Raises:
        MalformedSectionsError: If the skeleton's delimiters are malformed,
            even when there is no old content to merge.
    """
    available = combine_sections(old_section_sets)
    rekey = rekey or RekeyMap()

    merged: list[str] = []
    declared: set[str] = set()
    for key, chunk in iter_chunks(skeleton):
        if key is None:
            merged.append(chunk)
            continue
        declared.add(key)
        if key in available:
            merged.append(available[key])
        else:
            merged.append(_rekeyed_body(key, chunk, available, rekey))

    dropped = set(available) - declared
    if dropped:
        logger.debug("Dropping manual sections no longer in skeleton: %s", sorted(dropped))
    return "".join(merged)


def _rekeyed_body(key: str, default: str, available: Mapping[str, str], rekey: RekeyMap) -> str:
    for old_key in rekey.candidates(key):
        if old_key in available:
            logger.debug("Manual section '%s' takes content from '%s'", key, old_key)
            return available[old_key]
    return default
