"""Regenerate one artifact without losing manual code or accepting tampering.

The commit protocol:
1. Skip an existing target outright in create-only mode
2. Read prior content from legacy paths and the target, verifying each
   signature unless clobbering
3. Render the new body
4. Merge prior manual sections (partial files) and sign
5. Write only if the bytes differ
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from signed_codegen.artifact.filesystem import read_text, write_if_changed
from signed_codegen.artifact.options import Artifact, CommitOptions, CommitResult
from signed_codegen.config import CodegenConfig
from signed_codegen.errors import BadSignatureError, MalformedSectionsError, NoSignatureError
from signed_codegen.formatter import CommandFormatter, Formatter
from signed_codegen.sections.extractor import (
    contains_manual_section,
    extract_sections,
    validate_sections,
)
from signed_codegen.sections.merger import merge
from signed_codegen.signature import Variant
from signed_codegen.signature.scheme import is_signed, is_validly_signed, sign_full, sign_partial

logger = logging.getLogger(__name__)

Renderer = Callable[[], str]


def commit(
    artifact: Artifact,
    render: Renderer,
    options: CommitOptions | None = None,
    config: CodegenConfig | None = None,
    formatter: Formatter | None = None,
) -> CommitResult:
    """Render, merge, sign and write one artifact.

    Args:
        artifact: Target and legacy paths plus the file layout.
        render: Produces the artifact body. Not called in create-only mode
            when the target exists.
        options: Commit switches. Defaults to a signed, verifying commit.
        config: Run settings. Defaults to ``CodegenConfig()``.
        formatter: Post-processing filter. Defaults to the configured
            formatter command, if any.

    Returns:
        CREATED if the target did not exist, UPDATED if its bytes changed,
        UNCHANGED otherwise.

    Raises:
        NoSignatureError: Prior content has no signature (unless clobbering).
        BadSignatureError: Prior content fails verification (unless clobbering).
        MalformedSectionsError: Manual sections in prior content or in the
            rendered body are malformed.
    """
    options = options or CommitOptions()
    config = config or CodegenConfig()
    if formatter is None and config.formatter:
        formatter = CommandFormatter(config.formatter)

    existed = artifact.exists()
    if options.create_only and existed:
        logger.info("unchanged %s (create-only)", artifact.relative_name)
        return CommitResult.UNCHANGED

    if options.signed:
        prior = _load_prior(artifact, config, options.clobber)
        code = _render_signed(artifact, render(), prior, config, options, formatter)
    else:
        code = artifact.layout.render(render(), config, None)
        code = _format(code, artifact, formatter)

    changed = write_if_changed(artifact.target, code, dry_run=options.dry_run)
    if not existed:
        result = CommitResult.CREATED
    elif changed:
        result = CommitResult.UPDATED
    else:
        result = CommitResult.UNCHANGED
    logger.info(
        "%s %s%s", result.value, artifact.relative_name, " (dry run)" if options.dry_run else "",
    )
    return result


def _load_prior(artifact: Artifact, config: CodegenConfig, clobber: bool) -> list[tuple[Path, str]]:
    """Read legacy files then the target, verifying each non-empty one."""
    prior: list[tuple[Path, str]] = []
    for path in (*artifact.legacy_paths, artifact.target):
        content = read_text(path)
        if content is None:
            continue
        if content and not clobber:
            _verify(content, config.relative_name(path))
        prior.append((path, content))
    return prior


def _verify(content: str, relative_path: str) -> None:
    if not is_signed(content):
        raise NoSignatureError(relative_path)
    try:
        valid = is_validly_signed(content)
    except BadSignatureError as exc:
        raise BadSignatureError(relative_path, exc.reason) from exc
    if not valid:
        raise BadSignatureError(relative_path)
    logger.debug("verified signature of %s", relative_path)


def _render_signed(
    artifact: Artifact,
    body: str,
    prior: list[tuple[Path, str]],
    config: CodegenConfig,
    options: CommitOptions,
    formatter: Formatter | None,
) -> str:
    try:
        validate_sections(body)
    except MalformedSectionsError as exc:
        raise MalformedSectionsError(f"rendered {artifact.relative_name}: {exc}") from exc

    if not contains_manual_section(body):
        code = artifact.layout.render(body, config, Variant.FULL)
        return sign_full(_format(code, artifact, formatter))

    code = artifact.layout.render(body, config, Variant.PARTIAL)
    # The target's own sections take precedence over legacy files.
    ordered = sorted(prior, key=lambda item: item[0] != artifact.target)
    section_sets = [_sections_of(text, config.relative_name(path)) for path, text in ordered]
    code = merge(code, section_sets, options.rekey)
    return sign_partial(_format(code, artifact, formatter))


def _sections_of(text: str, relative_path: str) -> dict[str, str]:
    try:
        return extract_sections(text)
    except MalformedSectionsError as exc:
        raise MalformedSectionsError(f"{relative_path}: {exc}") from exc


def _format(code: str, artifact: Artifact, formatter: Formatter | None) -> str:
    if formatter is None:
        return code
    return formatter.format(code, artifact.target)
