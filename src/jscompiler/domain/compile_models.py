from __future__ import annotations

"""
Compilation Domain Data Models.

Defines the options accepted by the compile orchestration and the immutable
result object handed back to interface layers (CLI, embedding code).
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from jscompiler.infra.fs import DEFAULT_ENCODING

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CompileOptions:
    """
    Orchestration switches for a single compile call.

    Attributes:
        dry_run: Skip minification and return the original text.
        no_result: On a cache hit, return no payload; the caller reads the
            cache file itself. Meaningful only together with ``file_cache``.
        file_cache: Enable the content-addressed file cache.
        file_cache_dir: Directory of the file cache.
        encoding: Encoding used to decode byte input and cache files.
    """
    dry_run: bool = False
    no_result: bool = False
    file_cache: bool = False
    file_cache_dir: Optional[str] = None
    encoding: str = DEFAULT_ENCODING

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> CompileOptions:
        """Build options from a validated configuration dictionary."""
        return cls(
            dry_run=bool(cfg.get("dry_run", False)),
            no_result=bool(cfg.get("no_result", False)),
            file_cache=bool(cfg.get("file_cache", False)),
            file_cache_dir=cfg.get("file_cache_dir") or None,
            encoding=cfg.get("encoding") or DEFAULT_ENCODING,
        )

    def with_overrides(self, **overrides: Any) -> CompileOptions:
        """Return a copy with the non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


@dataclass(frozen=True)
class CompileResult:
    """
    Result of one compile call.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        error_kind: Stable identifier of the failure family.
        module: Module name derived from the raw source.
        content: Output text; None when a cache hit was served under ``no_result``.
        cache_hit: True when the content came from (or was found in) the cache.
        cache_path: Cache file backing this module, if caching was used.
        dry_run: True when minification was skipped.
        original_size: Length of the input text in characters.
        minified_size: Length of ``content`` in characters.
    """
    ok: bool
    error: str
    error_kind: str
    module: str
    content: Optional[str] = None
    cache_hit: bool = False
    cache_path: str = ""
    dry_run: bool = False
    original_size: int = 0
    minified_size: int = 0

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        error_kind: str,
        module: str,
        options: CompileOptions,
        original_size: int = 0,
        cache_path: str = "",
) -> CompileResult:
    """
    Create a failed compile result.

    Args:
        error: Detailed error description.
        error_kind: Failure family (see ``jscompiler.domain.errors``).
        module: Module name of the input.
        options: Options of the failed call.
        original_size: Length of the input text.
        cache_path: Cache file involved in the failure, if any.

    Returns:
        CompileResult: An immutable error result.
    """
    return CompileResult(
        ok=False,
        error=error,
        error_kind=error_kind,
        module=module,
        content=None,
        cache_path=cache_path,
        dry_run=options.dry_run,
        original_size=original_size,
    )


def create_success_result(
        module: str,
        options: CompileOptions,
        content: Optional[str],
        original_size: int,
        cache_hit: bool = False,
        cache_path: str = "",
) -> CompileResult:
    """
    Create a successful compile result.

    Args:
        module: Module name of the input.
        options: Options of the call.
        content: Output text or None when no payload is returned.
        original_size: Length of the input text.
        cache_hit: Whether the artifact was found in the cache.
        cache_path: Cache file backing this module, if caching was used.

    Returns:
        CompileResult: An immutable success result.
    """
    return CompileResult(
        ok=True,
        error="",
        error_kind="",
        module=module,
        content=content,
        cache_hit=cache_hit,
        cache_path=cache_path,
        dry_run=options.dry_run,
        original_size=original_size,
        minified_size=len(content) if content is not None else 0,
    )
