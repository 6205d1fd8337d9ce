from __future__ import annotations

"""
Compile Orchestration.

Wraps the minifier with the caller-facing options: dry runs, the
content-addressed file cache and payload suppression. Malformed JavaScript
and cache failures come back as failed ``CompileResult`` objects; the
minifier itself stays a pure function.
"""

import logging
import os
from typing import Any, Optional, Union

from jscompiler.core.processing.minifier import minify
from jscompiler.core.services.cache import CacheService
from jscompiler.domain.compile_models import (
    CompileOptions,
    CompileResult,
    create_error_result,
    create_success_result,
)
from jscompiler.domain.errors import INVALID_ENCODING, CacheError, MinifyError
from jscompiler.infra.fs import decode_source

logger = logging.getLogger(__name__)

JS_FILE_EXT = ".js"


def compile(
        code: Union[str, bytes],
        options: Optional[CompileOptions] = None,
        *,
        cache: Optional[CacheService] = None,
        **overrides: Any,
) -> CompileResult:
    """
    Minify JavaScript code according to the given options.

    The module name is always derived from the raw input. With ``file_cache``
    enabled, a cached artifact is served when present; otherwise the output
    is produced and stored. ``no_result`` suppresses the payload of a cache
    hit only.

    Args:
        code: JavaScript source as text or raw bytes.
        options: Compile switches; defaults to ``CompileOptions()``.
        cache: Cache service to use instead of one built from the options.
        **overrides: Individual option overrides (e.g. ``dry_run=True``).

    Returns:
        CompileResult: Success with the output, or failure with an error kind.
    """
    opts = (options or CompileOptions()).with_overrides(**overrides)
    module = CacheService.compute_module_name(code)
    original_size = 0

    try:
        text = decode_source(code, opts.encoding)
        original_size = len(text)

        if not opts.file_cache:
            return create_success_result(module, opts, _produce(text, opts), original_size)

        service = cache or CacheService(opts.file_cache_dir, opts.encoding)
        return _compile_cached(service, module, text, opts, original_size)

    except MinifyError as e:
        logger.error(f"Compilation of {module} failed: {e}")
        return create_error_result(str(e), e.kind, module, opts, original_size)
    except CacheError as e:
        logger.error(f"Cache unavailable for {module}: {e}")
        return create_error_result(str(e), e.kind, module, opts, original_size)
    except LookupError as e:
        logger.error(f"Cannot compile {module}: {e}")
        return create_error_result(str(e), INVALID_ENCODING, module, opts, original_size)


def compile_file(
        path: str,
        options: Optional[CompileOptions] = None,
        *,
        cache: Optional[CacheService] = None,
        **overrides: Any,
) -> CompileResult:
    """
    Read a JavaScript file and compile its contents.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Input file does not exist: {path}")

    if not path.endswith(JS_FILE_EXT):
        logger.debug(f"Compiling non-{JS_FILE_EXT} file: {path}")

    with open(path, "rb") as f:
        raw = f.read()

    logger.info(f"Compiling {path} ({len(raw)} bytes)")
    return compile(raw, options, cache=cache, **overrides)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _produce(text: str, opts: CompileOptions) -> str:
    if opts.dry_run:
        logger.debug("Dry run: returning the original source.")
        return text
    return minify(text)


def _compile_cached(
        service: CacheService,
        module: str,
        text: str,
        opts: CompileOptions,
        original_size: int,
) -> CompileResult:
    lookup = service.load(module, request_content=not opts.no_result)
    if lookup.hit:
        return create_success_result(
            module, opts, lookup.content, original_size,
            cache_hit=True, cache_path=lookup.path,
        )

    content = _produce(text, opts)
    path = service.store(module, content)
    return create_success_result(module, opts, content, original_size, cache_path=path)
