from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: configuration resolution (defaults,
persistent storage and CLI overrides), logging bootstrap, compilation and
result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from jscompiler.core import compiler
from jscompiler.core.services.cache import CacheService
from jscompiler.core.validator import validate_config
from jscompiler.domain.compile_models import CompileOptions, CompileResult
from jscompiler.domain.config import get_default_config, load_config, save_config
from jscompiler.domain.errors import CacheError
from jscompiler.infra.fs import encode_source, write_text
from jscompiler.infra.logging import LoggingConfig, configure_logging, get_logger
from jscompiler.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_MISSING_INPUT = 2
EXIT_INTERRUPTED = 130

_STDIN_MARKER = "-"

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Resolve configuration (defaults or persisted state, then overrides)
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 2. Logging bootstrap (stderr, optional rotating file)
    configure_logging(LoggingConfig(
        level=clean_conf["log_level"],
        console=True,
        log_file=clean_conf["log_file"] or None,
    ))

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_config:
        save_config(clean_conf)

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    options = CompileOptions.from_config(clean_conf)

    if args.purge_cache:
        return _purge_cache(options)

    # 3. Compilation phase
    input_path = args.input_path
    try:
        if input_path in (None, _STDIN_MARKER):
            logger.debug("Reading JavaScript from stdin.")
            result = compiler.compile(sys.stdin.buffer.read(), options)
        elif not os.path.isfile(input_path):
            msg = f"Input path does not exist: {input_path}"
            logger.error(msg)
            print(f"ERROR: {msg}", file=sys.stderr)
            return EXIT_MISSING_INPUT
        else:
            result = compiler.compile_file(input_path, options)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except OSError as e:
        logger.critical(f"Cannot read input: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    # 4. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
        return EXIT_OK if result.ok else EXIT_FAILURE

    return _emit_result(result, args.output_path, options.encoding)

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of override values into the base configuration.

    Only known keys with a non-None value are merged.
    """
    out = dict(base)
    keys_to_merge = [
        "file_cache", "file_cache_dir", "dry_run", "no_result",
        "encoding", "log_level", "log_file",
    ]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# ACTIONS AND RENDERING
# -----------------------------------------------------------------------------

def _purge_cache(options: CompileOptions) -> int:
    try:
        removed = CacheService(options.file_cache_dir, options.encoding).purge_all()
    except CacheError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE
    print(f"Removed {removed} cached file(s).")
    return EXIT_OK


def _emit_result(result: CompileResult, output_path: Optional[str], encoding: str) -> int:
    """
    Write the compiled payload and report a one-line summary.

    Args:
        result: The compile result to render.
        output_path: Destination file, or None for stdout.
        encoding: Encoding of the written payload.

    Returns:
        int: Process exit code.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return EXIT_FAILURE

    if result.content is None:
        # Payload suppressed: the caller reads the cache file itself
        logger.info(f"{result.module}: cached at {result.cache_path}")
        return EXIT_OK

    if output_path:
        write_text(output_path, result.content, encoding)
        logger.info(f"Wrote {output_path}")
    else:
        sys.stdout.buffer.write(encode_source(result.content, encoding))
        sys.stdout.buffer.flush()

    origin = "cache" if result.cache_hit else "minifier"
    logger.info(
        f"{result.module}: {result.original_size} -> {result.minified_size} chars (from {origin})"
    )
    return EXIT_OK

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
