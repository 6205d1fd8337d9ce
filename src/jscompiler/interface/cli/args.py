from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

from jscompiler import __version__

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the jscompiler CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="jscompiler",
        description="Strip comments and removable whitespace from JavaScript sources.",
    )

    # --- Input / Output ---
    p.add_argument(
        "input_path",
        nargs="?",
        default=None,
        help="JavaScript file to compile ('-' or omitted reads stdin).",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Write the result to this file instead of stdout.",
    )
    p.add_argument(
        "--encoding",
        dest="encoding",
        default=None,
        help="Source encoding (default: utf-8).",
    )

    # --- Orchestration ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Run the pipeline but return the original source unchanged.",
    )
    p.add_argument(
        "--no-result",
        action="store_true",
        help="On a cache hit, emit no payload (only with --file-cache).",
    )

    # --- File Cache ---
    p.add_argument(
        "--file-cache",
        action="store_true",
        help="Serve and store results in the content-addressed file cache.",
    )
    p.add_argument(
        "--cache-dir",
        dest="file_cache_dir",
        default=None,
        help="Directory of the file cache.",
    )
    p.add_argument(
        "--purge-cache",
        action="store_true",
        help="Delete every cached artifact and exit.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the persisted configuration.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the resulting configuration for later runs.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration as JSON and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the compile result as JSON.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"jscompiler {__version__}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["file_cache_dir"] = args.file_cache_dir
    overrides["encoding"] = args.encoding
    overrides["log_file"] = args.log_file

    if args.dry_run:
        overrides["dry_run"] = True
    if args.no_result:
        overrides["no_result"] = True
    if args.file_cache:
        overrides["file_cache"] = True
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
