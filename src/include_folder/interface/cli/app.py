from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of defaults and
command-line overrides, generation and result rendering. This is the
adapter a build script calls to regenerate declarations.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from include_folder.core.engine import run_generation
from include_folder.domain.config import get_default_config
from include_folder.domain.result_models import GenerationResult
from include_folder.infra.log_setup import LoggingConfig, configure_logging, get_logger
from include_folder.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (stdout is reserved for generated declarations)
    if args.debug:
        log_level = "DEBUG"
    elif args.verbose:
        log_level = "INFO"
    else:
        log_level = "WARNING"
    try:
        configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))
    except OSError as e:
        print(f"ERROR: Cannot open log file '{args.log_file}': {e}", file=sys.stderr)
        return 1

    # 3. Merge command-line overrides onto defaults
    overrides = cli_args.args_to_overrides(args)
    config = _merge_config(get_default_config(), overrides)
    logger.debug(f"Resolved configuration: {config}")

    # 4. Generation phase
    try:
        result = run_generation(config)
    except KeyboardInterrupt:
        logger.warning("Generation interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130

    # 5. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
        return 0 if result.ok else 1

    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return 1

    _print_result(result)
    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of override values into the base configuration.

    Only known keys with a non-None value are merged.
    """
    out = dict(base)
    for k in base:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_result(result: GenerationResult) -> None:
    """Print the declarations, or a short report when they went to a file."""
    if not result.output_file:
        print(result.rendered)
        return

    summary = result.summary
    print(
        f"Wrote '{summary.get('identifier')}' "
        f"({summary.get('namespaces', 0)} namespaces, {summary.get('modules', 0)} modules) "
        f"to {result.output_file}",
        file=sys.stderr,
    )


if __name__ == "__main__":
    sys.exit(main())
