"""
Command line entry point for the Supabase smoke test.

Runs every stage once and prints the result of each stage to stdout. On the
first failure a diagnostic is printed to stderr and the exit code is 1.
"""
import argparse
import json
import logging
import sys
from typing import Any

from .config.settings import get_settings, require_supabase_config
from .errors.exceptions import BaseAppException
from .errors.handlers import render_cli_error
from .services.db import connector as db_connector
from .services.smoke import STAGE_AUTH, STAGE_INSERT, STAGE_SELECT, run_smoke_test

logger = logging.getLogger(__name__)

STAGE_LABELS = {
    STAGE_AUTH: "Signed in anon as:",
    STAGE_INSERT: "Inserted:",
    STAGE_SELECT: "Recent rows:",
}


def print_stage(stage: str, value: Any) -> None:
    """
    Print the outcome of a stage. Rows are printed as JSON, other values as-is.
    """
    if isinstance(value, (list, dict)):
        value = json.dumps(value, default=str)
    print(STAGE_LABELS[stage], value, flush=True)


def generate_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Supabase smoke test: anonymous sign-in, insert and read back"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each stage (same as --log-level INFO)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = generate_argument_parser()
    args = parser.parse_args(argv)

    level = args.log_level or ("INFO" if args.verbose else "WARNING")
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        supabase_url, supabase_key = require_supabase_config(get_settings())
        client = db_connector.new_client(supabase_url, supabase_key)
        run_smoke_test(client, report=print_stage)
    except BaseAppException as e:
        logger.debug("Smoke test aborted", exc_info=True)
        print(render_cli_error(e), file=sys.stderr, flush=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
