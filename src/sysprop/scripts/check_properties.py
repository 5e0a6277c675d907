"""CLI: Check that mandatory (and optional) environment properties are set."""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from sysprop.constants.messages import STATUS_MISSING, STATUS_OK, STATUS_UNSET
from sysprop.utils.env_utils import PropertyAccessor, load_env_file
from sysprop.utils.logger import configure_logging, get_cli_logger
from sysprop.utils.schema_utils import LookupOutcome


def _non_empty_key(text: str) -> str:
    if not text:
        raise argparse.ArgumentTypeError("property key must not be empty")
    return text


def _properties(count: int) -> str:
    return "property" if count == 1 else "properties"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sysprop-check",
        description="Report which environment properties are set.",
    )
    parser.add_argument("keys", nargs="*", type=_non_empty_key, metavar="KEY",
                        help="mandatory property key")
    parser.add_argument("--optional", action="append", default=[], type=_non_empty_key,
                        metavar="KEY", help="optional property key (repeatable)")
    parser.add_argument("--env-file", help="load variables from this .env file first")
    parser.add_argument("--show-values", action="store_true", help="print values instead of masking them")
    parser.add_argument("--json", action="store_true", help="print outcomes as a JSON array")
    return parser


def check_properties(mandatory: List[str], optional: List[str],
                     accessor: Optional[PropertyAccessor] = None) -> List[LookupOutcome]:
    """Look up every key and return one outcome per key, mandatory keys first."""
    accessor = accessor or PropertyAccessor()
    outcomes = []
    for key in mandatory:
        outcomes.append(LookupOutcome(key=key, value=accessor.get_optional(key), mandatory=True))
    for key in optional:
        outcomes.append(LookupOutcome(key=key, value=accessor.get_optional(key)))
    return outcomes


def format_outcome(outcome: LookupOutcome) -> str:
    if outcome.present:
        return f"{STATUS_OK} {outcome.key}={outcome.value}"
    if outcome.mandatory:
        return f"{STATUS_MISSING} {outcome.key}"
    return f"{STATUS_UNSET} {outcome.key}"


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    loaded = load_env_file(args.env_file) if args.env_file else None
    # Logging reads DEBUG_SYSPROP and SYSPROP_LOG_DIR, which the env file may set
    configure_logging()
    logger = get_cli_logger()
    if args.env_file:
        logger.debug(f"Loaded env file {args.env_file}: {loaded}")

    outcomes = check_properties(args.keys, args.optional)
    if not args.show_values:
        outcomes = [o.masked() for o in outcomes]

    if args.json:
        print(json.dumps([o.model_dump() for o in outcomes], indent=2))
    else:
        for outcome in outcomes:
            print(format_outcome(outcome))

    missing = [o.key for o in outcomes if o.missing_mandatory]
    if missing:
        logger.error(f"{len(missing)} mandatory {_properties(len(missing))} not set: {', '.join(missing)}")
        return 1
    logger.info(f"All {len(args.keys)} mandatory {_properties(len(args.keys))} set.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
