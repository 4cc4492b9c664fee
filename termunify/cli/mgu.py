"""CLI tool computing a most general unifier for each set of term equations."""

import argparse
import logging
import sys

from termunify.global_params import global_config
from termunify.unification import (
    build_expression_sets,
    format_expression_sets,
    read_input,
    report,
    solve_expression_sets,
)
from termunify.utils.exceptions import InputError

EPILOG = """\
Sets of equations are separated by lines holding a '#':

  #
  ?x1 = g(?x2)
  f(?x1,h(?x1),?x2) = f(g(?x3),?x4,?x3)
  #
  ?y = h(a(),b(),c())

Variables start with '?'. Functional terms are a symbol followed by an
argument list; a() is a constant. Each set is solved concurrently.
"""


def notify(msg: str) -> None:
    print("\n!!! " + msg, file=sys.stderr)


def main(argv=None):
    """Main entry point for the unification CLI."""
    parser = argparse.ArgumentParser(
        description="Compute a most general unifier for each set of term equations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    parser.add_argument(
        "file",
        type=str,
        nargs="?",
        default=global_config.default_input,
        help=f"Equation file (default: {global_config.default_input})",
    )
    args = parser.parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=global_config.get_log_level(),
        format=global_config.log_format,
    )

    try:
        expression_sets = build_expression_sets(read_input(args.file),
                                                global_config.set_delimiter)
    except InputError as e:
        notify(str(e))
        return 1

    print(format_expression_sets(expression_sets))
    report(solve_expression_sets(expression_sets))
    return 0


if __name__ == "__main__":
    sys.exit(main())
