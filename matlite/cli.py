"""
Command line entry point.

Usage:
    matlite                 # interactive prompt
    matlite script.ml       # process a whole file

Options:
    --prompt TEXT   Prompt string shown before each line
    --no-color      Disable colored messages
    --verbose, -v   Enable debug logging
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import CalculatorConfig
from .repl import run_file, run_repl
from .state import VariableTable


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="matlite",
        description="A small MATLAB-like matrix calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    matlite                   # Start the interactive prompt
    matlite script.ml         # Process a source file
    matlite -v script.ml      # Same, with debug logging
        """
    )
    parser.add_argument('path', nargs='?',
                        help='Source file to process instead of starting the prompt')
    parser.add_argument('--prompt',
                        help='Prompt string (default: ">>")')
    parser.add_argument('--no-color', action='store_true',
                        help='Disable colored messages')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = CalculatorConfig.from_env()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    config = config.with_overrides(
        prompt=args.prompt,
        use_color=False if args.no_color else None,
        log_level="DEBUG" if args.verbose else None,
    )

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    state = VariableTable(config.max_variables)

    if args.path:
        return run_file(args.path, state, config=config)

    return run_repl(state, config=config)


if __name__ == "__main__":
    sys.exit(main())
