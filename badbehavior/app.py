"""
badbehavior command line.

Reads a LogTen Pro logbook, checks every flight against the FAR currency
rules, and prints the flights that broke one.

Usage:
    badbehavior [--logten-file PATH] [--format text|json] [--workers N] [--debug]

Or:
    python -m badbehavior

Defaults come from the environment (see badbehavior.config). The report
goes to stdout; logs and status messages go to stderr.
"""

import argparse
import logging
import sys
from typing import List, Optional

from badbehavior import __version__
from badbehavior.config import OUTPUT_FORMATS, config
from badbehavior.exceptions import BadBehaviorError
from badbehavior.ingestion import LogbookReader
from badbehavior.output import get_generator
from badbehavior.validation import validate

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='badbehavior',
        description="Scan a LogTen Pro logbook for flights that violate FAR currency requirements"
    )
    parser.add_argument(
        '--logten-file',
        type=str,
        default=config.logbook.path,
        help="LogTen Pro Core Data store (default: the LogTen Pro for macOS location)"
    )
    parser.add_argument(
        '--format',
        choices=OUTPUT_FORMATS,
        default=config.output.format,
        help="Report format"
    )
    parser.add_argument(
        '--workers',
        type=int,
        default=config.validation.max_workers,
        help="Maximum threads used to check flights"
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        default=config.debug,
        help="Verbose logging, including SQL"
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the checker. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.workers < 1:
        parser.error(f"--workers must be positive, got {args.workers}")
    configure_logging(args.debug)

    generator = get_generator(args.format)
    generator.processing_message(sys.stderr)

    try:
        flights = LogbookReader(args.logten_file, echo=args.debug).read()
    except BadBehaviorError as e:
        logger.error(e.message)
        return 1

    violations = validate(flights, max_workers=args.workers)
    violations.sort(key=lambda entry: entry.flight.date)

    generator.generate(violations, sys.stdout)
    return 0


if __name__ == '__main__':
    sys.exit(main())
