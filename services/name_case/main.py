"""
Main CLI module for the name case service.

Converts personal names to name case, reading them from arguments,
a file or stdin and printing one converted name per line.
Example: python -m services.name_case.main "JOHN DOE" "louis xvi"
"""

import argparse
import io
import sys
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from pydantic import ValidationError

from . import __version__
from .helpers import MaxLengthFormatter, to_name_case
from .log_config import configure_logging, get_logger, log_processing_batch
from .settings import settings


logger = get_logger(__name__)


def read_names(source: Optional[str] = None, encoding: str = "utf-8") -> List[str]:
    """
    Read names from a file, one per line.

    Args:
        source: Path of the file to read; None or "-" reads stdin
        encoding: Encoding of the file or stdin

    Returns:
        List of names without their line terminators

    Raises:
        OSError: If the file cannot be opened or read
        UnicodeDecodeError: If the file is not valid for the encoding
    """
    if source is None or source == "-":
        stream = io.TextIOWrapper(sys.stdin.buffer, encoding=encoding)
        try:
            return [line.rstrip("\r\n") for line in stream]
        finally:
            # Keep sys.stdin.buffer open
            stream.detach()

    with open(source, encoding=encoding) as handle:
        return [line.rstrip("\r\n") for line in handle]


def convert_names(
    names: Iterable[str],
    formatter: Optional[MaxLengthFormatter] = None
) -> Tuple[List[str], int]:
    """
    Convert names to name case.

    Args:
        names: Names to convert
        formatter: Optional formatter applied after conversion

    Returns:
        Tuple of (converted_names, changed_count)
    """
    converted = []
    changed = 0

    for name in names:
        result = to_name_case(name)
        if formatter is not None:
            result = formatter.format(result)
        if result != name:
            changed += 1
        logger.debug("Name converted", original=name, converted=result)
        converted.append(result)

    return converted, changed


def run(names: List[str], max_length: Optional[int] = None) -> List[str]:
    """
    Convert a batch of names and log the batch summary.

    Args:
        names: Names to convert
        max_length: Truncate converted names to this length when set

    Returns:
        Converted names, in input order
    """
    formatter = MaxLengthFormatter.of(max_length) if max_length else None
    start_time = datetime.now()

    logger.info("Starting name conversion", total_names=len(names), max_length=max_length)

    converted, changed = convert_names(names, formatter)

    duration_ms = (datetime.now() - start_time).total_seconds() * 1000
    log_processing_batch(
        logger,
        batch_id=f"namecase_{int(start_time.timestamp())}",
        items_processed=len(converted),
        duration_ms=duration_ms,
        changed=changed
    )

    return converted


def positive_int(value: str) -> int:
    """Argparse type for integers greater than zero."""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid integer '{value}'") from e
    if number <= 0:
        raise argparse.ArgumentTypeError("must be greater than 0")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        description="Name Case Converter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m services.name_case "JOHN DOE" "van der sar"
  python -m services.name_case --input names.txt --max-length 40
  cat names.txt | python -m services.name_case --log-level DEBUG
  python -m services.name_case --version
        """
    )

    parser.add_argument(
        "names",
        nargs="*",
        help="Names to convert (read from --input or stdin when omitted)"
    )

    parser.add_argument(
        "--input",
        metavar="FILE",
        help="Read names from FILE, one per line ('-' for stdin)"
    )

    parser.add_argument(
        "--max-length",
        type=positive_int,
        help="Truncate converted names to this length"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override log level from configuration"
    )

    parser.add_argument(
        "--log-format",
        choices=["json", "text"],
        help="Override log format from configuration"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Name Case Converter {__version__}"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI application.

    Args:
        argv: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.names and args.input:
        parser.error("names and --input are mutually exclusive")

    try:
        config = settings()
    except ValidationError as e:
        parser.exit(2, f"Invalid configuration: {e}\n")
    configure_logging(args.log_level, args.log_format)

    logger.info(
        "Service starting",
        service_name=config.service_name,
        version=__version__,
        environment=config.environment
    )

    try:
        if args.names:
            names = args.names
        else:
            names = read_names(args.input, encoding=config.input_encoding)

        max_length = args.max_length or config.max_length
        for name in run(names, max_length=max_length):
            print(name)

        logger.info("Service completed successfully")
        return 0

    except (OSError, UnicodeDecodeError) as e:
        logger.error(
            "Failed to read names",
            source=args.input or "stdin",
            error=str(e),
            error_type=type(e).__name__
        )
        return 1
    except KeyboardInterrupt:
        logger.warning("Service interrupted by user")
        return 1
    except Exception as e:
        logger.error(
            "Service failed with unexpected error",
            error=str(e),
            error_type=type(e).__name__
        )
        return 1


if __name__ == "__main__":
    sys.exit(main())
