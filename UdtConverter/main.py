# main.py
# Copyright (c) 2025 Alex Prochot
#
# Command line entry point converting a TIA Portal .udt file to an L5X file.
"""Command line entry point for the UDT converter."""


import argparse
import sys
import pathlib
import logging
from typing import List, Optional

# Support running both as a package (`python -m UdtConverter.main`)
# and directly as a script (`python UdtConverter/main.py`).
if __package__:
    from .errors import ParseError, EmissionError
    from .udt_parser import get_udts
    from .l5x_writer import L5XSettings, create_l5x
else:  # pragma: no cover - convenience for direct invocation
    sys.path.append(str(pathlib.Path(__file__).resolve().parent.parent))
    from UdtConverter.errors import ParseError, EmissionError  # type: ignore
    from UdtConverter.udt_parser import get_udts  # type: ignore
    from UdtConverter.l5x_writer import L5XSettings, create_l5x  # type: ignore

logger = logging.getLogger(__name__)

DESCRIPTION = (
    "Convert UDT files exported from TIA Portal to an L5X XML file "
    "for import into Studio 5000."
)


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="udt-converter", description=DESCRIPTION)
    ap.add_argument("-i", "--input", required=True, help="UDT file to use as input")
    ap.add_argument("-o", "--output", default=None,
                    help="Location and name to save the L5X (default: input path with .L5X suffix)")
    ap.add_argument("--controller-name", default=L5XSettings.controller_name,
                    help="Name of the context Controller element")
    ap.add_argument("--software-revision", default=L5XSettings.software_revision,
                    help="SoftwareRevision written to the L5X root element")
    ap.add_argument("--log-file", default=None, help="Write log output to this file instead of stderr")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return ap


def convert(input_path: pathlib.Path, output_path: pathlib.Path, settings: L5XSettings) -> None:
    """Read input_path, convert every UDT in it, and write the L5X to output_path."""
    content = input_path.read_text(encoding="utf-8")
    udts = get_udts(content)
    parent_udt = udts.pop()
    data = create_l5x(udts, parent_udt, settings)
    output_path.write_bytes(data)
    logger.info(
        "Converted %s -> %s (target %s, %d dependencies)",
        input_path, output_path, parent_udt.name, len(udts),
    )


def _fail(args: argparse.Namespace, message: str) -> int:
    """Report a failed conversion once on stderr, and in the log file when one is set."""
    if args.log_file:
        logger.error("%s", message)
    print(f"error: {message}", file=sys.stderr)
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function to parse arguments and run one conversion.
    Returns the process exit code.
    """
    args = build_arg_parser().parse_args(argv)
    if not logging.getLogger().handlers:
        logging.basicConfig(
            filename=args.log_file,
            level=logging.DEBUG if args.verbose else logging.INFO,
            format="%(asctime)s - %(message)s",
        )

    input_path = pathlib.Path(args.input)
    output_path = pathlib.Path(args.output) if args.output else input_path.with_suffix(".L5X")
    settings = L5XSettings(
        controller_name=args.controller_name,
        software_revision=args.software_revision,
    )
    try:
        convert(input_path, output_path, settings)
    except (ParseError, EmissionError) as e:
        return _fail(args, f"Conversion of {input_path} failed: {e}")
    except (OSError, UnicodeDecodeError) as e:
        return _fail(args, f"File error: {e}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
