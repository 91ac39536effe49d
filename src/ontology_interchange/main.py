#!/usr/bin/env python3
"""
Ontology interchange command-line entry point.

Usage:
    ontology-interchange convert <path> --from FMT --to FMT [--output PATH]
    ontology-interchange validate <path> --format FMT [--output REPORT.json]
    ontology-interchange compare <path1> <path2> --format1 FMT --format2 FMT [--verbose]
    ontology-interchange roundtrip <path> --from FMT --via FMT [--save-export PATH]
"""

import sys
from typing import Dict, List, Optional, Type

from .app.cli import (
    BaseCommand,
    CompareCommand,
    ConvertCommand,
    RoundTripCommand,
    ValidateCommand,
    create_argument_parser,
)
from .constants import ExitCode

COMMANDS: Dict[str, Type[BaseCommand]] = {
    'convert': ConvertCommand,
    'validate': ValidateCommand,
    'compare': CompareCommand,
    'roundtrip': RoundTripCommand,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    command_class = COMMANDS.get(args.command)
    if command_class is None:
        parser.print_help()
        return ExitCode.SUCCESS

    command = command_class(config_path=getattr(args, 'config', None))
    try:
        return int(command.execute(args))
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return ExitCode.ERROR


if __name__ == '__main__':
    sys.exit(main())
