"""
CLI argument parser configuration.

This module defines the argument parser structure for all CLI commands.

Command Structure:
    - convert   <path> --from FMT --to FMT [--output PATH]
    - validate  <path> --format FMT [--output REPORT.json]
    - compare   <path1> <path2> --format1 FMT --format2 FMT [--verbose]
    - roundtrip <path> --from FMT --via FMT [--save-export PATH]
"""

import argparse

from ...formats import list_supported_formats


def _format_help(role: str) -> str:
    return f"{role} format ({', '.join(list_supported_formats())})"


# ============================================================================
# Shared Flag Group Builders
# ============================================================================

def add_input_flags(parser: argparse.ArgumentParser) -> None:
    """Add common input-related flags."""
    parser.add_argument(
        '--allow-relative-up',
        action='store_true',
        help="Permit '..' in paths (the resolved path is still checked)"
    )


def add_performance_flags(parser: argparse.ArgumentParser) -> None:
    """Add common performance flags."""
    parser.add_argument(
        '--force-memory',
        action='store_true',
        help='Skip memory safety checks for very large files (use with caution)'
    )


def add_config_flags(parser: argparse.ArgumentParser) -> None:
    """Add the configuration file flag."""
    parser.add_argument(
        '--config', '-c',
        help='Path to configuration file (default: ./config.json if present)'
    )


def add_common_flags(parser: argparse.ArgumentParser) -> None:
    add_config_flags(parser)
    add_performance_flags(parser)
    add_input_flags(parser)


# ============================================================================
# Main Parser Factory
# ============================================================================

def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the main argument parser.

    Returns:
        Configured ArgumentParser with all subcommands.
    """
    parser = argparse.ArgumentParser(
        prog='ontology-interchange',
        description="Convert and validate ontologies across JSON-LD, Turtle and RDF/XML",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Convert between formats
    %(prog)s convert pizza.owl --from owlxml --to turtle --output pizza.ttl
    %(prog)s convert pizza.ttl --from turtle --to jsonld

    # Structural validation with a JSON report
    %(prog)s validate pizza.jsonld --format jsonld --output report.json

    # Compare two documents by content
    %(prog)s compare pizza.owl pizza.ttl --format1 owlxml --format2 turtle --verbose

    # Round-trip a document through another format
    %(prog)s roundtrip pizza.owl --from owlxml --via jsonld
        """,
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    _add_convert_parser(subparsers)
    _add_validate_parser(subparsers)
    _add_compare_parser(subparsers)
    _add_roundtrip_parser(subparsers)

    return parser


# ============================================================================
# Command Parsers
# ============================================================================

def _add_convert_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add the convert command parser."""
    parser = subparsers.add_parser(
        'convert',
        help='Convert an ontology document to another format'
    )
    parser.add_argument('path', help='Path to the source document')
    parser.add_argument('--from', dest='source_format', required=True, help=_format_help('Source'))
    parser.add_argument('--to', dest='target_format', required=True, help=_format_help('Target'))
    parser.add_argument(
        '--output', '-o',
        help='Output file path (default: write to stdout)'
    )
    add_common_flags(parser)


def _add_validate_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add the validate command parser."""
    parser = subparsers.add_parser(
        'validate',
        help='Parse a document and check it against structural rules'
    )
    parser.add_argument('path', help='Path to the document to validate')
    parser.add_argument('--format', '-f', dest='format', required=True, help=_format_help('Document'))
    parser.add_argument(
        '--output', '-o',
        help='Write a JSON validation report to this path'
    )
    add_common_flags(parser)


def _add_compare_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add the compare command parser."""
    parser = subparsers.add_parser(
        'compare',
        help='Compare two documents for semantic equivalence'
    )
    parser.add_argument('path1', help='First document')
    parser.add_argument('path2', help='Second document')
    parser.add_argument('--format1', required=True, help=_format_help('First document'))
    parser.add_argument('--format2', required=True, help=_format_help('Second document'))
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Show detailed comparison results'
    )
    add_common_flags(parser)


def _add_roundtrip_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add the roundtrip command parser."""
    parser = subparsers.add_parser(
        'roundtrip',
        help='Serialize a document through another format and compare the result'
    )
    parser.add_argument('path', help='Path to the source document')
    parser.add_argument('--from', dest='source_format', required=True, help=_format_help('Source'))
    parser.add_argument('--via', dest='via_format', required=True, help=_format_help('Intermediate'))
    parser.add_argument(
        '--save-export',
        help='Also write the intermediate document to this path'
    )
    add_common_flags(parser)
