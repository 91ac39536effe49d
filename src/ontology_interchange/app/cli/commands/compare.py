"""
Compare and round-trip commands.
"""

import argparse
import json
import logging
from typing import Any, Dict

from ....constants import ExitCode, FileExtensions
from ....core.comparison import compare_ontologies, round_trip_test
from ....formats import Format
from ..helpers import read_document, write_text
from .base import BaseCommand


logger = logging.getLogger(__name__)


def print_comparison(comparison: Dict[str, Any], first: str = "file 1", second: str = "file 2") -> None:
    """Print the per-kind counts and differences of a comparison result."""
    if comparison["is_equivalent"]:
        print("✓ Ontologies are semantically EQUIVALENT")
    else:
        print("✗ Ontologies are NOT equivalent")

    print()
    for kind in ("classes", "properties", "individuals"):
        result = comparison[kind]
        print(f"{kind.capitalize()}: {result['count1']} vs {result['count2']}")
        if result['only_in_first']:
            print(f"  Only in {first}: {result['only_in_first']}")
        if result['only_in_second']:
            print(f"  Only in {second}: {result['only_in_second']}")
    print(f"Triples: {comparison['triple_count_first']} vs {comparison['triple_count_second']}")


class CompareCommand(BaseCommand):
    """Compare two ontology documents for semantic equivalence."""

    def execute(self, args: argparse.Namespace) -> int:
        failure = self.prepare()
        if failure is not None:
            return failure

        try:
            path1, ontology1 = self.load_document(args.path1, Format.from_value(args.format1), args)
            path2, ontology2 = self.load_document(args.path2, Format.from_value(args.format2), args)
        except self.HANDLED_ERRORS as exc:
            return self.report_error(exc, "Comparison")

        print("Comparing:")
        print(f"  File 1: {path1}")
        print(f"  File 2: {path2}")
        print()

        comparison = compare_ontologies(ontology1, ontology2)
        print_comparison(comparison)

        if args.verbose:
            print()
            print("Detailed comparison results:")
            print(json.dumps(comparison, indent=2))

        return ExitCode.SUCCESS if comparison["is_equivalent"] else ExitCode.ERROR


class RoundTripCommand(BaseCommand):
    """Serialize a document through another format, parse it back and compare."""

    def execute(self, args: argparse.Namespace) -> int:
        failure = self.prepare()
        if failure is not None:
            return failure

        try:
            source = Format.from_value(args.source_format)
            via = Format.from_value(args.via_format)
            validated_path, content = read_document(
                args.path,
                allow_relative_up=getattr(args, 'allow_relative_up', False),
            )
        except self.HANDLED_ERRORS as exc:
            return self.report_error(exc, "Round-trip")

        print(f"Round-trip: {validated_path.name} ({source} via {via})")
        print()

        result = round_trip_test(content, source, via, force_memory=self.force_memory(args))
        if not result["success"]:
            print(f"✗ Round-trip failed: {result['error']}")
            return ExitCode.ERROR

        if args.save_export:
            try:
                written = write_text(
                    args.save_export,
                    result["exported"],
                    allowed_extensions=list(FileExtensions.INPUT_EXTENSIONS),
                    allow_relative_up=getattr(args, 'allow_relative_up', False),
                )
            except self.HANDLED_ERRORS as exc:
                return self.report_error(exc, "Writing export")
            print(f"Exported document saved to: {written}")

        print_comparison(result["comparison"], first="original", second="round-tripped")
        return ExitCode.SUCCESS if result["comparison"]["is_equivalent"] else ExitCode.ERROR
