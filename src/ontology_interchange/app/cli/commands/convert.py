"""
Convert command: parse a document in one format and serialize it in another.
"""

import argparse
import logging
import sys

from ....constants import ExitCode, FileExtensions
from ....formats import Format, get_serializer
from ..helpers import write_text
from .base import BaseCommand, print_entity_summary


logger = logging.getLogger(__name__)


class ConvertCommand(BaseCommand):
    """
    Convert an ontology document between formats.

    Usage:
        convert <path> --from owlxml --to turtle [--output out.ttl]

    Without --output the converted document is written to stdout.
    """

    def execute(self, args: argparse.Namespace) -> int:
        to_stdout = not args.output
        failure = self.prepare(include_console=not to_stdout)
        if failure is not None:
            return failure

        try:
            source = Format.from_value(args.source_format)
            target = Format.from_value(args.target_format)
            validated_path, ontology = self.load_document(args.path, source, args)
            document = get_serializer(target)(ontology)
        except self.HANDLED_ERRORS as exc:
            return self.report_error(exc, "Conversion")

        if to_stdout:
            sys.stdout.write(document)
            return ExitCode.SUCCESS

        try:
            written = write_text(
                args.output,
                document,
                allowed_extensions=list(FileExtensions.INPUT_EXTENSIONS),
                allow_relative_up=getattr(args, 'allow_relative_up', False),
            )
        except self.HANDLED_ERRORS as exc:
            return self.report_error(exc, "Writing output")

        print(f"✓ Converted {validated_path.name} ({source} -> {target})")
        print_entity_summary(ontology)
        print(f"  Output:      {written}")
        return ExitCode.SUCCESS
