"""
Validate command: parse a document and run the structural checks on it.
"""

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from ....constants import ExitCode, FileExtensions
from ....core.validators import validate_ontology
from ....formats import Format
from ....shared.models import Ontology
from ..helpers import print_footer, print_header, write_text
from .base import BaseCommand, print_entity_summary


logger = logging.getLogger(__name__)


def build_report(path: Path, fmt: Format, ontology: Ontology, errors: List[str]) -> Dict[str, Any]:
    """JSON-serializable validation report."""
    return {
        "file": str(path),
        "format": fmt.value,
        "ontology": ontology.id,
        "summary": {
            "classes": len(ontology.classes),
            "properties": len(ontology.properties),
            "individuals": len(ontology.individuals),
        },
        "is_valid": not errors,
        "error_count": len(errors),
        "errors": errors,
    }


class ValidateCommand(BaseCommand):
    """
    Validate an ontology document.

    Usage:
        validate <path> --format jsonld [--output report.json]

    Exits with VALIDATION_ERROR when the document does not parse or
    breaks a structural rule.
    """

    def execute(self, args: argparse.Namespace) -> int:
        failure = self.prepare()
        if failure is not None:
            return failure

        try:
            fmt = Format.from_value(args.format)
            validated_path, ontology = self.load_document(args.path, fmt, args)
        except self.HANDLED_ERRORS as exc:
            return self.report_error(exc, "Validation")

        errors = validate_ontology(ontology)
        logger.info(f"Validated {validated_path}: {len(errors)} error(s)")

        print_header(f"Validation: {validated_path.name}")
        print_entity_summary(ontology)
        for message in errors:
            print(f"  ✗ {message}")
        print_footer()

        if args.output:
            report = build_report(validated_path, fmt, ontology, errors)
            try:
                written = write_text(
                    args.output,
                    json.dumps(report, indent=2, ensure_ascii=False),
                    allowed_extensions=list(FileExtensions.REPORT_EXTENSIONS),
                    allow_relative_up=getattr(args, 'allow_relative_up', False),
                )
            except self.HANDLED_ERRORS as exc:
                return self.report_error(exc, "Writing report")
            print(f"Report saved to: {written}")

        if errors:
            print(f"✗ Validation failed with {len(errors)} error(s).")
            return ExitCode.VALIDATION_ERROR

        print("✓ Validation successful!")
        return ExitCode.SUCCESS
