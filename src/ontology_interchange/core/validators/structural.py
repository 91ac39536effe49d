"""
Structural validation of an Ontology.

Checks a model against minimal RDF/OWL well-formedness rules: every
identifier must be an HTTP(S) IRI, and relationship targets must be
HTTP(S) IRIs or one of the accepted vocabulary shorthands.

Validation is advisory. It never raises and never short-circuits; every
violation found is reported, in model order.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from ...shared.models import Ontology

logger = logging.getLogger(__name__)

IRI_PREFIX = "http"
SUPERCLASS_SHORTHANDS: Tuple[str, ...] = ("owl:", "rdfs:")
DOMAIN_RANGE_SHORTHANDS: Tuple[str, ...] = ("owl:", "rdfs:", "xsd:")
TYPE_SHORTHANDS: Tuple[str, ...] = ("owl:", "rdfs:")


@dataclass
class StructuralIssue:
    """A single structural violation."""
    message: str
    entity_id: Optional[str] = None

    def __str__(self) -> str:
        return self.message


def _is_iri(value: str) -> bool:
    return bool(value) and value.startswith(IRI_PREFIX)


def _is_reference(value: str, shorthands: Iterable[str]) -> bool:
    return _is_iri(value) or value.startswith(tuple(shorthands))


class StructuralValidator:
    """
    Validates an Ontology's identifiers and references.

    Checks:
    - Ontology IRI is HTTP(S)
    - Class, property and individual IRIs are HTTP(S)
    - Superclasses are IRIs or owl:/rdfs: shorthands
    - Property domains and ranges are IRIs or owl:/rdfs:/xsd: shorthands
    - Individual types are IRIs or owl:/rdfs: shorthands
    - Imports are IRIs

    Usage:
        issues = StructuralValidator().validate(ontology)
        for issue in issues:
            print(issue.message)
    """

    def __init__(self):
        self.issues: List[StructuralIssue] = []

    def _add_issue(self, message: str, entity_id: Optional[str] = None) -> None:
        self.issues.append(StructuralIssue(message=message, entity_id=entity_id))

    def validate(self, ontology: Ontology) -> List[StructuralIssue]:
        """Run every check and return the accumulated issues."""
        self.issues = []

        if not _is_iri(ontology.id or ""):
            self._add_issue(
                f"Ontology IRI must be a valid HTTP(S) URI: {ontology.id}", ontology.id
            )

        self._check_classes(ontology)
        self._check_properties(ontology)
        self._check_individuals(ontology)

        for imported in ontology.imports:
            if not _is_iri(imported):
                self._add_issue(f"Invalid import IRI: {imported}")

        logger.debug(f"Structural validation found {len(self.issues)} issue(s)")
        return self.issues

    def _check_classes(self, ontology: Ontology) -> None:
        for iri, cls in ontology.classes.items():
            if not _is_iri(iri):
                self._add_issue(f"Class {cls.name} has invalid IRI: {iri}", iri)
            for parent in cls.super_classes:
                if not _is_reference(parent, SUPERCLASS_SHORTHANDS):
                    self._add_issue(
                        f"Class {cls.name} references invalid superclass: {parent}", iri
                    )

    def _check_properties(self, ontology: Ontology) -> None:
        for iri, prop in ontology.properties.items():
            if not _is_iri(iri):
                self._add_issue(f"Property {prop.name} has invalid IRI: {iri}", iri)
            for domain in prop.domain:
                if not _is_reference(domain, DOMAIN_RANGE_SHORTHANDS):
                    self._add_issue(f"Property {prop.name} has invalid domain: {domain}", iri)
            for range_ in prop.range:
                if not _is_reference(range_, DOMAIN_RANGE_SHORTHANDS):
                    self._add_issue(f"Property {prop.name} has invalid range: {range_}", iri)

    def _check_individuals(self, ontology: Ontology) -> None:
        for iri, individual in ontology.individuals.items():
            if not _is_iri(iri):
                self._add_issue(f"Individual {individual.name} has invalid IRI: {iri}", iri)
            for type_iri in individual.types:
                if not _is_reference(type_iri, TYPE_SHORTHANDS):
                    self._add_issue(
                        f"Individual {individual.name} references invalid type: {type_iri}", iri
                    )


def validate_ontology(ontology: Ontology) -> List[str]:
    """
    Validate an ontology and return human-readable error messages.

    Returns:
        List of messages; empty when the ontology is structurally valid.
    """
    return [issue.message for issue in StructuralValidator().validate(ontology)]
