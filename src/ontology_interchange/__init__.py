"""
Ontology Interchange Engine.

Converts between the in-memory Ontology model and JSON-LD, Turtle and
RDF/XML (OWL/XML), and checks models against structural rules.

Usage:
    from ontology_interchange import parse, serialize, validate

    ontology = parse(text, "owlxml")
    errors = validate(ontology)
    turtle = serialize(ontology, "turtle")
"""

from typing import List, Union

from .core.comparison import compare_ontologies, round_trip_test
from .core.errors import OntologyParseError, UnsupportedFormatError
from .core.iri import resolve_iri
from .core.validators.structural import validate_ontology
from .formats import Format, get_parser, get_serializer
from .formats.jsonld import parse_jsonld, serialize_jsonld
from .formats.rdfxml import parse_owlxml, parse_rdfxml, serialize_owlxml, serialize_rdfxml
from .formats.turtle import parse_turtle, serialize_turtle
from .shared.models import (
    Annotation,
    Individual,
    Ontology,
    OntologyClass,
    OntologyProperty,
    PropertyAssertion,
    PropertyType,
)

__version__ = "1.0.0"


def parse(content: str, fmt: Union[str, Format], force_memory: bool = False) -> Ontology:
    """
    Parse document text in the given format.

    Raises:
        UnsupportedFormatError: If ``fmt`` is not a known format.
        OntologyParseError: If the document is blank or malformed.
        MemoryError: If the document is too large to parse safely.
    """
    return get_parser(fmt)(content, force_memory=force_memory)


def serialize(ontology: Ontology, fmt: Union[str, Format]) -> str:
    """Serialize an Ontology in the given format."""
    return get_serializer(fmt)(ontology)


def validate(ontology: Ontology) -> List[str]:
    """Structural validation; returns error messages, empty when valid."""
    return validate_ontology(ontology)


__all__ = [
    "Annotation",
    "Format",
    "Individual",
    "Ontology",
    "OntologyClass",
    "OntologyParseError",
    "OntologyProperty",
    "PropertyAssertion",
    "PropertyType",
    "UnsupportedFormatError",
    "compare_ontologies",
    "parse",
    "parse_jsonld",
    "parse_owlxml",
    "parse_rdfxml",
    "parse_turtle",
    "resolve_iri",
    "round_trip_test",
    "serialize",
    "serialize_jsonld",
    "serialize_owlxml",
    "serialize_rdfxml",
    "serialize_turtle",
    "validate",
]
