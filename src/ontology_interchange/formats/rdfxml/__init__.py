"""
RDF/XML (OWL/XML) codec.

Usage:
    from ontology_interchange.formats.rdfxml import parse_owlxml, serialize_owlxml
"""

from .parser import (
    DEFAULT_CLASSIFICATION_RULE,
    IndividualClassificationRule,
    RDFXMLParser,
    parse_owlxml,
    parse_rdfxml,
)
from .serializer import RDFXMLSerializer, escape_xml, serialize_owlxml, serialize_rdfxml

__all__ = [
    "DEFAULT_CLASSIFICATION_RULE",
    "IndividualClassificationRule",
    "RDFXMLParser",
    "RDFXMLSerializer",
    "escape_xml",
    "parse_owlxml",
    "parse_rdfxml",
    "serialize_owlxml",
    "serialize_rdfxml",
]
