"""
Interchange format codecs.

Key Components:
- jsonld: JSON-LD parse/serialize
- turtle: restricted Turtle parse/serialize
- rdfxml: RDF/XML (OWL/XML) parse/serialize
- registry: Format enum and codec lookup

Usage:
    from ontology_interchange.formats import Format, get_parser

    ontology = get_parser(Format.TURTLE)(text)
"""

from .registry import (
    DEFAULT_EXTENSIONS,
    Format,
    get_parser,
    get_serializer,
    list_supported_formats,
    register_parser,
    register_serializer,
)

__all__ = [
    "DEFAULT_EXTENSIONS",
    "Format",
    "get_parser",
    "get_serializer",
    "list_supported_formats",
    "register_parser",
    "register_serializer",
]
