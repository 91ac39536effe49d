"""
JSON-LD codec.

Usage:
    from ontology_interchange.formats.jsonld import parse_jsonld, serialize_jsonld
"""

from .parser import JSONLDParser, extract_ids, extract_literal, parse_jsonld
from .serializer import JSONLDSerializer, serialize_jsonld

__all__ = [
    "JSONLDParser",
    "JSONLDSerializer",
    "extract_ids",
    "extract_literal",
    "parse_jsonld",
    "serialize_jsonld",
]
