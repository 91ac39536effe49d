"""
Format enumeration and codec dispatch.

Provides a single point for branching between the JSON-LD, Turtle and
RDF/XML codecs. ``owlxml`` and ``rdfxml`` are distinct tags that dispatch to
the same RDF/XML codec.
"""

import logging
from enum import Enum
from typing import Callable, Dict, List, Union

from ..core.errors import UnsupportedFormatError
from ..shared.models import Ontology

logger = logging.getLogger(__name__)

ParseFunction = Callable[..., Ontology]
SerializeFunction = Callable[[Ontology], str]


class Format(str, Enum):
    """Supported interchange formats."""
    JSONLD = "jsonld"
    TURTLE = "turtle"
    OWLXML = "owlxml"
    RDFXML = "rdfxml"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_value(cls, value: Union[str, "Format"]) -> "Format":
        """
        Resolve a format tag, case-insensitively, including common aliases.

        Raises:
            UnsupportedFormatError: If the tag names no known format.
        """
        if isinstance(value, Format):
            return value
        if not isinstance(value, str):
            raise UnsupportedFormatError(str(value))
        key = value.strip().lower()
        key = FORMAT_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise UnsupportedFormatError(value)


FORMAT_ALIASES: Dict[str, str] = {
    "json-ld": "jsonld",
    "ttl": "turtle",
    "owl": "owlxml",
    "xml": "rdfxml",
    "rdf": "rdfxml",
}

DEFAULT_EXTENSIONS: Dict[Format, str] = {
    Format.JSONLD: ".jsonld",
    Format.TURTLE: ".ttl",
    Format.OWLXML: ".owl",
    Format.RDFXML: ".rdf",
}


# ---------------------------------------------------------------------------
# Codec registry
# ---------------------------------------------------------------------------

_PARSERS: Dict[Format, ParseFunction] = {}
_SERIALIZERS: Dict[Format, SerializeFunction] = {}


def register_parser(fmt: Format, parser: ParseFunction) -> None:
    """Register a parse function for a format."""
    _PARSERS[Format.from_value(fmt)] = parser


def register_serializer(fmt: Format, serializer: SerializeFunction) -> None:
    """Register a serialize function for a format."""
    _SERIALIZERS[Format.from_value(fmt)] = serializer


def get_parser(fmt: Union[str, Format]) -> ParseFunction:
    """
    Return the parse function for the given format.

    Raises:
        UnsupportedFormatError: If no parser is registered for the format.
    """
    resolved = Format.from_value(fmt)
    parser = _PARSERS.get(resolved)
    if parser is None:
        raise UnsupportedFormatError(str(fmt))
    return parser


def get_serializer(fmt: Union[str, Format]) -> SerializeFunction:
    """
    Return the serialize function for the given format.

    Raises:
        UnsupportedFormatError: If no serializer is registered for the format.
    """
    resolved = Format.from_value(fmt)
    serializer = _SERIALIZERS.get(resolved)
    if serializer is None:
        raise UnsupportedFormatError(str(fmt))
    return serializer


def list_supported_formats() -> List[str]:
    """Format tags with both a parser and a serializer registered."""
    return [fmt.value for fmt in Format if fmt in _PARSERS and fmt in _SERIALIZERS]


# ---------------------------------------------------------------------------
# Default registrations
# ---------------------------------------------------------------------------

def _register_defaults() -> None:
    """Register the built-in codecs."""
    from .jsonld import parse_jsonld, serialize_jsonld
    from .rdfxml import parse_owlxml, parse_rdfxml, serialize_owlxml, serialize_rdfxml
    from .turtle import parse_turtle, serialize_turtle

    register_parser(Format.JSONLD, parse_jsonld)
    register_serializer(Format.JSONLD, serialize_jsonld)

    register_parser(Format.TURTLE, parse_turtle)
    register_serializer(Format.TURTLE, serialize_turtle)

    register_parser(Format.OWLXML, parse_owlxml)
    register_serializer(Format.OWLXML, serialize_owlxml)
    register_parser(Format.RDFXML, parse_rdfxml)
    register_serializer(Format.RDFXML, serialize_rdfxml)


_register_defaults()
