"""
Core engine services: IRI handling, errors, guards and validation.
"""

from .comparison import OntologyGraphBuilder, compare_ontologies, round_trip_test
from .errors import OntologyParseError, UnsupportedFormatError
from .iri import base_iri_for, local_name, resolve_iri, split_iri
from .memory import MemoryManager
from .validators import InputValidator, StructuralValidator, validate_ontology

__all__ = [
    "OntologyGraphBuilder",
    "compare_ontologies",
    "round_trip_test",
    "OntologyParseError",
    "UnsupportedFormatError",
    "base_iri_for",
    "local_name",
    "resolve_iri",
    "split_iri",
    "MemoryManager",
    "InputValidator",
    "StructuralValidator",
    "validate_ontology",
]
