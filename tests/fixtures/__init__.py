"""
Centralized test fixtures for the ontology interchange test suite.

Usage:
    from fixtures import OWL_XML_DOCUMENT, TURTLE_DOCUMENT, SAMPLE_CONFIG

Or use the pytest fixtures in conftest.py which import from here.
"""

from .config_fixtures import JSON_LOGGING_CONFIG, SAMPLE_CONFIG
from .document_fixtures import (
    FLAT_JSONLD_DOCUMENT,
    JSONLD_DOCUMENT,
    LENIENT_XML_DOCUMENT,
    MALFORMED_XML_DOCUMENT,
    OWL_XML_DOCUMENT,
    TURTLE_DOCUMENT,
    ZOO,
    ZOO_NS,
)

__all__ = [
    'FLAT_JSONLD_DOCUMENT',
    'JSONLD_DOCUMENT',
    'JSON_LOGGING_CONFIG',
    'LENIENT_XML_DOCUMENT',
    'MALFORMED_XML_DOCUMENT',
    'OWL_XML_DOCUMENT',
    'SAMPLE_CONFIG',
    'TURTLE_DOCUMENT',
    'ZOO',
    'ZOO_NS',
]
