"""
Centralized configuration constants for the Ontology Interchange Engine.

This module provides a single source of truth for namespace prefixes,
fallback identifiers, limits and logging defaults used throughout the
codecs, the validator and the command line.
"""

from enum import IntEnum
from typing import Dict, Final

from rdflib.namespace import OWL, RDF, RDFS, XSD

# ============================================================================
# Exit Codes
# ============================================================================

class ExitCode(IntEnum):
    """Standard exit codes for CLI commands.

    Following Unix conventions:
    - 0: Success
    - 1: General error
    - 2: Validation/syntax error
    - 3+: Specific error categories
    """
    SUCCESS = 0
    ERROR = 1
    VALIDATION_ERROR = 2
    CONFIG_ERROR = 3
    FILE_NOT_FOUND = 5
    PERMISSION_DENIED = 6


# ============================================================================
# Namespaces
# ============================================================================

OWL_NS: Final[str] = str(OWL)
RDF_NS: Final[str] = str(RDF)
RDFS_NS: Final[str] = str(RDFS)
XSD_NS: Final[str] = str(XSD)
XML_NS: Final[str] = "http://www.w3.org/XML/1998/namespace"

STANDARD_PREFIXES: Final[Dict[str, str]] = {
    "owl": OWL_NS,
    "rdf": RDF_NS,
    "rdfs": RDFS_NS,
    "xsd": XSD_NS,
}
"""The fixed prefix table shared by every codec, in declaration order."""

KNOWN_VOCABULARIES: Final[frozenset] = frozenset(STANDARD_PREFIXES.values())


# ============================================================================
# Property Characteristics
# ============================================================================

CHARACTERISTIC_TO_OWL: Final[Dict[str, str]] = {
    "functional": "FunctionalProperty",
    "inverseFunctional": "InverseFunctionalProperty",
    "transitive": "TransitiveProperty",
    "symmetric": "SymmetricProperty",
    "asymmetric": "AsymmetricProperty",
    "reflexive": "ReflexiveProperty",
    "irreflexive": "IrreflexiveProperty",
}
"""Free-form characteristic tags with a standard OWL property class."""

OWL_TO_CHARACTERISTIC: Final[Dict[str, str]] = {
    owl_name: tag for tag, owl_name in CHARACTERISTIC_TO_OWL.items()
}


# ============================================================================
# Ontology Defaults
# ============================================================================

class OntologyDefaults:
    """Fallback identifiers used when a document omits them."""

    IMPORTED_ONTOLOGY_IRI: Final[str] = "http://example.org/imported-ontology"
    """Envelope IRI for formats that carry no ontology-level IRI."""

    FALLBACK_ONTOLOGY_IRI: Final[str] = "http://example.org/ontology"
    """Used by RDF/XML when neither owl:Ontology nor xml:base names one."""

    IMPORTED_ONTOLOGY_NAME: Final[str] = "Imported Ontology"
    """Display name for ontologies without a usable label."""

    JSON_INDENT: Final[int] = 2
    """Indentation for pretty-printed JSON-LD."""


# ============================================================================
# Memory Management
# ============================================================================

class MemoryLimits:
    """Memory management constants."""

    MAX_SAFE_CONTENT_MB: Final[int] = 200
    """Default maximum document size without explicit override (MB)."""

    MEMORY_MULTIPLIER: Final[float] = 4.0
    """A parsed document typically needs ~3-4x its text size in memory."""

    MIN_AVAILABLE_MEMORY_MB: Final[int] = 256
    """Minimum available memory required before parsing (MB)."""

    FLOOR_EXEMPT_CONTENT_MB: Final[float] = 1.0
    """Documents smaller than this skip the minimum-available-memory floor (MB)."""

    LOAD_FACTOR: Final[float] = 0.7
    """Fraction of available memory considered safe to use."""


# ============================================================================
# File Extensions
# ============================================================================

class FileExtensions:
    """Supported file extensions."""

    INPUT_EXTENSIONS: Final[tuple] = ('.jsonld', '.json', '.ttl', '.turtle', '.owl', '.rdf', '.xml')
    """Valid ontology document extensions."""

    REPORT_EXTENSIONS: Final[tuple] = ('.json',)
    """Valid report file extensions."""

    CONFIG_EXTENSIONS: Final[tuple] = ('.json',)
    """Valid configuration file extensions."""


# ============================================================================
# Logging
# ============================================================================

class LoggingConfig:
    """Logging configuration."""

    DEFAULT_LOG_LEVEL: Final[str] = "INFO"
    """Default logging level."""

    LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    """Default log format string."""

    DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
    """Default date format for logs."""

    DEFAULT_FORMAT_STYLE: Final[str] = "text"
    """Human-readable formatter style."""

    JSON_DATE_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S.%fZ"
    """ISO-8601 timestamp format for structured logs."""

    SUPPORTED_FORMATS: Final[tuple[str, ...]] = ("text", "json")
    """Supported formatter styles."""

    MAX_LOG_FILE_MB: Final[int] = 10
    """Maximum log file size before rotation (MB)."""

    LOG_BACKUP_COUNT: Final[int] = 5
    """Number of backup log files to keep."""

    ROTATION_ENABLED: Final[bool] = True
    """Enable log rotation by default when a file handler is configured."""
