"""
Base classes shared by the format codecs.

Every parser runs the same pre-flight checks (content type and emptiness,
memory headroom) before reading a document, so the checks live in one
template method and subclasses implement only ``_parse_document``.
"""

import logging
from abc import ABC, abstractmethod

from ..core.memory import MemoryManager
from ..core.validators.input import InputValidator
from ..shared.models import Ontology

logger = logging.getLogger(__name__)


class OntologyParser(ABC):
    """
    Abstract base class for document parsers.

    Parsers are stateless between calls; each ``parse`` builds a fresh
    Ontology and never returns a partially populated one.
    """

    format_name: str = ""
    # True when an empty document reads as an empty ontology
    accepts_blank: bool = False

    def __init__(self, force_memory: bool = False):
        self.force_memory = force_memory

    def parse(self, content: str) -> Ontology:
        """
        Parse document text into an Ontology.

        Raises:
            OntologyParseError: If the document is malformed, or blank for a
                format that does not accept blank text.
            TypeError: If content is not a string.
            MemoryError: If the document is too large to parse safely.
        """
        content = InputValidator.validate_content(
            content, self.format_name, allow_blank=self.accepts_blank
        )
        MemoryManager.ensure_parseable(content, force=self.force_memory)

        ontology = self._parse_document(content)
        logger.info(
            f"Parsed {self.format_name} document: {len(ontology.classes)} classes, "
            f"{len(ontology.properties)} properties, {len(ontology.individuals)} individuals"
        )
        return ontology

    @abstractmethod
    def _parse_document(self, content: str) -> Ontology:
        """Build the Ontology from validated text."""


class OntologySerializer(ABC):
    """Abstract base class for document serializers."""

    format_name: str = ""

    def serialize(self, ontology: Ontology) -> str:
        text = self._serialize_document(ontology)
        logger.info(
            f"Serialized {ontology.entity_count()} entities to {self.format_name} "
            f"({len(text)} characters)"
        )
        return text

    @abstractmethod
    def _serialize_document(self, ontology: Ontology) -> str:
        """Render the Ontology as document text."""
