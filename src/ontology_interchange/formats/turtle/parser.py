"""
Restricted, line-oriented Turtle reader.

This is not a grammar-complete Turtle parser. It reads one line at a time
and recovers which IRIs are classes or properties, plus their labels and
comments. Superclasses, domains, ranges and individual types are not
extracted. Blank nodes, collections and multi-line literals are not
supported.

Statement tracking is an explicit state machine:

    NO_SUBJECT --<iri> line, new IRI--> SUBJECT_PENDING_KIND
    NO_SUBJECT --<iri> line, known class--> SUBJECT_IS_CLASS
    NO_SUBJECT --<iri> line, known property--> SUBJECT_IS_PROPERTY
    SUBJECT_PENDING_KIND --owl:Class--> SUBJECT_IS_CLASS
    SUBJECT_PENDING_KIND --owl:*Property--> SUBJECT_IS_PROPERTY
    any state --line ending in "."--> NO_SUBJECT

Only a line that begins with ``<iri>`` changes the current subject; IRIs in
object position never do. A later statement about an IRI that was already
declared keeps attaching labels and comments to that entity. Blank documents
read as an empty ontology.
"""

import logging
import re
from enum import Enum
from typing import Optional

from ...constants import OntologyDefaults
from ...core.iri import local_name
from ...shared.models import Ontology, OntologyClass, OntologyProperty, PropertyType
from ..base import OntologyParser

logger = logging.getLogger(__name__)

SUBJECT_PATTERN = re.compile(r"^<([^>]+)>")
QUOTED_PATTERN = re.compile(r'"([^"]+)"')

PROPERTY_DECLARATIONS = (
    ("owl:ObjectProperty", PropertyType.OBJECT),
    ("owl:DatatypeProperty", PropertyType.DATA),
    ("owl:AnnotationProperty", PropertyType.ANNOTATION),
)


class ReaderState(Enum):
    NO_SUBJECT = "no-subject"
    SUBJECT_PENDING_KIND = "subject-pending-kind"
    SUBJECT_IS_CLASS = "subject-is-class"
    SUBJECT_IS_PROPERTY = "subject-is-property"


class TurtleStatementReader:
    """
    Feeds lines into an Ontology while tracking the current subject.

    Example:
        >>> reader = TurtleStatementReader(ontology)
        >>> reader.feed('<http://ex.org#Cat> a owl:Class ;')
        >>> reader.state
        <ReaderState.SUBJECT_IS_CLASS: 'subject-is-class'>
    """

    def __init__(self, ontology: Ontology):
        self.ontology = ontology
        self.state = ReaderState.NO_SUBJECT
        self.subject: Optional[str] = None

    def feed(self, line: str) -> None:
        line = line.strip()
        if not line or line.startswith("@prefix") or line.startswith("#"):
            return

        match = SUBJECT_PATTERN.match(line)
        if match:
            self.subject = match.group(1)
            self.state = self._known_kind(self.subject)

        if match or self.state is ReaderState.SUBJECT_PENDING_KIND:
            self._read_kind(line)
        if self.subject is not None:
            self._read_annotations(line)

        if line.endswith("."):
            self.state = ReaderState.NO_SUBJECT
            self.subject = None

    def _known_kind(self, iri: str) -> ReaderState:
        if iri in self.ontology.classes:
            return ReaderState.SUBJECT_IS_CLASS
        if iri in self.ontology.properties:
            return ReaderState.SUBJECT_IS_PROPERTY
        return ReaderState.SUBJECT_PENDING_KIND

    def _read_kind(self, line: str) -> None:
        if "owl:Class" in line:
            self.ontology.add_class(OntologyClass(id=self.subject, name=local_name(self.subject)))
            self.state = ReaderState.SUBJECT_IS_CLASS
            return

        for marker, prop_type in PROPERTY_DECLARATIONS:
            if marker in line:
                self.ontology.add_property(OntologyProperty(
                    id=self.subject, name=local_name(self.subject), type=prop_type,
                ))
                self.state = ReaderState.SUBJECT_IS_PROPERTY
                return

    def _current_entity(self):
        if self.state is ReaderState.SUBJECT_IS_CLASS:
            return self.ontology.classes.get(self.subject)
        if self.state is ReaderState.SUBJECT_IS_PROPERTY:
            return self.ontology.properties.get(self.subject)
        return None

    def _read_annotations(self, line: str) -> None:
        for predicate, attribute in (("rdfs:label", "label"), ("rdfs:comment", "description")):
            if predicate not in line:
                continue
            quoted = QUOTED_PATTERN.search(line, line.index(predicate))
            entity = self._current_entity()
            if quoted and entity is not None:
                setattr(entity, attribute, quoted.group(1))
            elif quoted:
                logger.debug(f"Ignoring {predicate} on unclassified subject {self.subject}")


class TurtleParser(OntologyParser):
    """Parse the supported Turtle subset into an Ontology."""

    format_name = "turtle"
    accepts_blank = True

    def _parse_document(self, content: str) -> Ontology:
        ontology = Ontology(
            id=OntologyDefaults.IMPORTED_ONTOLOGY_IRI,
            name=OntologyDefaults.IMPORTED_ONTOLOGY_NAME,
        )
        reader = TurtleStatementReader(ontology)
        for line in content.splitlines():
            reader.feed(line)
        return ontology


def parse_turtle(content: str, force_memory: bool = False) -> Ontology:
    """Parse Turtle text into an Ontology (entities and labels only)."""
    return TurtleParser(force_memory=force_memory).parse(content)
