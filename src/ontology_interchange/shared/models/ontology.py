"""
Ontology data model.

This module defines the canonical in-memory representation that every codec
produces and consumes. Entities are plain value objects; the Ontology owns
its three entity mappings, keyed by each entity's IRI.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


class PropertyType(str, Enum):
    """Kinds of ontology properties."""
    OBJECT = "ObjectProperty"
    DATA = "DataProperty"
    ANNOTATION = "AnnotationProperty"

    def __str__(self) -> str:
        return self.value

    @property
    def owl_term(self) -> str:
        """Local name of the matching OWL vocabulary class."""
        if self is PropertyType.DATA:
            return "DatatypeProperty"
        return self.value


@dataclass
class Annotation:
    """An annotation value attached to an entity or to the ontology."""
    property: str
    value: str
    language: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"property": self.property, "value": self.value}
        if self.language:
            result["language"] = self.language
        return result


@dataclass
class PropertyAssertion:
    """
    A property value asserted on an individual.

    Attributes:
        property: IRI of the asserted property.
        value: Literal text, or the IRI of the target individual.
        is_literal: False when ``value`` is an IRI reference.
    """
    property: str
    value: str
    is_literal: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "property": self.property,
            "value": self.value,
            "isLiteral": self.is_literal,
        }


@dataclass
class OntologyClass:
    """
    An OWL class.

    Attributes:
        id: Class IRI.
        name: Fallback display string.
        label: Optional rdfs:label.
        description: Optional rdfs:comment.
        super_classes: Superclass IRIs in declaration order.
        disjoint_with: IRIs of disjoint classes.
        equivalent_to: IRIs of equivalent classes.
        properties: IRIs of properties attached to the class.
        annotations: Additional annotations.

    Example:
        >>> cls = OntologyClass(
        ...     id="http://example.org/onto#Person",
        ...     name="Person",
        ...     super_classes=["http://example.org/onto#Agent"],
        ... )
    """
    id: str
    name: str
    label: Optional[str] = None
    description: Optional[str] = None
    super_classes: List[str] = field(default_factory=list)
    disjoint_with: List[str] = field(default_factory=list)
    equivalent_to: List[str] = field(default_factory=list)
    properties: List[str] = field(default_factory=list)
    annotations: List[Annotation] = field(default_factory=list)

    @property
    def display_label(self) -> str:
        """The label when present, otherwise the name."""
        return self.label or self.name

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "label": self.label,
            "description": self.description,
            "superClasses": list(self.super_classes),
            "disjointWith": list(self.disjoint_with),
            "equivalentTo": list(self.equivalent_to),
            "properties": list(self.properties),
            "annotations": [a.to_dict() for a in self.annotations],
        }


@dataclass
class OntologyProperty:
    """
    An object, data or annotation property.

    Attributes:
        id: Property IRI.
        name: Fallback display string.
        type: The property kind.
        label: Optional rdfs:label.
        description: Optional rdfs:comment.
        domain: Domain IRIs.
        range: Range IRIs.
        super_properties: Superproperty IRIs.
        characteristics: Free-form tags such as "functional" or "transitive".
        annotations: Additional annotations.
    """
    id: str
    name: str
    type: PropertyType = PropertyType.OBJECT
    label: Optional[str] = None
    description: Optional[str] = None
    domain: List[str] = field(default_factory=list)
    range: List[str] = field(default_factory=list)
    super_properties: List[str] = field(default_factory=list)
    characteristics: List[str] = field(default_factory=list)
    annotations: List[Annotation] = field(default_factory=list)

    @property
    def display_label(self) -> str:
        return self.label or self.name

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "label": self.label,
            "description": self.description,
            "domain": list(self.domain),
            "range": list(self.range),
            "superProperties": list(self.super_properties),
            "characteristics": list(self.characteristics),
            "annotations": [a.to_dict() for a in self.annotations],
        }


@dataclass
class Individual:
    """A named individual and the classes it instantiates."""
    id: str
    name: str
    label: Optional[str] = None
    types: List[str] = field(default_factory=list)
    property_assertions: List[PropertyAssertion] = field(default_factory=list)
    same_as: List[str] = field(default_factory=list)
    different_from: List[str] = field(default_factory=list)
    annotations: List[Annotation] = field(default_factory=list)

    @property
    def display_label(self) -> str:
        return self.label or self.name

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "label": self.label,
            "types": list(self.types),
            "propertyAssertions": [p.to_dict() for p in self.property_assertions],
            "sameAs": list(self.same_as),
            "differentFrom": list(self.different_from),
            "annotations": [a.to_dict() for a in self.annotations],
        }


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Ontology:
    """
    Root aggregate holding all classes, properties, individuals and metadata.

    The entity mappings preserve insertion order, which is the order codecs
    emit entities in. Every key equals the ``id`` of the entity it maps to;
    use the ``add_*`` helpers to keep that invariant.
    """
    id: str
    name: str
    version: Optional[str] = None
    imports: List[str] = field(default_factory=list)
    classes: Dict[str, OntologyClass] = field(default_factory=dict)
    properties: Dict[str, OntologyProperty] = field(default_factory=dict)
    individuals: Dict[str, Individual] = field(default_factory=dict)
    annotations: List[Annotation] = field(default_factory=list)
    last_modified: datetime = field(default_factory=_utcnow)

    def add_class(self, cls: OntologyClass) -> OntologyClass:
        """Insert or replace a class under its own IRI."""
        self.classes[cls.id] = cls
        return cls

    def add_property(self, prop: OntologyProperty) -> OntologyProperty:
        """Insert or replace a property under its own IRI."""
        self.properties[prop.id] = prop
        return prop

    def add_individual(self, individual: Individual) -> Individual:
        """Insert or replace an individual under its own IRI."""
        self.individuals[individual.id] = individual
        return individual

    def entity_count(self) -> int:
        return len(self.classes) + len(self.properties) + len(self.individuals)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready snapshot."""
        return {
            "id": self.id,
            "name": self.name,
            "version": self.version,
            "imports": list(self.imports),
            "classes": [c.to_dict() for c in self.classes.values()],
            "properties": [p.to_dict() for p in self.properties.values()],
            "individuals": [i.to_dict() for i in self.individuals.values()],
            "annotations": [a.to_dict() for a in self.annotations],
            "lastModified": self.last_modified.isoformat(),
        }
