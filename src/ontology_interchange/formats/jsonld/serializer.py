"""
JSON-LD serializer.

Writes one JSON document: a ``@context`` with the standard prefixes, the
ontology metadata at the root and a ``@graph`` holding all classes, then
all properties, then all individuals. Relationship values are always
arrays of ``{"@id": ...}`` objects so single and multiple values share one
shape.
"""

import json
from typing import Any, Dict, Iterable, List

from ...constants import STANDARD_PREFIXES, OntologyDefaults
from ...shared.models import Individual, Ontology, OntologyClass, OntologyProperty
from ..base import OntologySerializer


def _id_refs(iris: Iterable[str]) -> List[Dict[str, str]]:
    return [{"@id": iri} for iri in iris]


class JSONLDSerializer(OntologySerializer):
    """Serialize an Ontology as pretty-printed JSON-LD."""

    format_name = "jsonld"

    def __init__(self, indent: int = OntologyDefaults.JSON_INDENT):
        self.indent = indent

    def to_document(self, ontology: Ontology) -> Dict[str, Any]:
        """Build the JSON-LD document as a dictionary."""
        document: Dict[str, Any] = {
            "@context": dict(STANDARD_PREFIXES),
            "@id": ontology.id,
            "@type": "owl:Ontology",
            "rdfs:label": ontology.name,
        }
        if ontology.version is not None:
            document["owl:versionInfo"] = ontology.version
        document["owl:imports"] = _id_refs(ontology.imports)

        graph: List[Dict[str, Any]] = []
        graph.extend(self._class_node(cls) for cls in ontology.classes.values())
        graph.extend(self._property_node(prop) for prop in ontology.properties.values())
        graph.extend(self._individual_node(ind) for ind in ontology.individuals.values())
        document["@graph"] = graph
        return document

    def _serialize_document(self, ontology: Ontology) -> str:
        return json.dumps(self.to_document(ontology), indent=self.indent, ensure_ascii=False)

    @staticmethod
    def _class_node(cls: OntologyClass) -> Dict[str, Any]:
        node: Dict[str, Any] = {
            "@id": cls.id,
            "@type": "owl:Class",
            "rdfs:label": cls.display_label,
        }
        if cls.description is not None:
            node["rdfs:comment"] = cls.description
        node["rdfs:subClassOf"] = _id_refs(cls.super_classes)
        node["owl:disjointWith"] = _id_refs(cls.disjoint_with)
        node["owl:equivalentClass"] = _id_refs(cls.equivalent_to)
        return node

    @staticmethod
    def _property_node(prop: OntologyProperty) -> Dict[str, Any]:
        node: Dict[str, Any] = {
            "@id": prop.id,
            "@type": f"owl:{prop.type.owl_term}",
            "rdfs:label": prop.display_label,
        }
        if prop.description is not None:
            node["rdfs:comment"] = prop.description
        node["rdfs:domain"] = _id_refs(prop.domain)
        node["rdfs:range"] = _id_refs(prop.range)
        node["rdfs:subPropertyOf"] = _id_refs(prop.super_properties)
        return node

    @staticmethod
    def _individual_node(individual: Individual) -> Dict[str, Any]:
        return {
            "@id": individual.id,
            "@type": _id_refs(individual.types),
            "rdfs:label": individual.display_label,
        }


def serialize_jsonld(ontology: Ontology) -> str:
    """Serialize an Ontology to JSON-LD text."""
    return JSONLDSerializer().serialize(ontology)
