"""
Semantic comparison of ontologies.

Renders Ontology models as rdflib graphs so two models can be compared by
content rather than by document text. Used by the ``compare`` command and
for round-trip checks through another format.
"""

import logging
from typing import Any, Dict, Iterable, Set

from rdflib import Graph, Literal, URIRef
from rdflib.compare import isomorphic
from rdflib.namespace import OWL, RDF, RDFS

from ..constants import CHARACTERISTIC_TO_OWL, STANDARD_PREFIXES
from ..shared.models import Annotation, Ontology

logger = logging.getLogger(__name__)


def _term(iri: str) -> URIRef:
    """URIRef for an IRI, expanding ``owl:``/``rdfs:``/``xsd:`` shorthands."""
    prefix, sep, rest = iri.partition(":")
    if sep and prefix in STANDARD_PREFIXES and not rest.startswith("//"):
        return URIRef(STANDARD_PREFIXES[prefix] + rest)
    return URIRef(iri)


class OntologyGraphBuilder:
    """
    Build an rdflib Graph from an Ontology.

    Example:
        >>> graph = OntologyGraphBuilder().build(ontology)
        >>> print(graph.serialize(format="turtle"))
    """

    def __init__(self) -> None:
        self.graph: Graph = Graph()

    def _setup_namespaces(self) -> None:
        for prefix, iri in STANDARD_PREFIXES.items():
            self.graph.bind(prefix, iri)

    def _add_refs(self, subject: URIRef, predicate: URIRef, iris: Iterable[str]) -> None:
        for iri in iris:
            self.graph.add((subject, predicate, _term(iri)))

    def _add_text(self, subject: URIRef, predicate: URIRef, value: Any) -> None:
        if value:
            self.graph.add((subject, predicate, Literal(value)))

    def _add_annotations(self, subject: URIRef, annotations: Iterable[Annotation]) -> None:
        for annotation in annotations:
            self.graph.add((
                subject,
                _term(annotation.property),
                Literal(annotation.value, lang=annotation.language),
            ))

    def build(self, ontology: Ontology) -> Graph:
        """Render the ontology header, classes, properties and individuals as triples."""
        self.graph = Graph()
        self._setup_namespaces()

        ontology_uri = URIRef(ontology.id)
        self.graph.add((ontology_uri, RDF.type, OWL.Ontology))
        self._add_text(ontology_uri, OWL.versionInfo, ontology.version)
        self._add_refs(ontology_uri, OWL.imports, ontology.imports)
        self._add_annotations(ontology_uri, ontology.annotations)

        for cls in ontology.classes.values():
            subject = URIRef(cls.id)
            self.graph.add((subject, RDF.type, OWL.Class))
            self._add_text(subject, RDFS.label, cls.display_label)
            self._add_text(subject, RDFS.comment, cls.description)
            self._add_refs(subject, RDFS.subClassOf, cls.super_classes)
            self._add_refs(subject, OWL.disjointWith, cls.disjoint_with)
            self._add_refs(subject, OWL.equivalentClass, cls.equivalent_to)
            self._add_annotations(subject, cls.annotations)

        for prop in ontology.properties.values():
            subject = URIRef(prop.id)
            self.graph.add((subject, RDF.type, OWL[prop.type.owl_term]))
            for characteristic in prop.characteristics:
                if characteristic in CHARACTERISTIC_TO_OWL:
                    self.graph.add((subject, RDF.type, OWL[CHARACTERISTIC_TO_OWL[characteristic]]))
            self._add_text(subject, RDFS.label, prop.display_label)
            self._add_text(subject, RDFS.comment, prop.description)
            self._add_refs(subject, RDFS.domain, prop.domain)
            self._add_refs(subject, RDFS.range, prop.range)
            self._add_refs(subject, RDFS.subPropertyOf, prop.super_properties)
            self._add_annotations(subject, prop.annotations)

        for individual in ontology.individuals.values():
            subject = URIRef(individual.id)
            self.graph.add((subject, RDF.type, OWL.NamedIndividual))
            self._add_refs(subject, RDF.type, individual.types)
            self._add_text(subject, RDFS.label, individual.display_label)
            self._add_refs(subject, OWL.sameAs, individual.same_as)
            self._add_refs(subject, OWL.differentFrom, individual.different_from)
            for assertion in individual.property_assertions:
                value = Literal(assertion.value) if assertion.is_literal else _term(assertion.value)
                self.graph.add((subject, _term(assertion.property), value))
            self._add_annotations(subject, individual.annotations)

        logger.debug(f"Built graph with {len(self.graph)} triples for {ontology.id}")
        return self.graph


def _compare_sets(first: Set[str], second: Set[str]) -> Dict[str, Any]:
    return {
        "count1": len(first),
        "count2": len(second),
        "only_in_first": sorted(first - second),
        "only_in_second": sorted(second - first),
        "match": first == second,
    }


def compare_ontologies(first: Ontology, second: Ontology) -> Dict[str, Any]:
    """
    Compare two ontologies by content.

    Returns:
        Dict with:
        - classes / properties / individuals: count1, count2, only_in_first,
          only_in_second, match
        - triple_count_first / triple_count_second
        - entities_match: True when all three IRI sets are equal
        - is_equivalent: True when the rendered graphs are isomorphic
    """
    graph1 = OntologyGraphBuilder().build(first)
    graph2 = OntologyGraphBuilder().build(second)

    result: Dict[str, Any] = {
        "classes": _compare_sets(set(first.classes), set(second.classes)),
        "properties": _compare_sets(set(first.properties), set(second.properties)),
        "individuals": _compare_sets(set(first.individuals), set(second.individuals)),
        "triple_count_first": len(graph1),
        "triple_count_second": len(graph2),
    }
    result["entities_match"] = all(
        result[kind]["match"] for kind in ("classes", "properties", "individuals")
    )
    result["is_equivalent"] = isomorphic(graph1, graph2)
    return result


def round_trip_test(
    content: str,
    source_format: str,
    via_format: str,
    force_memory: bool = False,
) -> Dict[str, Any]:
    """
    Parse a document, serialize it through another format, parse it back and compare.

    Never raises; failures are reported as ``{"success": False, "error": ...}``.
    """
    from ..formats import get_parser, get_serializer

    try:
        original = get_parser(source_format)(content, force_memory=force_memory)
        exported = get_serializer(via_format)(original)
        logger.info(f"Round-trip test: exported {source_format} document as {via_format}")

        reparsed = get_parser(via_format)(exported, force_memory=force_memory)
        comparison = compare_ontologies(original, reparsed)

        return {
            "success": True,
            "source_format": str(source_format),
            "via_format": str(via_format),
            "comparison": comparison,
            "exported": exported,
        }
    except Exception as e:
        logger.error(f"Round-trip test failed: {e}")
        return {
            "success": False,
            "error": str(e),
            "comparison": None,
        }
