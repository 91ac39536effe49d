"""Tests for graph building, ontology comparison and round-trip checks."""

import pytest
from rdflib import Literal, URIRef
from rdflib.namespace import OWL, RDF, RDFS, XSD

from fixtures import ZOO_NS
from ontology_interchange import (
    OntologyClass,
    compare_ontologies,
    parse_owlxml,
    round_trip_test,
)
from ontology_interchange.core.comparison import OntologyGraphBuilder


@pytest.mark.unit
class TestOntologyGraphBuilder:

    def test_header_triples(self, zoo_ontology):
        graph = OntologyGraphBuilder().build(zoo_ontology)
        ontology = URIRef("http://example.org/zoo")
        assert (ontology, RDF.type, OWL.Ontology) in graph
        assert (ontology, OWL.versionInfo, Literal("1.2")) in graph
        assert (ontology, OWL.imports, URIRef("http://example.org/base")) in graph

    def test_entity_triples(self, zoo_ontology):
        graph = OntologyGraphBuilder().build(zoo_ontology)
        cat = URIRef(ZOO_NS + "Cat")
        age = URIRef(ZOO_NS + "age")
        has_friend = URIRef(ZOO_NS + "hasFriend")
        tom = URIRef(ZOO_NS + "tom")

        assert (cat, RDFS.subClassOf, URIRef(ZOO_NS + "Animal")) in graph
        assert (age, RDF.type, OWL.DatatypeProperty) in graph
        assert (age, RDFS.range, XSD.integer) in graph
        assert (has_friend, RDF.type, OWL.SymmetricProperty) in graph
        assert (tom, RDF.type, cat) in graph
        assert (tom, URIRef(ZOO_NS + "age"), Literal("4")) in graph
        assert (tom, has_friend, URIRef(ZOO_NS + "rex")) in graph

    def test_compact_iris_are_expanded(self, zoo_ontology):
        zoo_ontology.properties[ZOO_NS + "age"].range = ["xsd:integer"]
        graph = OntologyGraphBuilder().build(zoo_ontology)
        assert (URIRef(ZOO_NS + "age"), RDFS.range, XSD.integer) in graph

    def test_prefixes_bound(self, zoo_ontology):
        graph = OntologyGraphBuilder().build(zoo_ontology)
        prefixes = dict(graph.namespaces())
        assert str(prefixes["owl"]) == str(OWL)


@pytest.mark.unit
class TestCompareOntologies:

    def test_identical(self, zoo_ontology):
        result = compare_ontologies(zoo_ontology, zoo_ontology)
        assert result["is_equivalent"] is True
        assert result["entities_match"] is True
        assert result["classes"]["count1"] == 2
        assert result["triple_count_first"] == result["triple_count_second"]

    def test_differences_are_listed(self, zoo_ontology, owl_xml_document):
        other = parse_owlxml(owl_xml_document)
        result = compare_ontologies(zoo_ontology, other)

        assert result["is_equivalent"] is False
        assert result["classes"]["only_in_first"] == []
        assert result["classes"]["only_in_second"] == [ZOO_NS + "Dog"]
        assert result["individuals"]["only_in_second"] == [ZOO_NS + "rex"]
        assert result["properties"]["match"] is True
        assert result["entities_match"] is False

    def test_label_change_breaks_equivalence(self, owl_xml_document):
        first = parse_owlxml(owl_xml_document)
        second = parse_owlxml(owl_xml_document)
        second.classes[ZOO_NS + "Cat"].label = "Kitty"

        result = compare_ontologies(first, second)
        assert result["entities_match"] is True
        assert result["is_equivalent"] is False

    def test_label_fallback_counts_as_label(self, owl_xml_document):
        first = parse_owlxml(owl_xml_document)
        second = parse_owlxml(owl_xml_document)
        second.add_class(OntologyClass(id=ZOO_NS + "Cat", name="Cat", label=None,
                                       super_classes=[ZOO_NS + "Animal"],
                                       disjoint_with=[ZOO_NS + "Dog"]))
        assert compare_ontologies(first, second)["is_equivalent"] is True


@pytest.mark.unit
class TestRoundTrip:

    def test_owlxml_round_trip_is_lossless(self, owl_xml_document):
        result = round_trip_test(owl_xml_document, "owlxml", "owlxml")
        assert result["success"] is True
        assert result["comparison"]["is_equivalent"] is True
        assert result["exported"].startswith("<?xml")

    def test_turtle_round_trip_drops_relationships(self, owl_xml_document):
        result = round_trip_test(owl_xml_document, "owlxml", "turtle")
        assert result["success"] is True
        assert result["via_format"] == "turtle"
        assert result["comparison"]["classes"]["match"] is True
        assert result["comparison"]["individuals"]["count2"] == 0
        assert result["comparison"]["is_equivalent"] is False

    def test_failure_is_reported_not_raised(self):
        result = round_trip_test("<not-closed>", "owlxml", "jsonld")
        assert result["success"] is False
        assert "Invalid XML" in result["error"]
        assert result["comparison"] is None

    def test_unknown_format_is_reported(self, owl_xml_document):
        result = round_trip_test(owl_xml_document, "owlxml", "n3")
        assert result["success"] is False
        assert "Unsupported ontology format" in result["error"]
