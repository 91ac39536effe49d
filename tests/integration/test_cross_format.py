"""
Cross-format conversion tests.

Every supported format pair is exercised: the zoo ontology is written in
the source format, read back, converted to the target format and read
again. What survives depends on the weakest codec on the path.
"""

import itertools

import pytest
from rdflib import Graph, URIRef
from rdflib.namespace import OWL, RDF, RDFS

from fixtures import ZOO, ZOO_NS
from ontology_interchange import (
    PropertyType,
    compare_ontologies,
    parse,
    serialize,
)
from ontology_interchange.formats import list_supported_formats

pytestmark = pytest.mark.integration

FORMATS = list_supported_formats()
XML_FORMATS = {"owlxml", "rdfxml"}
RDFLIB_FORMATS = {"turtle": "turtle", "owlxml": "xml", "rdfxml": "xml"}

ALL_PAIRS = list(itertools.product(FORMATS, repeat=2))
# Turtle keeps only declarations, labels and comments
PAIRS_WITHOUT_TURTLE = [pair for pair in ALL_PAIRS if "turtle" not in pair]
# The JSON-LD root node names its @graph, so rdflib reads its triples into a named graph
PAIRS_WITH_RDF_TARGET = [pair for pair in ALL_PAIRS if pair[1] in RDFLIB_FORMATS]


def convert(ontology, source, target):
    """Write in ``source``, read it, write in ``target`` and read that."""
    intermediate = parse(serialize(ontology, source), source)
    return parse(serialize(intermediate, target), target)


class TestFormatPairs:

    @pytest.mark.parametrize("source, target", ALL_PAIRS)
    def test_entities_survive(self, zoo_ontology, source, target):
        result = convert(zoo_ontology, source, target)

        assert set(result.classes) == {ZOO_NS + "Animal", ZOO_NS + "Cat"}
        assert set(result.properties) == {ZOO_NS + "hasFriend", ZOO_NS + "age"}
        assert result.properties[ZOO_NS + "hasFriend"].type is PropertyType.OBJECT
        assert result.properties[ZOO_NS + "age"].type is PropertyType.DATA

    @pytest.mark.parametrize("source, target", ALL_PAIRS)
    def test_labels_and_comments_survive(self, zoo_ontology, source, target):
        result = convert(zoo_ontology, source, target)

        animal = result.classes[ZOO_NS + "Animal"]
        assert animal.label == "Animal"
        assert animal.description == "Any living creature"
        assert result.properties[ZOO_NS + "hasFriend"].label == "has friend"

    @pytest.mark.parametrize("source, target", PAIRS_WITHOUT_TURTLE)
    def test_relationships_survive_without_turtle(self, zoo_ontology, source, target):
        result = convert(zoo_ontology, source, target)

        assert result.id == ZOO
        assert result.version == "1.2"
        assert result.imports == ["http://example.org/base"]
        assert result.classes[ZOO_NS + "Cat"].super_classes == [ZOO_NS + "Animal"]
        has_friend = result.properties[ZOO_NS + "hasFriend"]
        assert has_friend.domain == [ZOO_NS + "Animal"]
        assert has_friend.range == [ZOO_NS + "Animal"]

    @pytest.mark.parametrize("source, target", ALL_PAIRS)
    def test_characteristics_survive_only_in_xml(self, zoo_ontology, source, target):
        result = convert(zoo_ontology, source, target)
        expected = ["symmetric"] if {source, target} <= XML_FORMATS else []
        assert result.properties[ZOO_NS + "hasFriend"].characteristics == expected

    @pytest.mark.parametrize("source, target", ALL_PAIRS)
    def test_individuals_survive_only_in_xml(self, zoo_ontology, source, target):
        result = convert(zoo_ontology, source, target)

        if {source, target} <= XML_FORMATS:
            assert list(result.individuals) == [ZOO_NS + "tom"]
            assert result.individuals[ZOO_NS + "tom"].types == [ZOO_NS + "Cat"]
        else:
            assert result.individuals == {}

    @pytest.mark.parametrize("source, target", PAIRS_WITH_RDF_TARGET)
    def test_output_is_readable_rdf(self, zoo_ontology, source, target):
        intermediate = parse(serialize(zoo_ontology, source), source)
        text = serialize(intermediate, target)

        graph = Graph()
        graph.parse(data=text, format=RDFLIB_FORMATS[target])
        animal = URIRef(ZOO_NS + "Animal")
        assert (animal, RDF.type, OWL.Class) in graph
        assert (URIRef(ZOO_NS + "age"), RDF.type, OWL.DatatypeProperty) in graph
        assert any(graph.objects(animal, RDFS.label))


class TestLosslessPaths:

    @pytest.mark.parametrize("source, target", [
        ("owlxml", "rdfxml"),
        ("rdfxml", "owlxml"),
        ("owlxml", "owlxml"),
    ])
    def test_xml_paths_are_equivalent(self, zoo_ontology, source, target):
        result = convert(zoo_ontology, source, target)
        assert compare_ontologies(zoo_ontology, result)["is_equivalent"] is True

    def test_parsed_document_converts_back_to_equivalent_xml(self, owl_xml_document):
        original = parse(owl_xml_document, "owlxml")
        result = convert(original, "rdfxml", "owlxml")
        comparison = compare_ontologies(original, result)
        assert comparison["is_equivalent"] is True
        assert comparison["individuals"]["count2"] == 2

    def test_jsonld_keeps_schema_but_not_individuals(self, zoo_ontology):
        comparison = compare_ontologies(zoo_ontology, convert(zoo_ontology, "jsonld", "jsonld"))
        assert comparison["classes"]["match"] is True
        assert comparison["properties"]["match"] is True
        assert comparison["individuals"]["only_in_first"] == [ZOO_NS + "tom"]
        assert comparison["is_equivalent"] is False
