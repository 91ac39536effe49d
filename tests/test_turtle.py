"""Tests for the Turtle codec."""

import pytest

from fixtures import ZOO_NS
from ontology_interchange import (
    Individual,
    Ontology,
    OntologyClass,
    OntologyParseError,
    PropertyType,
    parse_turtle,
    serialize_turtle,
)
from ontology_interchange.formats.turtle import ReaderState, TurtleStatementReader

PREFIX_BLOCK = (
    "@prefix owl: <http://www.w3.org/2002/07/owl#> .\n"
    "@prefix rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#> .\n"
    "@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .\n"
    "@prefix xsd: <http://www.w3.org/2001/XMLSchema#> .\n"
)


@pytest.mark.unit
class TestTurtleSerializer:

    def test_minimal_document(self):
        ontology = Ontology(id="http://ex.org/o", name="o")
        ontology.add_class(OntologyClass(id="http://ex.org/o#A", name="A"))

        assert serialize_turtle(ontology) == (
            PREFIX_BLOCK
            + "\n"
            + "<http://ex.org/o> a owl:Ontology .\n\n"
            + "<http://ex.org/o#A> a owl:Class .\n\n"
        )

    def test_header_stanza(self, zoo_ontology):
        text = serialize_turtle(zoo_ontology)
        assert (
            "<http://example.org/zoo> a owl:Ontology ;\n"
            '  owl:versionInfo "1.2" ;\n'
            "  owl:imports <http://example.org/base> .\n"
        ) in text

    def test_class_stanza(self, zoo_ontology):
        text = serialize_turtle(zoo_ontology)
        assert (
            f"<{ZOO_NS}Animal> a owl:Class ;\n"
            '  rdfs:label "Animal" ;\n'
            '  rdfs:comment "Any living creature" .\n'
        ) in text
        assert (
            f"<{ZOO_NS}Cat> a owl:Class ;\n"
            '  rdfs:label "Cat" ;\n'
            f"  rdfs:subClassOf <{ZOO_NS}Animal> .\n"
        ) in text

    def test_property_stanza(self, zoo_ontology):
        text = serialize_turtle(zoo_ontology)
        assert (
            f"<{ZOO_NS}age> a owl:DatatypeProperty ;\n"
            '  rdfs:label "age" ;\n'
            f"  rdfs:domain <{ZOO_NS}Animal> ;\n"
            "  rdfs:range <http://www.w3.org/2001/XMLSchema#integer> .\n"
        ) in text

    def test_individual_stanza(self, zoo_ontology):
        text = serialize_turtle(zoo_ontology)
        assert f'<{ZOO_NS}tom> a <{ZOO_NS}Cat> ;\n  rdfs:label "Tom" .\n' in text

    def test_untyped_individual_is_named_individual(self):
        ontology = Ontology(id="http://ex.org/o", name="o")
        ontology.add_individual(Individual(id="http://ex.org/o#x", name="x"))
        assert "<http://ex.org/o#x> a owl:NamedIndividual .\n" in serialize_turtle(ontology)

    def test_entities_in_model_order(self, zoo_ontology):
        text = serialize_turtle(zoo_ontology)
        positions = [text.index(f"<{ZOO_NS}{name}> a") for name in ("Animal", "Cat", "hasFriend", "age", "tom")]
        assert positions == sorted(positions)


@pytest.mark.unit
class TestTurtleStatementReader:

    @pytest.fixture
    def reader(self):
        return TurtleStatementReader(Ontology(id="http://ex.org", name="ex"))

    def test_class_declaration_then_label(self, reader):
        reader.feed("<http://ex.org#Cat> a owl:Class ;")
        assert reader.state is ReaderState.SUBJECT_IS_CLASS

        reader.feed('  rdfs:label "Cat" .')
        assert reader.ontology.classes["http://ex.org#Cat"].label == "Cat"
        assert reader.state is ReaderState.NO_SUBJECT
        assert reader.subject is None

    def test_object_position_iri_is_not_a_subject(self, reader):
        reader.feed("<http://ex.org#Cat> a owl:Class ;")
        reader.feed("  rdfs:subClassOf <http://ex.org#Animal> ;")
        reader.feed('  rdfs:comment "A cat" .')

        assert list(reader.ontology.classes) == ["http://ex.org#Cat"]
        assert reader.ontology.classes["http://ex.org#Cat"].description == "A cat"

    def test_continuation_line_does_not_redeclare(self, reader):
        reader.feed("<http://ex.org#p> a owl:ObjectProperty ;")
        reader.feed("  rdfs:range owl:Class .")

        assert list(reader.ontology.properties) == ["http://ex.org#p"]
        assert reader.ontology.classes == {}

    def test_label_on_unclassified_subject_is_ignored(self, reader):
        reader.feed("<http://ex.org> a owl:Ontology ;")
        assert reader.state is ReaderState.SUBJECT_PENDING_KIND
        reader.feed('  rdfs:label "Example" .')
        assert reader.ontology.entity_count() == 0

    def test_later_statement_labels_known_class(self, reader):
        reader.feed("<http://ex.org#A> a owl:Class .")
        reader.feed('<http://ex.org#A> rdfs:label "Animal" .')
        assert reader.ontology.classes["http://ex.org#A"].label == "Animal"

    def test_later_statement_labels_known_property(self, reader):
        reader.feed("<http://ex.org#p> a owl:DatatypeProperty .")
        reader.feed("<http://ex.org#p>")
        assert reader.state is ReaderState.SUBJECT_IS_PROPERTY
        reader.feed('  rdfs:comment "A property" .')
        assert reader.ontology.properties["http://ex.org#p"].description == "A property"
        assert reader.ontology.classes == {}

    def test_comments_and_prefixes_are_skipped(self, reader):
        reader.feed("@prefix owl: <http://www.w3.org/2002/07/owl#> .")
        reader.feed("# <http://ex.org#Nope> a owl:Class .")
        reader.feed("")
        assert reader.ontology.entity_count() == 0
        assert reader.state is ReaderState.NO_SUBJECT


@pytest.mark.unit
class TestTurtleParser:

    def test_document(self, turtle_document):
        ontology = parse_turtle(turtle_document)

        assert ontology.id == "http://example.org/imported-ontology"
        assert ontology.name == "Imported Ontology"
        assert list(ontology.classes) == [ZOO_NS + "Animal", ZOO_NS + "Cat"]
        assert list(ontology.properties) == [ZOO_NS + "hasFriend", ZOO_NS + "age", ZOO_NS + "note"]

    def test_labels_and_comments(self, turtle_document):
        ontology = parse_turtle(turtle_document)
        animal = ontology.classes[ZOO_NS + "Animal"]
        cat = ontology.classes[ZOO_NS + "Cat"]

        assert animal.label == "Animal"
        assert animal.description == "Any living creature"
        assert cat.label is None
        assert cat.name == "Cat"
        assert ontology.properties[ZOO_NS + "hasFriend"].label == "has friend"

    def test_property_kinds(self, turtle_document):
        properties = parse_turtle(turtle_document).properties
        assert properties[ZOO_NS + "hasFriend"].type is PropertyType.OBJECT
        assert properties[ZOO_NS + "age"].type is PropertyType.DATA
        assert properties[ZOO_NS + "note"].type is PropertyType.ANNOTATION

    def test_relationships_are_not_extracted(self, turtle_document):
        ontology = parse_turtle(turtle_document)
        assert ontology.classes[ZOO_NS + "Cat"].super_classes == []
        assert ontology.properties[ZOO_NS + "hasFriend"].domain == []

    @pytest.mark.parametrize("content", ["", "\n\n", "  \n\t"])
    def test_blank_document_is_empty_ontology(self, content):
        ontology = parse_turtle(content)
        assert ontology.id == "http://example.org/imported-ontology"
        assert ontology.name == "Imported Ontology"
        assert ontology.entity_count() == 0

    def test_none_is_rejected(self):
        with pytest.raises(OntologyParseError):
            parse_turtle(None)

    def test_split_statements_about_one_class(self):
        ontology = parse_turtle(
            PREFIX_BLOCK
            + "<http://ex.org#A> a owl:Class .\n"
            + '<http://ex.org#A> rdfs:label "Animal" .\n'
        )
        assert ontology.classes["http://ex.org#A"].label == "Animal"

    def test_reparse_keeps_entities_and_labels(self, zoo_ontology):
        reparsed = parse_turtle(serialize_turtle(zoo_ontology))

        assert list(reparsed.classes) == list(zoo_ontology.classes)
        assert list(reparsed.properties) == list(zoo_ontology.properties)
        assert reparsed.individuals == {}
        for iri, prop in zoo_ontology.properties.items():
            assert reparsed.properties[iri].type is prop.type
            assert reparsed.properties[iri].label == prop.label
        assert reparsed.classes[ZOO_NS + "Animal"].description == "Any living creature"
