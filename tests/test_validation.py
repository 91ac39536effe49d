"""Tests for structural validation."""

import pytest

from ontology_interchange import (
    Individual,
    Ontology,
    OntologyClass,
    OntologyProperty,
    validate,
)
from ontology_interchange.core.validators import StructuralValidator


@pytest.fixture
def empty_ontology() -> Ontology:
    return Ontology(id="http://ex.org/onto", name="onto")


@pytest.mark.unit
class TestStructuralValidation:

    def test_valid_ontology(self, zoo_ontology):
        assert validate(zoo_ontology) == []

    def test_ontology_iri(self):
        errors = validate(Ontology(id="urn:onto", name="onto"))
        assert errors == ["Ontology IRI must be a valid HTTP(S) URI: urn:onto"]

    def test_empty_ontology_iri(self):
        assert validate(Ontology(id="", name="onto")) == ["Ontology IRI must be a valid HTTP(S) URI: "]

    def test_class_iri_and_superclass(self, empty_ontology):
        empty_ontology.add_class(OntologyClass(id="Cat", name="Cat", super_classes=["Animal"]))
        assert validate(empty_ontology) == [
            "Class Cat has invalid IRI: Cat",
            "Class Cat references invalid superclass: Animal",
        ]

    def test_superclass_shorthands(self, empty_ontology):
        empty_ontology.add_class(OntologyClass(
            id="http://ex.org/onto#Cat",
            name="Cat",
            super_classes=["owl:Thing", "rdfs:Resource", "xsd:string"],
        ))
        assert validate(empty_ontology) == ["Class Cat references invalid superclass: xsd:string"]

    def test_property_checks(self, empty_ontology):
        empty_ontology.add_property(OntologyProperty(
            id="age",
            name="age",
            domain=["Animal", "owl:Thing"],
            range=["xsd:integer", "int"],
        ))
        assert validate(empty_ontology) == [
            "Property age has invalid IRI: age",
            "Property age has invalid domain: Animal",
            "Property age has invalid range: int",
        ]

    def test_individual_checks(self, empty_ontology):
        empty_ontology.add_individual(Individual(
            id="tom", name="tom", types=["Cat", "owl:Thing", "xsd:string"],
        ))
        assert validate(empty_ontology) == [
            "Individual tom has invalid IRI: tom",
            "Individual tom references invalid type: Cat",
            "Individual tom references invalid type: xsd:string",
        ]

    def test_imports(self, empty_ontology):
        empty_ontology.imports = ["http://ex.org/base", "base.owl"]
        assert validate(empty_ontology) == ["Invalid import IRI: base.owl"]

    def test_all_violations_reported_in_model_order(self):
        ontology = Ontology(id="onto", name="onto", imports=["x"])
        ontology.add_class(OntologyClass(id="A", name="A"))
        ontology.add_property(OntologyProperty(id="p", name="p"))
        ontology.add_individual(Individual(id="i", name="i"))
        errors = validate(ontology)
        assert len(errors) == 5
        assert errors[0].startswith("Ontology IRI")
        assert errors[1].startswith("Class")
        assert errors[2].startswith("Property")
        assert errors[3].startswith("Individual")
        assert errors[4].startswith("Invalid import")

    def test_issues_carry_entity_ids(self, empty_ontology):
        empty_ontology.add_class(OntologyClass(id="Cat", name="Cat"))
        issues = StructuralValidator().validate(empty_ontology)
        assert [issue.entity_id for issue in issues] == ["Cat"]
        assert str(issues[0]) == "Class Cat has invalid IRI: Cat"

    def test_validator_resets_between_runs(self, empty_ontology):
        validator = StructuralValidator()
        empty_ontology.add_class(OntologyClass(id="Cat", name="Cat"))
        validator.validate(empty_ontology)
        assert len(validator.validate(empty_ontology)) == 1
