"""
Pytest configuration and fixtures for the test suite.

Defines markers for selective test execution:
    pytest -m unit          # Fast unit tests
    pytest -m integration   # Cross-format tests
    pytest -m cli           # Command-line tests

Fixtures are centralized in tests/fixtures/ for reuse across all test modules.
"""

import json
import os
import sys

import pytest

# Add src to path for imports
src_dir = os.path.join(os.path.dirname(__file__), '..', 'src')
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

# Add tests directory to path for fixtures import
tests_dir = os.path.dirname(__file__)
if tests_dir not in sys.path:
    # Ensure src directory stays ahead of tests for module resolution
    sys.path.insert(1, tests_dir)

from fixtures import (
    JSONLD_DOCUMENT,
    OWL_XML_DOCUMENT,
    SAMPLE_CONFIG,
    TURTLE_DOCUMENT,
)

from ontology_interchange import (
    Individual,
    Ontology,
    OntologyClass,
    OntologyProperty,
    PropertyAssertion,
    PropertyType,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: Cross-format conversion tests")
    config.addinivalue_line("markers", "cli: Command-line interface tests")


# =============================================================================
# Document Fixtures
# =============================================================================

@pytest.fixture
def owl_xml_document():
    """Zoo ontology as RDF/XML with classes, properties and two individuals."""
    return OWL_XML_DOCUMENT


@pytest.fixture
def turtle_document():
    """Zoo classes and properties as Turtle."""
    return TURTLE_DOCUMENT


@pytest.fixture
def jsonld_document():
    """Zoo ontology as graph-shaped JSON-LD."""
    return JSONLD_DOCUMENT


# =============================================================================
# Model Fixtures
# =============================================================================

@pytest.fixture
def zoo_ontology() -> Ontology:
    """A fully populated in-memory ontology."""
    ontology = Ontology(
        id="http://example.org/zoo",
        name="Zoo",
        version="1.2",
        imports=["http://example.org/base"],
    )
    ontology.add_class(OntologyClass(
        id="http://example.org/zoo#Animal",
        name="Animal",
        label="Animal",
        description="Any living creature",
    ))
    ontology.add_class(OntologyClass(
        id="http://example.org/zoo#Cat",
        name="Cat",
        label="Cat",
        super_classes=["http://example.org/zoo#Animal"],
    ))
    ontology.add_property(OntologyProperty(
        id="http://example.org/zoo#hasFriend",
        name="has friend",
        type=PropertyType.OBJECT,
        label="has friend",
        domain=["http://example.org/zoo#Animal"],
        range=["http://example.org/zoo#Animal"],
        characteristics=["symmetric"],
    ))
    ontology.add_property(OntologyProperty(
        id="http://example.org/zoo#age",
        name="age",
        type=PropertyType.DATA,
        label="age",
        domain=["http://example.org/zoo#Animal"],
        range=["http://www.w3.org/2001/XMLSchema#integer"],
    ))
    ontology.add_individual(Individual(
        id="http://example.org/zoo#tom",
        name="Tom",
        label="Tom",
        types=["http://example.org/zoo#Cat"],
        property_assertions=[
            PropertyAssertion("http://example.org/zoo#age", "4"),
            PropertyAssertion("http://example.org/zoo#hasFriend", "http://example.org/zoo#rex", is_literal=False),
        ],
    ))
    return ontology


# =============================================================================
# File Fixtures
# =============================================================================

@pytest.fixture
def owl_file(tmp_path, owl_xml_document):
    """The RDF/XML zoo document on disk."""
    path = tmp_path / "zoo.owl"
    path.write_text(owl_xml_document, encoding="utf-8")
    return path


@pytest.fixture
def turtle_file(tmp_path, turtle_document):
    path = tmp_path / "zoo.ttl"
    path.write_text(turtle_document, encoding="utf-8")
    return path


@pytest.fixture
def jsonld_file(tmp_path, jsonld_document):
    path = tmp_path / "zoo.jsonld"
    path.write_text(jsonld_document, encoding="utf-8")
    return path


@pytest.fixture
def config_file(tmp_path):
    """A valid config.json."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps(SAMPLE_CONFIG), encoding="utf-8")
    return path
