"""
Shared data models for the ontology codecs.

This module contains the value objects every codec reads and writes.

Usage:
    from ontology_interchange.shared.models import Ontology, OntologyClass
"""

from .ontology import (
    Annotation,
    Individual,
    Ontology,
    OntologyClass,
    OntologyProperty,
    PropertyAssertion,
    PropertyType,
)

__all__ = [
    "Annotation",
    "Individual",
    "Ontology",
    "OntologyClass",
    "OntologyProperty",
    "PropertyAssertion",
    "PropertyType",
]
