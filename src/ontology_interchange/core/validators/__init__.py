"""
Validators for documents, paths and parsed ontologies.

Usage:
    from ontology_interchange.core.validators import InputValidator, validate_ontology
"""

from .input import InputValidator
from .structural import StructuralIssue, StructuralValidator, validate_ontology

__all__ = [
    "InputValidator",
    "StructuralIssue",
    "StructuralValidator",
    "validate_ontology",
]
