"""
Turtle serializer.

Emits the standard ``@prefix`` lines, an ontology header stanza, then one
stanza per class, property and individual. Each predicate after the first
goes on its own ``;`` continuation line so the output stays readable by the
line-oriented reader in ``parser.py``.

String values are embedded as-is; quotes inside labels or comments are not
escaped.
"""

from typing import List

from ...constants import STANDARD_PREFIXES
from ...shared.models import Individual, Ontology, OntologyClass, OntologyProperty
from ..base import OntologySerializer


def _stanza(head: str, predicates: List[str]) -> str:
    lines = [head] + [f"  {predicate}" for predicate in predicates]
    return " ;\n".join(lines) + " .\n\n"


class TurtleSerializer(OntologySerializer):
    """Serialize an Ontology as Turtle."""

    format_name = "turtle"

    def _serialize_document(self, ontology: Ontology) -> str:
        parts = [
            "".join(f"@prefix {prefix}: <{iri}> .\n" for prefix, iri in STANDARD_PREFIXES.items()),
            "\n",
            self._header(ontology),
        ]
        parts.extend(self._class_stanza(cls) for cls in ontology.classes.values())
        parts.extend(self._property_stanza(prop) for prop in ontology.properties.values())
        parts.extend(self._individual_stanza(ind) for ind in ontology.individuals.values())
        return "".join(parts)

    @staticmethod
    def _header(ontology: Ontology) -> str:
        predicates = []
        if ontology.version:
            predicates.append(f'owl:versionInfo "{ontology.version}"')
        predicates.extend(f"owl:imports <{iri}>" for iri in ontology.imports)
        return _stanza(f"<{ontology.id}> a owl:Ontology", predicates)

    @staticmethod
    def _class_stanza(cls: OntologyClass) -> str:
        predicates = []
        if cls.label:
            predicates.append(f'rdfs:label "{cls.label}"')
        if cls.description:
            predicates.append(f'rdfs:comment "{cls.description}"')
        predicates.extend(f"rdfs:subClassOf <{parent}>" for parent in cls.super_classes)
        return _stanza(f"<{cls.id}> a owl:Class", predicates)

    @staticmethod
    def _property_stanza(prop: OntologyProperty) -> str:
        predicates = []
        if prop.label:
            predicates.append(f'rdfs:label "{prop.label}"')
        if prop.description:
            predicates.append(f'rdfs:comment "{prop.description}"')
        predicates.extend(f"rdfs:domain <{iri}>" for iri in prop.domain)
        predicates.extend(f"rdfs:range <{iri}>" for iri in prop.range)
        return _stanza(f"<{prop.id}> a owl:{prop.type.owl_term}", predicates)

    @staticmethod
    def _individual_stanza(individual: Individual) -> str:
        if individual.types:
            types = ", ".join(f"<{iri}>" for iri in individual.types)
        else:
            types = "owl:NamedIndividual"
        predicates = []
        if individual.label:
            predicates.append(f'rdfs:label "{individual.label}"')
        return _stanza(f"<{individual.id}> a {types}", predicates)


def serialize_turtle(ontology: Ontology) -> str:
    """Serialize an Ontology to Turtle text."""
    return TurtleSerializer().serialize(ontology)
