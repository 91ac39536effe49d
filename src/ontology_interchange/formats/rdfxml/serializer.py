"""
RDF/XML (OWL/XML) serializer.

Writes a single ``rdf:RDF`` root declaring the standard prefixes and an
``xml:base`` derived from the ontology IRI, followed by the ``owl:Ontology``
header, classes, properties and ``owl:NamedIndividual`` elements. All text
and attribute values are XML-escaped.
"""

import logging
import re
from typing import List, Optional, Tuple
from xml.sax.saxutils import escape

from ...constants import CHARACTERISTIC_TO_OWL, OWL_NS, STANDARD_PREFIXES
from ...core.iri import base_iri_for, split_iri
from ...shared.models import Annotation, Individual, Ontology, OntologyClass, OntologyProperty
from ..base import OntologySerializer

logger = logging.getLogger(__name__)

INDENT = "    "
XML_ENTITIES = {'"': "&quot;", "'": "&apos;"}
NCNAME_PATTERN = re.compile(r"^[A-Za-z_][\w.\-]*$")
PREFIX_FOR_NAMESPACE = {iri: prefix for prefix, iri in STANDARD_PREFIXES.items()}


def escape_xml(text: str) -> str:
    """Escape ``& < > " '`` for use in element text or attribute values."""
    return escape(text, XML_ENTITIES)


def _resource(tag: str, iri: str, depth: int = 2) -> str:
    return f'{INDENT * depth}<{tag} rdf:resource="{escape_xml(iri)}"/>'


def _text(tag: str, value: str, depth: int = 2, attributes: str = "") -> str:
    return f"{INDENT * depth}<{tag}{attributes}>{escape_xml(value)}</{tag}>"


def _expand_compact(iri: str) -> str:
    prefix, sep, rest = iri.partition(":")
    if sep and prefix in STANDARD_PREFIXES and not rest.startswith("//"):
        return STANDARD_PREFIXES[prefix] + rest
    return iri


def qualified_tag(iri: str) -> Optional[Tuple[str, str]]:
    """
    Element name and namespace declaration for an arbitrary property IRI.

    Standard vocabularies reuse the prefixes declared on the root; any other
    namespace is declared on the element itself. Returns None when the IRI
    has no local part usable as an XML name.
    """
    namespace, local = split_iri(_expand_compact(iri))
    if not namespace or not NCNAME_PATTERN.match(local):
        return None
    prefix = PREFIX_FOR_NAMESPACE.get(namespace)
    if prefix:
        return f"{prefix}:{local}", ""
    return f"ns0:{local}", f' xmlns:ns0="{escape_xml(namespace)}"'


class RDFXMLSerializer(OntologySerializer):
    """Serialize an Ontology as RDF/XML."""

    format_name = "owlxml"

    def _serialize_document(self, ontology: Ontology) -> str:
        lines = ['<?xml version="1.0" encoding="UTF-8"?>']
        declarations = "".join(
            f'\n     xmlns:{prefix}="{iri}"' for prefix, iri in STANDARD_PREFIXES.items()
        )
        lines.append(
            f'<rdf:RDF xml:base="{escape_xml(base_iri_for(ontology.id))}"{declarations}>'
        )
        lines.extend(self._ontology_lines(ontology))
        for cls in ontology.classes.values():
            lines.extend(self._class_lines(cls))
        for prop in ontology.properties.values():
            lines.extend(self._property_lines(prop))
        for individual in ontology.individuals.values():
            lines.extend(self._individual_lines(individual))
        lines.append("</rdf:RDF>")
        return "\n".join(lines) + "\n"

    def _ontology_lines(self, ontology: Ontology) -> List[str]:
        lines = [f'{INDENT}<owl:Ontology rdf:about="{escape_xml(ontology.id)}">']
        if ontology.version:
            lines.append(_text("owl:versionInfo", ontology.version))
        lines.extend(_resource("owl:imports", iri) for iri in ontology.imports)
        for annotation in ontology.annotations:
            line = self._annotation_line(annotation)
            if line:
                lines.append(line)
        lines.append(f"{INDENT}</owl:Ontology>")
        return lines

    @staticmethod
    def _annotation_line(annotation: Annotation) -> Optional[str]:
        qualified = qualified_tag(annotation.property)
        if qualified is None:
            logger.warning(f"Skipping annotation with unwritable property IRI: {annotation.property}")
            return None
        tag, declaration = qualified
        if annotation.language:
            declaration += f' xml:lang="{escape_xml(annotation.language)}"'
        return _text(tag, annotation.value, attributes=declaration)

    @staticmethod
    def _class_lines(cls: OntologyClass) -> List[str]:
        lines = [f'{INDENT}<owl:Class rdf:about="{escape_xml(cls.id)}">']
        if cls.label:
            lines.append(_text("rdfs:label", cls.label))
        if cls.description:
            lines.append(_text("rdfs:comment", cls.description))
        lines.extend(_resource("rdfs:subClassOf", iri) for iri in cls.super_classes)
        lines.extend(_resource("owl:disjointWith", iri) for iri in cls.disjoint_with)
        lines.extend(_resource("owl:equivalentClass", iri) for iri in cls.equivalent_to)
        lines.append(f"{INDENT}</owl:Class>")
        return lines

    @staticmethod
    def _property_lines(prop: OntologyProperty) -> List[str]:
        tag = f"owl:{prop.type.owl_term}"
        lines = [f'{INDENT}<{tag} rdf:about="{escape_xml(prop.id)}">']
        for characteristic in prop.characteristics:
            owl_name = CHARACTERISTIC_TO_OWL.get(characteristic)
            if owl_name is None:
                logger.debug(f"No OWL class for characteristic '{characteristic}' on {prop.id}")
                continue
            lines.append(_resource("rdf:type", OWL_NS + owl_name))
        if prop.label:
            lines.append(_text("rdfs:label", prop.label))
        if prop.description:
            lines.append(_text("rdfs:comment", prop.description))
        lines.extend(_resource("rdfs:domain", iri) for iri in prop.domain)
        lines.extend(_resource("rdfs:range", iri) for iri in prop.range)
        lines.extend(_resource("rdfs:subPropertyOf", iri) for iri in prop.super_properties)
        lines.append(f"{INDENT}</{tag}>")
        return lines

    @staticmethod
    def _individual_lines(individual: Individual) -> List[str]:
        lines = [f'{INDENT}<owl:NamedIndividual rdf:about="{escape_xml(individual.id)}">']
        lines.extend(_resource("rdf:type", iri) for iri in individual.types)
        if individual.label:
            lines.append(_text("rdfs:label", individual.label))
        lines.extend(_resource("owl:sameAs", iri) for iri in individual.same_as)
        lines.extend(_resource("owl:differentFrom", iri) for iri in individual.different_from)
        for assertion in individual.property_assertions:
            qualified = qualified_tag(assertion.property)
            if qualified is None:
                logger.warning(
                    f"Skipping assertion on {individual.id} with unwritable property IRI: "
                    f"{assertion.property}"
                )
                continue
            tag, declaration = qualified
            if assertion.is_literal:
                lines.append(_text(tag, assertion.value, attributes=declaration))
            else:
                lines.append(
                    f'{INDENT * 2}<{tag}{declaration} rdf:resource="{escape_xml(assertion.value)}"/>'
                )
        lines.append(f"{INDENT}</owl:NamedIndividual>")
        return lines


def serialize_owlxml(ontology: Ontology) -> str:
    """Serialize an Ontology to RDF/XML text."""
    return RDFXMLSerializer().serialize(ontology)


def serialize_rdfxml(ontology: Ontology) -> str:
    """Serialize an Ontology to plain RDF/XML; identical to ``serialize_owlxml``."""
    return serialize_owlxml(ontology)
