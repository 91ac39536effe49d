"""
RDF/XML (OWL/XML) parser.

Reads ontology metadata, classes, properties and individuals from an
RDF/XML document. Lookups tolerate prefixed and unprefixed spellings of
elements and attributes (see ``elements.py``); missing optional data falls
back to documented defaults rather than failing.

Individuals are discovered in two passes:

1. explicit ``owl:NamedIndividual`` elements;
2. every other element carrying an ``about`` attribute that is not yet known
   as a class, property or individual, classified by
   ``IndividualClassificationRule``. This catches typed-node declarations
   such as ``<ex:Cat rdf:about="...">``.

When both passes see the same IRI the first pass wins.

Plain RDF/XML and OWL/XML are read by the same parser.
"""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import List, Tuple

from ...constants import (
    KNOWN_VOCABULARIES,
    OWL_NS,
    OWL_TO_CHARACTERISTIC,
    RDF_NS,
    RDFS_NS,
    OntologyDefaults,
)
from ...core.errors import OntologyParseError
from ...core.iri import local_name, resolve_iri
from ...shared.models import (
    Annotation,
    Individual,
    Ontology,
    OntologyClass,
    OntologyProperty,
    PropertyAssertion,
    PropertyType,
)
from ..base import OntologyParser
from .elements import (
    child_text,
    expand_tag,
    get_about,
    get_language,
    get_resource,
    get_xml_base,
    iter_matching,
    matches,
    resource_list,
    split_tag,
    text_of,
)

logger = logging.getLogger(__name__)

PROPERTY_ELEMENTS: Tuple[Tuple[str, PropertyType], ...] = (
    ("ObjectProperty", PropertyType.OBJECT),
    ("DatatypeProperty", PropertyType.DATA),
    ("AnnotationProperty", PropertyType.ANNOTATION),
)


@dataclass(frozen=True)
class IndividualClassificationRule:
    """
    Decides whether an ``about``-bearing element declares an individual.

    An element qualifies when it has ``rdf:type`` children, or when its tag's
    local name is not reserved. A local name is reserved when it contains
    one of ``reserved_fragments`` or equals one of ``reserved_names``.
    Extend the denylist here, not in the parser.
    """
    reserved_fragments: Tuple[str, ...] = ("Ontology", "Class", "Property")
    reserved_names: Tuple[str, ...] = ("RDF",)

    def is_reserved(self, tag_local_name: str) -> bool:
        if tag_local_name in self.reserved_names:
            return True
        return any(fragment in tag_local_name for fragment in self.reserved_fragments)

    def is_individual(self, tag_local_name: str, declared_types: List[str]) -> bool:
        return bool(declared_types) or not self.is_reserved(tag_local_name)


DEFAULT_CLASSIFICATION_RULE = IndividualClassificationRule()


def _label_or_local_name(element: ET.Element, iri: str) -> str:
    return child_text(element, "label", RDFS_NS) or local_name(iri)


class RDFXMLParser(OntologyParser):
    """
    Parse RDF/XML text into an Ontology.

    Example:
        >>> ontology = RDFXMLParser().parse('<rdf:RDF xmlns:rdf="..." ...>...</rdf:RDF>')
        >>> list(ontology.classes)
        ['http://ex.org#A']
    """

    format_name = "owlxml"

    def __init__(
        self,
        force_memory: bool = False,
        classification_rule: IndividualClassificationRule = DEFAULT_CLASSIFICATION_RULE,
    ):
        super().__init__(force_memory=force_memory)
        self.classification_rule = classification_rule

    def _parse_document(self, content: str) -> Ontology:
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            raise OntologyParseError(
                f"Invalid XML: {e}", format=self.format_name, detail=str(e)
            )

        xml_base = get_xml_base(root)
        ontology = self._read_header(root, xml_base)

        self._read_classes(root, ontology)
        self._read_properties(root, ontology)
        self._read_named_individuals(root, ontology, xml_base)
        self._read_typed_nodes(root, ontology, xml_base)
        return ontology

    def _read_header(self, root: ET.Element, xml_base: str) -> Ontology:
        node = next(iter_matching(root, "Ontology", OWL_NS), None)

        ontology_id = (
            (get_about(node) if node is not None else None)
            or xml_base
            or OntologyDefaults.FALLBACK_ONTOLOGY_IRI
        )
        ontology = Ontology(
            id=ontology_id,
            name=local_name(ontology_id, OntologyDefaults.IMPORTED_ONTOLOGY_NAME),
        )
        if node is None:
            logger.debug("No owl:Ontology element found; using document base for the ontology IRI")
            return ontology

        ontology.version = child_text(node, "versionInfo", OWL_NS)
        ontology.imports = resource_list(node, "imports", OWL_NS)

        for child in node:
            for term in ("label", "comment"):
                if matches(child, term, RDFS_NS):
                    value = text_of(child)
                    if value is not None:
                        ontology.annotations.append(
                            Annotation(RDFS_NS + term, value, get_language(child))
                        )
        return ontology

    def _read_classes(self, root: ET.Element, ontology: Ontology) -> None:
        for node in iter_matching(root, "Class", OWL_NS):
            iri = get_about(node)
            if not iri:
                logger.debug("Skipping owl:Class element without an about attribute")
                continue

            label = _label_or_local_name(node, iri)
            ontology.add_class(OntologyClass(
                id=iri,
                name=label,
                label=label,
                description=child_text(node, "comment", RDFS_NS),
                super_classes=resource_list(node, "subClassOf", RDFS_NS),
                disjoint_with=resource_list(node, "disjointWith", OWL_NS),
                equivalent_to=resource_list(node, "equivalentClass", OWL_NS),
            ))

    def _read_properties(self, root: ET.Element, ontology: Ontology) -> None:
        for element_name, prop_type in PROPERTY_ELEMENTS:
            for node in iter_matching(root, element_name, OWL_NS):
                iri = get_about(node)
                if not iri:
                    logger.debug(f"Skipping owl:{element_name} element without an about attribute")
                    continue

                label = _label_or_local_name(node, iri)
                ontology.add_property(OntologyProperty(
                    id=iri,
                    name=label,
                    type=prop_type,
                    label=label,
                    description=child_text(node, "comment", RDFS_NS),
                    domain=resource_list(node, "domain", RDFS_NS),
                    range=resource_list(node, "range", RDFS_NS),
                    super_properties=resource_list(node, "subPropertyOf", RDFS_NS),
                    characteristics=self._characteristics(node),
                ))

    @staticmethod
    def _characteristics(node: ET.Element) -> List[str]:
        tags = []
        for type_iri in resource_list(node, "type", RDF_NS):
            if type_iri.startswith(OWL_NS) and type_iri[len(OWL_NS):] in OWL_TO_CHARACTERISTIC:
                tags.append(OWL_TO_CHARACTERISTIC[type_iri[len(OWL_NS):]])
        return tags

    def _read_named_individuals(self, root: ET.Element, ontology: Ontology, xml_base: str) -> None:
        for node in iter_matching(root, "NamedIndividual", OWL_NS):
            raw_id = get_about(node)
            if not raw_id:
                logger.debug("Skipping owl:NamedIndividual element without an about attribute")
                continue
            iri = resolve_iri(raw_id, xml_base)
            ontology.add_individual(self._build_individual(
                node, iri, xml_base, resource_list(node, "type", RDF_NS, xml_base)
            ))

    def _read_typed_nodes(self, root: ET.Element, ontology: Ontology, xml_base: str) -> None:
        for node in root.iter():
            raw_id = get_about(node)
            if not raw_id:
                continue

            iri = resolve_iri(raw_id, xml_base)
            if iri in ontology.individuals or iri in ontology.classes or iri in ontology.properties:
                continue

            namespace, tag_local = split_tag(node.tag)
            declared_types = resource_list(node, "type", RDF_NS, xml_base)
            if not self.classification_rule.is_individual(tag_local, declared_types):
                logger.debug(f"Not treating <{tag_local}> {iri} as an individual")
                continue

            types = list(declared_types)
            is_description = namespace == RDF_NS and tag_local == "Description"
            if namespace and not is_description:
                types.insert(0, expand_tag(node.tag))

            ontology.add_individual(self._build_individual(node, iri, xml_base, types))

    def _build_individual(
        self, node: ET.Element, iri: str, xml_base: str, types: List[str]
    ) -> Individual:
        label = _label_or_local_name(node, iri)
        return Individual(
            id=iri,
            name=label,
            label=label,
            types=types,
            property_assertions=self._assertions(node, xml_base),
            same_as=resource_list(node, "sameAs", OWL_NS, xml_base),
            different_from=resource_list(node, "differentFrom", OWL_NS, xml_base),
        )

    @staticmethod
    def _assertions(node: ET.Element, xml_base: str) -> List[PropertyAssertion]:
        """Property values given as child elements outside the standard vocabularies."""
        assertions = []
        for child in node:
            namespace, _ = split_tag(child.tag)
            if not namespace or namespace in KNOWN_VOCABULARIES:
                continue
            resource = get_resource(child)
            if resource:
                assertions.append(PropertyAssertion(
                    expand_tag(child.tag), resolve_iri(resource, xml_base), is_literal=False
                ))
                continue
            value = text_of(child)
            if value is not None:
                assertions.append(PropertyAssertion(expand_tag(child.tag), value))
        return assertions


def parse_owlxml(content: str, force_memory: bool = False) -> Ontology:
    """
    Parse RDF/XML (OWL/XML) text into an Ontology.

    Raises:
        OntologyParseError: If the text is not well-formed XML.
    """
    return RDFXMLParser(force_memory=force_memory).parse(content)


def parse_rdfxml(content: str, force_memory: bool = False) -> Ontology:
    """Parse plain RDF/XML; identical to ``parse_owlxml``."""
    return parse_owlxml(content, force_memory=force_memory)
