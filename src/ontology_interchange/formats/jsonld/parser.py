"""
JSON-LD parser.

Accepts both the "graph" shape (entities under ``@graph``) and the "flat"
shape (a single entity at the root). Entries are classified by ``@type``:
anything mentioning ``Class`` becomes a class, anything mentioning
``Property`` becomes a property. Individuals are not reconstructed.

Usage:
    from ontology_interchange.formats.jsonld import parse_jsonld

    ontology = parse_jsonld(text)
"""

import json
import logging
from typing import Any, List, Optional

from ...constants import OWL_TO_CHARACTERISTIC, OntologyDefaults
from ...core.errors import OntologyParseError
from ...core.iri import local_name
from ...shared.models import Ontology, OntologyClass, OntologyProperty, PropertyType
from ..base import OntologyParser

logger = logging.getLogger(__name__)


def extract_ids(value: Any) -> List[str]:
    """
    Normalize a JSON-LD reference value into a flat list of IRIs.

    Handles a bare string, an ``{"@id": ...}`` object, or an array mixing
    both. Entries without a usable identifier are dropped.

    Example:
        >>> extract_ids(["#A", {"@id": "#B"}])
        ['#A', '#B']
    """
    if value is None:
        return []
    items = value if isinstance(value, list) else [value]
    ids: List[str] = []
    for item in items:
        if isinstance(item, str):
            if item:
                ids.append(item)
        elif isinstance(item, dict):
            ref = item.get("@id")
            if isinstance(ref, str) and ref:
                ids.append(ref)
    return ids


def extract_literal(value: Any) -> Optional[str]:
    """Return the first literal text of a string, ``{"@value"}`` object or array."""
    items = value if isinstance(value, list) else [value]
    for item in items:
        if isinstance(item, str):
            return item
        if isinstance(item, dict) and "@value" in item:
            return str(item["@value"])
    return None


def _type_names(value: Any) -> List[str]:
    """String entries of an ``@type`` value; ``{"@id"}`` entries are ignored."""
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [item for item in value if isinstance(item, str)]
    return []


def _term(type_name: str) -> str:
    """Vocabulary term of a compact ('owl:X') or full type IRI."""
    return local_name(type_name).split(":")[-1]


def _property_type(type_names: List[str]) -> PropertyType:
    joined = " ".join(type_names)
    if "Object" in joined:
        return PropertyType.OBJECT
    if "Data" in joined:
        return PropertyType.DATA
    return PropertyType.ANNOTATION


class JSONLDParser(OntologyParser):
    """Parse JSON-LD text into an Ontology."""

    format_name = "jsonld"

    def _parse_document(self, content: str) -> Ontology:
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise OntologyParseError(
                f"Invalid JSON: {e}", format=self.format_name, detail=str(e)
            )

        if not isinstance(data, dict):
            raise OntologyParseError(
                "Invalid JSON-LD content",
                format=self.format_name,
                detail=f"top-level value is {type(data).__name__}, expected an object",
            )

        ontology = Ontology(
            id=self._root_id(data),
            name=extract_literal(data.get("rdfs:label")) or OntologyDefaults.IMPORTED_ONTOLOGY_NAME,
            version=extract_literal(data.get("owl:versionInfo")),
            imports=extract_ids(data.get("owl:imports")),
        )

        graph = data["@graph"] if isinstance(data.get("@graph"), list) else [data]
        for entry in graph:
            self._read_entry(entry, ontology)
        return ontology

    @staticmethod
    def _root_id(data: dict) -> str:
        root_id = data.get("@id")
        if isinstance(root_id, str) and root_id:
            return root_id
        return OntologyDefaults.IMPORTED_ONTOLOGY_IRI

    def _read_entry(self, entry: Any, ontology: Ontology) -> None:
        if not isinstance(entry, dict):
            logger.debug(f"Skipping non-object @graph entry: {entry!r}")
            return

        iri = entry.get("@id")
        if not isinstance(iri, str):
            logger.debug("Skipping @graph entry without a string @id")
            return

        type_names = _type_names(entry.get("@type"))
        label = extract_literal(entry.get("rdfs:label")) or local_name(iri)
        description = extract_literal(entry.get("rdfs:comment"))

        if any("Class" in name for name in type_names):
            ontology.add_class(OntologyClass(
                id=iri,
                name=label,
                label=label,
                description=description,
                super_classes=extract_ids(entry.get("rdfs:subClassOf")),
                disjoint_with=extract_ids(entry.get("owl:disjointWith")),
                equivalent_to=extract_ids(entry.get("owl:equivalentClass")),
            ))
        elif any("Property" in name for name in type_names):
            characteristics = [
                OWL_TO_CHARACTERISTIC[_term(name)]
                for name in type_names
                if _term(name) in OWL_TO_CHARACTERISTIC
            ]
            ontology.add_property(OntologyProperty(
                id=iri,
                name=label,
                type=_property_type(type_names),
                label=label,
                description=description,
                domain=extract_ids(entry.get("rdfs:domain")),
                range=extract_ids(entry.get("rdfs:range")),
                super_properties=extract_ids(entry.get("rdfs:subPropertyOf")),
                characteristics=characteristics,
            ))
        else:
            logger.debug(f"Skipping @graph entry {iri} with type {type_names}")


def parse_jsonld(content: str, force_memory: bool = False) -> Ontology:
    """
    Parse JSON-LD text into an Ontology.

    Raises:
        OntologyParseError: If the text is not JSON or not a JSON object.
    """
    return JSONLDParser(force_memory=force_memory).parse(content)
