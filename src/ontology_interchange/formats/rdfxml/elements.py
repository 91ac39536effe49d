"""
Namespace-tolerant element and attribute lookup for RDF/XML documents.

RDF/XML in the wild varies: vocabulary prefixes may be declared, omitted,
or bound to unexpected namespaces, and ``rdf:about`` is sometimes written as
plain ``about``. Every lookup here is an ordered list of fallbacks so the
parser can stay strict about structure and lenient about spelling.
"""

from typing import Iterator, List, Optional, Tuple
from xml.etree.ElementTree import Element

from ...constants import KNOWN_VOCABULARIES, OWL_NS, RDF_NS, XML_NS
from ...core.iri import resolve_iri


def split_tag(tag: str) -> Tuple[str, str]:
    """Split an ElementTree tag into (namespace, local name)."""
    if isinstance(tag, str) and tag.startswith("{"):
        namespace, _, local = tag[1:].partition("}")
        return namespace, local
    return "", tag if isinstance(tag, str) else ""


def expand_tag(tag: str) -> str:
    """The IRI an element tag stands for, e.g. ``{ns}Cat`` -> ``nsCat``."""
    namespace, local = split_tag(tag)
    return namespace + local


def matches(element: Element, local_name: str, namespace: str) -> bool:
    """
    Check whether an element is ``namespace``:``local_name``.

    The local name must match exactly. The namespace matches when it is the
    expected vocabulary, absent, or a namespace that is not one of the
    standard vocabularies (a rebound or undeclared prefix).
    """
    element_ns, element_local = split_tag(element.tag)
    if element_local != local_name:
        return False
    return element_ns == namespace or not element_ns or element_ns not in KNOWN_VOCABULARIES


def iter_matching(root: Element, local_name: str, namespace: str) -> Iterator[Element]:
    """All elements in document order, including ``root``, that match."""
    for element in root.iter():
        if matches(element, local_name, namespace):
            yield element


def descendants(element: Element, local_name: str, namespace: str) -> List[Element]:
    """Matching elements strictly below ``element``."""
    return [
        child for child in element.iter()
        if child is not element and matches(child, local_name, namespace)
    ]


def first_descendant(element: Element, local_name: str, namespace: str) -> Optional[Element]:
    found = descendants(element, local_name, namespace)
    return found[0] if found else None


def get_attribute(element: Optional[Element], name: str, namespace: Optional[str] = None) -> Optional[str]:
    """
    Look up an attribute under every spelling a document might use.

    Tries, in order: ``rdf:name``, ``owl:name``, the unprefixed ``name``,
    then ``{namespace}name`` when a namespace is given. Returns the first
    non-empty value, or None.
    """
    if element is None:
        return None
    candidates = [f"{{{RDF_NS}}}{name}", f"{{{OWL_NS}}}{name}", name]
    if namespace:
        candidates.append(f"{{{namespace}}}{name}")
    for key in candidates:
        value = element.get(key)
        if value:
            return value
    return None


def get_about(element: Element) -> Optional[str]:
    return get_attribute(element, "about", RDF_NS)


def get_resource(element: Element) -> Optional[str]:
    return get_attribute(element, "resource", RDF_NS)


def get_xml_base(root: Element) -> str:
    """The document ``xml:base``, or an empty string."""
    return root.get("xml:base") or root.get(f"{{{XML_NS}}}base") or ""


def get_language(element: Element) -> Optional[str]:
    return element.get(f"{{{XML_NS}}}lang") or None


def text_of(element: Optional[Element]) -> Optional[str]:
    """Concatenated text content; None when absent or empty."""
    if element is None:
        return None
    text = "".join(element.itertext())
    return text or None


def child_text(element: Element, local_name: str, namespace: str) -> Optional[str]:
    return text_of(first_descendant(element, local_name, namespace))


def resource_list(
    element: Element,
    local_name: str,
    namespace: str,
    base_iri: Optional[str] = None,
) -> List[str]:
    """
    ``rdf:resource`` values of every matching descendant.

    When ``base_iri`` is given each value is resolved against it.
    """
    resources = []
    for child in descendants(element, local_name, namespace):
        value = get_resource(child)
        if value is None:
            continue
        resources.append(resolve_iri(value, base_iri) if base_iri is not None else value)
    return resources
