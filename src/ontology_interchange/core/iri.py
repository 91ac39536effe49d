"""
IRI helpers shared by every codec.

- resolve_iri: resolve relative or fragment identifiers against a base IRI
- local_name: derive a display name from an IRI
- base_iri_for: compute the document base used when writing RDF/XML
"""

from typing import Optional

ABSOLUTE_SCHEMES = ("http://", "https://")


def resolve_iri(iri: str, base_iri: str) -> str:
    """
    Resolve a possibly relative IRI against a base IRI.

    Rules, in order:
    1. Absolute http(s) IRIs are returned unchanged.
    2. Fragment identifiers ("#Frag") are appended to the base with one
       trailing "#" stripped, so "base#" + "#Frag" gives "base#Frag".
    3. Anything else is concatenated to the base without path normalization.

    Empty input is returned unchanged.

    Example:
        >>> resolve_iri("#Person", "http://ex.org/onto#")
        'http://ex.org/onto#Person'
    """
    if not iri:
        return iri

    if iri.startswith(ABSOLUTE_SCHEMES):
        return iri

    if iri.startswith("#"):
        base = base_iri[:-1] if base_iri.endswith("#") else base_iri
        return base + iri

    return base_iri + iri


def local_name(iri: str, default: Optional[str] = None) -> str:
    """
    Extract a display name from an IRI.

    Returns the text after the last "#" when non-empty, else the segment
    after the last "/" when non-empty, else ``default`` (or the raw IRI).
    """
    for separator in ("#", "/"):
        if separator in iri:
            tail = iri.rsplit(separator, 1)[1]
            if tail:
                return tail
    return iri if default is None else default


def split_iri(iri: str) -> tuple:
    """Split an IRI into (namespace, local part) at the last "#" or "/"."""
    index = max(iri.rfind("#"), iri.rfind("/"))
    if index < 0:
        return "", iri
    return iri[:index + 1], iri[index + 1:]


def base_iri_for(ontology_id: str) -> str:
    """Compute the xml:base written for an ontology IRI."""
    if ontology_id.endswith("#") or ontology_id.endswith("/"):
        return ontology_id
    if "#" in ontology_id:
        return ontology_id[:ontology_id.rfind("#") + 1]
    return ontology_id + "#"
