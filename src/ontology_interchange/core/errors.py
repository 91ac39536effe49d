"""
Exceptions raised by the interchange engine.
"""

from typing import Optional


class OntologyParseError(ValueError):
    """
    Raised when a document cannot be read as the requested format.

    Attributes:
        format: Format tag of the failing parse (e.g. "owlxml").
        detail: Diagnostic text from the underlying parser, if any.
    """

    def __init__(self, message: str, format: Optional[str] = None, detail: Optional[str] = None):
        super().__init__(message)
        self.format = format
        self.detail = detail


class UnsupportedFormatError(ValueError):
    """Raised for format tags that have no registered codec."""

    def __init__(self, value: str):
        super().__init__(f"Unsupported ontology format: {value!r}")
        self.value = value
