"""
Turtle codec for the restricted subset emitted by common ontology tools.

Usage:
    from ontology_interchange.formats.turtle import parse_turtle, serialize_turtle
"""

from .parser import ReaderState, TurtleParser, TurtleStatementReader, parse_turtle
from .serializer import TurtleSerializer, serialize_turtle

__all__ = [
    "ReaderState",
    "TurtleParser",
    "TurtleSerializer",
    "TurtleStatementReader",
    "parse_turtle",
    "serialize_turtle",
]
