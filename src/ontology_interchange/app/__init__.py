"""
Application layer: the ontology-interchange command-line interface.
"""
