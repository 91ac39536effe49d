"""Tests for IRI resolution and naming helpers."""

import pytest

from ontology_interchange.core.iri import base_iri_for, local_name, resolve_iri, split_iri


@pytest.mark.unit
class TestResolveIri:

    def test_absolute_iri_unchanged(self):
        assert resolve_iri("http://other.org#X", "http://ex.org/onto#") == "http://other.org#X"
        assert resolve_iri("https://other.org/X", "http://ex.org/") == "https://other.org/X"

    def test_fragment_against_hash_terminated_base(self):
        assert resolve_iri("#Person", "http://ex.org/onto#") == "http://ex.org/onto#Person"

    def test_fragment_against_plain_base(self):
        assert resolve_iri("#Person", "http://ex.org/onto") == "http://ex.org/onto#Person"

    def test_relative_is_concatenated(self):
        assert resolve_iri("Person", "http://ex.org/onto/") == "http://ex.org/onto/Person"

    def test_empty_input_returned(self):
        assert resolve_iri("", "http://ex.org#") == ""


@pytest.mark.unit
class TestLocalName:

    @pytest.mark.parametrize("iri, expected", [
        ("http://ex.org/onto#Person", "Person"),
        ("http://ex.org/onto/Person", "Person"),
        ("#Cow", "Cow"),
        ("urn:thing", "urn:thing"),
    ])
    def test_local_name(self, iri, expected):
        assert local_name(iri) == expected

    def test_empty_fragment_falls_back_to_path_segment(self):
        assert local_name("http://ex.org/onto#") == "onto#"

    def test_default_when_nothing_usable(self):
        assert local_name("http://ex.org/", "Fallback") == "Fallback"
        assert local_name("http://ex.org/") == "http://ex.org/"


@pytest.mark.unit
class TestBaseAndSplit:

    @pytest.mark.parametrize("ontology_id, expected", [
        ("http://ex.org/onto", "http://ex.org/onto#"),
        ("http://ex.org/onto#", "http://ex.org/onto#"),
        ("http://ex.org/onto/", "http://ex.org/onto/"),
        ("http://ex.org/onto#v1", "http://ex.org/onto#"),
    ])
    def test_base_iri_for(self, ontology_id, expected):
        assert base_iri_for(ontology_id) == expected

    def test_split_iri(self):
        assert split_iri("http://ex.org/onto#age") == ("http://ex.org/onto#", "age")
        assert split_iri("http://ex.org/age") == ("http://ex.org/", "age")
        assert split_iri("age") == ("", "age")
