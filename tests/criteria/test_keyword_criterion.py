"""Tests for KeywordCriterion parsing and fragments."""

from __future__ import annotations

import pytest

from piece_filters.config import PieceFields, PieceFilterConfig
from piece_filters.criteria import KeywordCriterion
from piece_filters.fragments import NEUTRAL, AttributeFragment, icontains, is_in


@pytest.mark.parametrize("raw", [None, "", "   ", 42, ["president"]])
def test_blank_or_absent_is_neutral_without_lookup(stub_resolver, raw):
    criterion = KeywordCriterion(raw, term_resolver=stub_resolver)
    assert criterion.fragment() is NEUTRAL
    assert stub_resolver.calls == []


def test_exact_tag_uses_exact_lookup(stub_resolver):
    criterion = KeywordCriterion("tag:'Music Ceremony'", term_resolver=stub_resolver)
    fragment = criterion.fragment()

    assert stub_resolver.calls == [("exact", "Music Ceremony")]
    assert fragment == is_in("term_ids", ["t-1"])
    assert isinstance(fragment, AttributeFragment)
    assert "headline" not in fragment.canonical_key()


def test_free_keyword_is_terms_or_headline(stub_resolver):
    fragment = KeywordCriterion("president", term_resolver=stub_resolver).fragment()

    assert stub_resolver.calls == [("fuzzy", "president")]
    assert fragment == is_in("term_ids", ["A", "B"]) | icontains("headline", "president")


def test_exact_tag_with_in_memory_resolver(resolver):
    fragment = KeywordCriterion("tag:'music ceremony'", term_resolver=resolver).fragment()
    assert fragment == is_in("term_ids", ["t-1"])


def test_free_keyword_with_in_memory_resolver(resolver):
    fragment = KeywordCriterion("president", term_resolver=resolver).fragment()
    assert fragment == is_in("term_ids", ["t-2", "t-3"]) | icontains(
        "headline", "president"
    )


@pytest.mark.parametrize(
    "raw",
    [
        "tag:'Music Ceremony",
        "tag:'Music Ceremony' extra",
        " tag:'Music Ceremony'",
        "tag:Music Ceremony",
        "TAG:'Music Ceremony'",
    ],
)
def test_malformed_tag_falls_through_to_free_keyword(stub_resolver, raw):
    fragment = KeywordCriterion(raw, term_resolver=stub_resolver).fragment()
    assert stub_resolver.calls == [("fuzzy", raw)]
    assert fragment == is_in("term_ids", ["A", "B"]) | icontains("headline", raw)


def test_embedded_quote_stays_in_payload(stub_resolver):
    KeywordCriterion("tag:'it's'", term_resolver=stub_resolver).fragment()
    assert stub_resolver.calls == [("exact", "it's")]


def test_empty_tag_payload_is_an_exact_lookup(stub_resolver):
    KeywordCriterion("tag:''", term_resolver=stub_resolver).fragment()
    assert stub_resolver.calls == [("exact", "")]


def test_no_matching_terms_keeps_membership_clause(resolver):
    fragment = KeywordCriterion("tag:'Unknown'", term_resolver=resolver).fragment()
    assert fragment == is_in("term_ids", [])


def test_lookup_happens_on_each_fragment_call(stub_resolver):
    criterion = KeywordCriterion("president", term_resolver=stub_resolver)
    criterion.fragment()
    criterion.fragment()
    assert stub_resolver.calls == [("fuzzy", "president"), ("fuzzy", "president")]


def test_configured_fields(stub_resolver):
    config = PieceFilterConfig(fields=PieceFields(term_ids="tags", headline="title"))
    fragment = KeywordCriterion(
        "president", term_resolver=stub_resolver, config=config
    ).fragment()
    assert fragment == is_in("tags", ["A", "B"]) | icontains("title", "president")


def test_resolver_errors_propagate():
    class Boom(Exception):
        pass

    class Broken:
        def match_fuzzy(self, text):
            raise Boom(text)

        def match_exact(self, text):
            raise Boom(text)

    with pytest.raises(Boom):
        KeywordCriterion("president", term_resolver=Broken()).fragment()
