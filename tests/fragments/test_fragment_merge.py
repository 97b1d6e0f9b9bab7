"""Tests for fragment construction, equality and merge semantics."""

from __future__ import annotations

import pytest

from piece_filters.exceptions import FragmentError
from piece_filters.fragments import (
    NEUTRAL,
    AndFragment,
    AttributeFragment,
    FragmentOperator,
    OrFragment,
    eq,
    icontains,
    is_in,
    merge_all,
)


@pytest.fixture
def published():
    return eq("published", True)


@pytest.fixture
def video():
    return eq("piece_type", "video")


@pytest.fixture
def keyword():
    return is_in("term_ids", ["A", "B"]) | icontains("headline", "president")


# -- neutral -----------------------------------------------------------------


def test_neutral_serialises_to_empty_dict():
    assert NEUTRAL.to_dict() == {}
    assert NEUTRAL.is_neutral is True


def test_merge_with_neutral_is_identity(published, keyword):
    assert published.merge(NEUTRAL) == published
    assert NEUTRAL.merge(published) == published
    assert keyword.merge(NEUTRAL) == keyword
    assert NEUTRAL.merge(NEUTRAL) is NEUTRAL


def test_or_with_neutral_matches_everything(published):
    assert (published | NEUTRAL) is NEUTRAL
    assert (NEUTRAL | published) is NEUTRAL


# -- merge -------------------------------------------------------------------


def test_merge_creates_and(published, video):
    merged = published.merge(video)
    assert isinstance(merged, AndFragment)
    assert merged.fragments == frozenset({published, video})


def test_merge_operator_alias(published, video):
    assert (published & video) == published.merge(video)


def test_merge_is_commutative(published, keyword):
    left = published.merge(keyword)
    right = keyword.merge(published)
    assert left == right
    assert left.to_dict() == right.to_dict()


def test_merge_is_associative(published, video, keyword):
    a = published.merge(video).merge(keyword)
    b = published.merge(video.merge(keyword))
    assert a == b
    assert a.to_dict() == b.to_dict()
    assert len(a.clauses()) == 3


def test_merge_is_idempotent(published, video):
    merged = published.merge(video)
    assert merged.merge(published) == merged
    assert published.merge(published) == published


def test_merge_all_folds_from_neutral(published, video):
    assert merge_all([]) is NEUTRAL
    assert merge_all([NEUTRAL, NEUTRAL]) is NEUTRAL
    assert merge_all([NEUTRAL, published]) == published
    assert merge_all([video, NEUTRAL, published]) == merge_all([published, video])


def test_and_flattens_nested_conjunctions(published, video):
    nested = AndFragment(AndFragment(published, NEUTRAL), video)
    assert nested.fragments == frozenset({published, video})


# -- equality and serialisation ----------------------------------------------


def test_or_equality_ignores_operand_order():
    a = OrFragment(eq("x", 1), eq("y", 2))
    b = OrFragment(eq("y", 2), eq("x", 1))
    assert a == b
    assert hash(a) == hash(b)


def test_composite_to_dict_is_canonical(keyword):
    assert keyword.to_dict() == {
        "op": "or",
        "conditions": [
            {"op": "icontains", "attr": "headline", "val": "president"},
            {"op": "in", "attr": "term_ids", "val": ["A", "B"]},
        ],
    }


def test_leaf_equality_is_structural():
    assert eq("published", True) == eq("published", True)
    assert eq("published", True) != eq("published", False)
    assert eq("published", True) != "published"


def test_in_values_are_deduplicated_in_order():
    fragment = is_in("term_ids", ["B", "A", "B"])
    assert fragment.val == ("B", "A")
    assert fragment.to_dict()["val"] == ["B", "A"]


def test_in_accepts_single_value_and_none():
    assert is_in("term_ids", "A").val == ("A",)
    assert AttributeFragment("term_ids", FragmentOperator.IN, None).val == ()


def test_operator_accepts_string_value():
    fragment = AttributeFragment("headline", "icontains", "rain")
    assert fragment.op is FragmentOperator.ICONTAINS


# -- errors ------------------------------------------------------------------


def test_unknown_operator_raises():
    with pytest.raises(FragmentError, match="Unknown fragment operator"):
        AttributeFragment("headline", "contians", "rain")


def test_logical_operator_is_not_a_leaf():
    with pytest.raises(FragmentError):
        AttributeFragment("headline", FragmentOperator.AND, "rain")


def test_empty_attribute_raises():
    with pytest.raises(FragmentError):
        eq("", True)


def test_error_to_dict():
    err = FragmentError("boom")
    assert err.to_dict() == {"error": "FragmentError", "message": "boom"}
