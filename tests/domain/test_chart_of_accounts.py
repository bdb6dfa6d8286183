"""Tests for chart-of-accounts rules."""

import pytest

from src.domain.models import AccountKind
from src.domain.services.chart_of_accounts import (
    belongs_to,
    budget_account_prefix,
    infer_kind,
    location_category_prefix,
    matches_prefix,
    synthetic_number,
)


@pytest.mark.parametrize(
    ("number", "expected"),
    [
        ("701", "701"),
        ("701-2", "701-2"),
        ("701-2-2", "701-2-2"),
        ("110-3-1-1", "110-3-1"),
        ("401-1-3-7-9", "401-1-3"),
    ],
)
def test_synthetic_number_keeps_at_most_three_segments(number, expected):
    """Numbers longer than three segments are truncated."""
    assert synthetic_number(number) == expected


@pytest.mark.parametrize(
    "number",
    ["1", "100", "401-1", "110-3-1-1", "2-2-2-2-2-2", ""],
)
def test_synthetic_number_is_idempotent(number):
    """Applying the rollup twice gives the same key."""
    once = synthetic_number(number)
    assert synthetic_number(once) == once


def test_matches_prefix_compares_strings_not_ranges():
    """Prefixes denote the start of the number."""
    assert matches_prefix("2029", ["202"])
    assert matches_prefix("202-1", ["100", "202"])
    assert not matches_prefix("20", ["202"])
    assert not matches_prefix("701", [])


def test_belongs_to_requires_segment_boundary():
    """Catalogue prefixes match the account itself or its sub-accounts."""
    assert belongs_to("401", "401")
    assert belongs_to("401-1-3", "401")
    assert not belongs_to("4011", "401")
    assert not belongs_to("40", "401")


def test_location_category_prefix_uses_leading_segment():
    assert location_category_prefix("2-15") == "2"
    assert location_category_prefix(" 3 ") == "3"


def test_infer_kind_from_first_digit():
    """Kinds follow the leading digit of the number."""
    assert infer_kind("100-1") is AccountKind.ASSET
    assert infer_kind("215") is AccountKind.LIABILITY
    assert infer_kind("401-2") is AccountKind.EXPENSE
    assert infer_kind("701") is AccountKind.INCOME
    assert infer_kind("900") is AccountKind.OTHER
    assert infer_kind("") is AccountKind.OTHER


def test_budget_account_prefix_appends_location_identifier():
    assert budget_account_prefix("401", "1-3") == "401-1-3"
    assert budget_account_prefix("401", None) == "401"
