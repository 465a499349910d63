"""Tests for finance_tools.lib.budgets.allocation."""

from __future__ import annotations

import logging

import pytest

from finance_tools.lib.budgets import (
    DEFAULT_CATEGORY_WEIGHTS,
    allocate_budget,
    normalize_weights,
)


def test_allocates_saving_and_categories() -> None:
    result = allocate_budget(10_000_000, 0.2, {'A': 0.5, 'B': 0.5})
    assert result.saving == pytest.approx(2_000_000)
    assert result.spending == pytest.approx(8_000_000)
    assert result.by_category['A'] == pytest.approx(4_000_000)
    assert result.by_category['B'] == pytest.approx(4_000_000)


@pytest.mark.parametrize('income', [0, 1, 1234.56, 10_000_000])
@pytest.mark.parametrize('rate', [0.0, 0.15, 0.5, 1.0])
def test_saving_plus_spending_equals_income(income, rate) -> None:
    result = allocate_budget(income, rate)
    assert result.saving + result.spending == pytest.approx(income)
    assert sum(result.by_category.values()) == pytest.approx(result.spending)


def test_default_weights_used_when_none_given() -> None:
    result = allocate_budget(1000)
    assert set(result.by_category) == set(DEFAULT_CATEGORY_WEIGHTS)
    assert len(result.by_category) == 7
    assert result.saving == pytest.approx(200)
    assert result.by_category['Housing'] == pytest.approx(800 * 0.25)


def test_default_weights_sum_to_one_and_are_read_only() -> None:
    assert sum(DEFAULT_CATEGORY_WEIGHTS.values()) == pytest.approx(1.0)
    with pytest.raises(TypeError):
        DEFAULT_CATEGORY_WEIGHTS['Housing'] = 0.9  # type: ignore[index]


def test_custom_weights_are_normalized() -> None:
    result = allocate_budget(1000, 0, {'Rent': 3, 'Food': 1})
    assert dict(result.by_category) == {'Rent': pytest.approx(750), 'Food': pytest.approx(250)}


def test_zero_income_gives_zero_everywhere() -> None:
    result = allocate_budget(0, 0.2, {'A': 1, 'B': 2})
    assert result.saving == 0
    assert result.spending == 0
    assert all(value == 0 for value in result.by_category.values())


def test_negative_income_treated_as_zero() -> None:
    result = allocate_budget(-500)
    assert result.saving == 0
    assert result.spending == 0


def test_saving_rate_is_clipped() -> None:
    high = allocate_budget(1000, 1.5, {'A': 1})
    assert high.saving == pytest.approx(1000)
    assert high.spending == 0
    assert high.by_category['A'] == 0

    low = allocate_budget(1000, -0.3, {'A': 1})
    assert low.saving == 0
    assert low.spending == pytest.approx(1000)


def test_all_zero_weights_allocate_nothing(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger='finance_tools'):
        result = allocate_budget(1000, 0.2, {'A': 0, 'B': 0})
    assert dict(result.by_category) == {'A': 0.0, 'B': 0.0}
    assert result.spending == pytest.approx(800)
    assert 'sum to zero' in caplog.text


def test_negative_weight_counts_as_zero() -> None:
    result = allocate_budget(1000, 0, {'A': -1, 'B': 1})
    assert result.by_category['A'] == 0
    assert result.by_category['B'] == pytest.approx(1000)


def test_keys_match_input_and_result_is_read_only() -> None:
    weights = {'Food': 2, 'Travel': 1, 'Gifts': 0}
    result = allocate_budget(300, 0, weights)
    assert list(result.by_category) == ['Food', 'Travel', 'Gifts']
    assert weights == {'Food': 2, 'Travel': 1, 'Gifts': 0}
    with pytest.raises(TypeError):
        result.by_category['Food'] = 1  # type: ignore[index]


def test_normalize_weights_handles_empty_mapping() -> None:
    assert normalize_weights({}) == {}


def test_repeated_calls_are_identical() -> None:
    first = allocate_budget(987_654.321, 0.37, {'A': 0.3, 'B': 0.7})
    second = allocate_budget(987_654.321, 0.37, {'A': 0.3, 'B': 0.7})
    assert first == second
