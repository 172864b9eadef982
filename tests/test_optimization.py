import pytest

from algolab.optimization import cut_rod, fractional_knapsack

ITEMS = [(10, 60), (20, 100), (30, 120)]
PRICES = [1, 5, 8, 9, 10, 17, 17, 20, 24, 30]
PRICES_ALT = [1, 5, 8, 9, 10, 17, 18, 20, 24, 30]


def test_knapsack_classic_value():
    result = fractional_knapsack(50, ITEMS)
    assert result.total_value == pytest.approx(240)


def test_knapsack_weight_taken_is_bounded():
    for capacity in (0, 5, 30, 50, 60, 100):
        result = fractional_knapsack(capacity, ITEMS)
        taken = sum(amount for _, amount in result.portions)
        assert taken == pytest.approx(min(capacity, sum(w for w, _ in ITEMS)))


def test_knapsack_value_matches_portions():
    result = fractional_knapsack(45, ITEMS)
    expected = sum(ITEMS[i][1] * amount / ITEMS[i][0] for i, amount in result.portions)
    assert result.total_value == pytest.approx(expected)


def test_knapsack_portions_in_ratio_order():
    result = fractional_knapsack(45, ITEMS)
    ratios = [ITEMS[i][1] / ITEMS[i][0] for i, _ in result.portions]
    assert ratios == sorted(ratios, reverse=True)
    assert all(amount == ITEMS[i][0] for i, amount in result.portions[:-1])


def test_knapsack_everything_fits():
    result = fractional_knapsack(1000, ITEMS)
    assert result.total_value == pytest.approx(sum(v for _, v in ITEMS))
    assert sorted(i for i, _ in result.portions) == [0, 1, 2]


def test_knapsack_zero_capacity():
    result = fractional_knapsack(0, ITEMS)
    assert result.total_value == 0
    assert result.portions == ()


def test_knapsack_rejects_bad_input():
    with pytest.raises(ValueError):
        fractional_knapsack(-1, ITEMS)
    with pytest.raises(ValueError):
        fractional_knapsack(10, [(0, 5)])


def test_rod_full_length_revenue():
    assert cut_rod(PRICES, 10).revenue[10] == 30


def test_rod_alternative_prices():
    assert cut_rod(PRICES_ALT, 10).revenue[7] == 18


def test_rod_cuts_sum_to_length_and_revenue():
    solution = cut_rod(PRICES, 10)
    for length in range(11):
        pieces = solution.cuts(length)
        assert sum(pieces) == length
        assert sum(PRICES[p - 1] for p in pieces) == solution.revenue[length]


def test_rod_revenue_is_superadditive():
    revenue = cut_rod(PRICES_ALT, 10).revenue
    for j in range(1, 11):
        assert revenue[j] >= PRICES_ALT[j - 1]
        for i in range(1, j):
            assert revenue[j] >= revenue[i] + revenue[j - i]


def test_rod_zero_length():
    solution = cut_rod(PRICES, 0)
    assert solution.revenue == (0,)
    assert solution.cuts(0) == []


def test_rod_tie_prefers_smallest_first_piece():
    assert cut_rod([2, 4], 2).cuts(2) == [1, 1]


def test_rod_errors():
    with pytest.raises(ValueError):
        cut_rod(PRICES, 11)
    with pytest.raises(ValueError):
        cut_rod(PRICES, -1)
    with pytest.raises(ValueError):
        cut_rod(PRICES, 4).cuts(5)