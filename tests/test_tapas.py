import pytest

from tapasmaraton.models import Bar
from tapasmaraton.tapas import (
    RouteResult,
    Strategy,
    by_ratio,
    by_rating,
    by_total_time,
    sort_bars,
    tapas_route,
)


@pytest.fixture
def bars():
    return [
        Bar("El Rincon del choco", 9, 30, 10),
        Bar("Bar la esquina", 6, 15, 5),
        Bar("Tapas y cañas", 4, 15, 5),
        Bar("Casa Manolo", 8, 25, 5),
        Bar("La Bodeguita", 7, 20, 7),
        Bar("El Mirador", 10, 30, 12),
        Bar("Mesón del Puerto", 5, 15, 5),
        Bar("La Taberna Asturiana", 8, 20, 10),
        Bar("El Rincón del Abuelo", 3, 25, 12),
        Bar("Tapería Central", 6, 20, 7),
    ]


@pytest.mark.parametrize(
    "strategy, number",
    [(Strategy.RATING, 1), (Strategy.TOTAL_TIME, 2), (Strategy.RATIO, 3)],
)
def test_strategy_values_match_menu_numbers(bars, strategy, number):
    by_enum = list(bars)
    by_number = list(bars)
    sort_bars(by_enum, strategy)
    sort_bars(by_number, number)
    assert [b.name for b in by_enum] == [b.name for b in by_number]
    assert tapas_route(bars, 150, strategy) == tapas_route(bars, 150, number)


def test_comparators():
    high = Bar("a", 9, 10, 10)
    low = Bar("b", 2, 5, 0)
    assert by_rating(high, low) is True
    assert by_rating(low, high) is False
    assert by_total_time(low, high) is True
    assert by_total_time(high, low) is False
    assert by_ratio(low, high) is True


def test_sort_by_rating_descending(bars):
    sort_bars(bars, 1)
    ratings = [b.rating for b in bars]
    assert ratings == sorted(ratings, reverse=True)
    assert bars[0].name == "El Mirador"


def test_sort_by_total_time_ascending(bars):
    sort_bars(bars, Strategy.TOTAL_TIME)
    times = [b.total_time for b in bars]
    assert times == sorted(times)


def test_sort_by_ratio_descending(bars):
    sort_bars(bars, 3)
    ratios = [b.ratio for b in bars]
    assert ratios == sorted(ratios, reverse=True)


def test_sort_keeps_all_bars(bars):
    before = sorted(b.name for b in bars)
    sort_bars(bars, 2)
    assert sorted(b.name for b in bars) == before


def test_invalid_criterion_falls_back_to_rating(bars):
    with pytest.warns(UserWarning, match="Criterio no válido"):
        sort_bars(bars, 7)
    ratings = [b.rating for b in bars]
    assert ratings == sorted(ratings, reverse=True)


def test_route_only_best_bar_fits(bars):
    result = tapas_route(bars, 60, 1)
    assert [b.name for b in result.bars] == ["El Mirador"]
    assert result.time_used == bars[5].total_time
    assert result.score == bars[5].rating


def test_route_zero_time_selects_nothing(bars):
    result = tapas_route(bars, 0, 1)
    assert result == RouteResult([], 0, 0)


def test_route_does_not_modify_input(bars):
    names = [b.name for b in bars]
    tapas_route(bars, 300, 3)
    assert [b.name for b in bars] == names


@pytest.mark.parametrize("criterion", [1, 2, 3])
@pytest.mark.parametrize("available", [0, 25, 100, 200, 1000])
def test_route_invariants(bars, criterion, available):
    result = tapas_route(bars, available, criterion)
    assert result.time_used <= available
    assert result.time_used == sum(b.total_time for b in result.bars)
    assert result.score == sum(b.rating for b in result.bars)


def test_route_with_enough_time_takes_everything(bars):
    total = sum(b.total_time for b in bars)
    result = tapas_route(bars, total, 2)
    assert len(result.bars) == len(bars)
    assert result.time_used == total


def test_route_skips_then_continues():
    big = Bar("big", 10, 50, 0)
    medium = Bar("medium", 8, 40, 0)
    small = Bar("small", 5, 10, 0)
    result = tapas_route([small, medium, big], 60, Strategy.RATING)
    assert [b.name for b in result.bars] == ["big", "small"]
    assert result.time_used == big.total_time + small.total_time


def test_route_total_time_strategy_prefers_short():
    big = Bar("big", 10, 50, 0)
    small = Bar("small", 5, 10, 0)
    tiny = Bar("tiny", 1, 5, 0)
    result = tapas_route([big, small, tiny], 20, 2)
    assert [b.name for b in result.bars] == ["tiny", "small"]