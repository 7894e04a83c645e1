"""Greedy selection of bars for a tapas route."""

from __future__ import annotations

import enum
import warnings
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Union

from .models import Bar
from .sorting import sort_items

INVALID_CRITERION_MESSAGE = (
    "Criterio no válido. Se usará el criterio por defecto (mayor valoración)."
)


class Strategy(enum.IntEnum):
    """Ordering used before the greedy selection."""

    RATING = 1
    TOTAL_TIME = 2
    RATIO = 3


def _resolve(criterion: Union[int, Strategy]) -> Strategy:
    try:
        return Strategy(criterion)
    except ValueError:
        warnings.warn(INVALID_CRITERION_MESSAGE, stacklevel=3)
        return Strategy.RATING


@dataclass
class RouteResult:
    """Bars chosen for the route, the minutes they take and their summed rating."""

    bars: List[Bar] = field(default_factory=list)
    time_used: int = 0
    score: int = 0


def by_rating(a: Bar, b: Bar) -> bool:
    """Higher rating first."""
    return a.rating > b.rating


def by_total_time(a: Bar, b: Bar) -> bool:
    """Shorter total time first."""
    return a.total_time < b.total_time


def by_ratio(a: Bar, b: Bar) -> bool:
    """Higher rating per minute first."""
    return a.ratio > b.ratio


_COMPARATORS: dict[Strategy, Callable[[Bar, Bar], bool]] = {
    Strategy.RATING: by_rating,
    Strategy.TOTAL_TIME: by_total_time,
    Strategy.RATIO: by_ratio,
}


def sort_bars(bars: List[Bar], criterion: Union[int, Strategy]) -> None:
    """Sort ``bars`` in place by the given strategy.

    An unknown criterion issues a warning and falls back to rating order.
    """
    sort_items(bars, _COMPARATORS[_resolve(criterion)])


def tapas_route(
    bars: Iterable[Bar], available_time: int, criterion: Union[int, Strategy]
) -> RouteResult:
    """Pick bars greedily in strategy order while they fit in the time left.

    The input is not modified.
    """
    ordered = list(bars)
    sort_items(ordered, _COMPARATORS[_resolve(criterion)])

    remaining = available_time
    result = RouteResult()
    for bar in ordered:
        needed = bar.total_time
        if remaining >= needed:
            result.bars.append(bar)
            result.score += bar.rating
            remaining -= needed
    result.time_used = available_time - remaining
    return result