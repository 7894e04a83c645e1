"""Greedy selection of episodes for a series marathon."""

from __future__ import annotations

import warnings
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, List, Union

from .models import Episode, Serie
from .sorting import sort_items
from .tapas import INVALID_CRITERION_MESSAGE, Strategy


@dataclass
class MarathonResult:
    """Series with the number of episodes chosen, minutes used, score and genre tallies."""

    series: List[Serie] = field(default_factory=list)
    time_used: int = 0
    score: int = 0
    genres: List[str] = field(default_factory=list)


def by_rating(a: Serie, b: Serie) -> bool:
    """Higher rating first."""
    return a.rating > b.rating


def by_duration(a: Serie, b: Serie) -> bool:
    """Shorter episodes first."""
    return a.episode_duration < b.episode_duration


def by_ratio(a: Serie, b: Serie) -> bool:
    """Higher rating per minute first."""
    return a.ratio > b.ratio


_COMPARATORS: dict[Strategy, Callable[[Serie, Serie], bool]] = {
    Strategy.RATING: by_rating,
    Strategy.TOTAL_TIME: by_duration,
    Strategy.RATIO: by_ratio,
}


def _comparator(criterion: Union[int, Strategy]) -> Callable[[Serie, Serie], bool]:
    try:
        return _COMPARATORS[Strategy(criterion)]
    except ValueError:
        warnings.warn(INVALID_CRITERION_MESSAGE, stacklevel=3)
        return by_rating


def _episodes(series: Iterable[Serie]) -> Iterator[Episode]:
    for serie in series:
        for number in range(1, serie.pending_episodes + 1):
            yield Episode(
                serie.name, number, serie.episode_duration, serie.ratio, serie.rating
            )


def group_by_series(episodes: Iterable[Episode], series: Iterable[Serie]) -> List[Serie]:
    """Count the episodes of each series, in the order of ``series``.

    Series with no episodes are left out. Episodes are consumed by the first
    series with a matching name.
    """
    counts = Counter(episode.series for episode in episodes)
    grouped = []
    for serie in series:
        count = counts.pop(serie.name, 0)
        if count > 0:
            grouped.append(
                Serie(serie.name, serie.rating, count, serie.episode_duration, serie.genre)
            )
    return grouped


def genre_counts(grouped: Iterable[Serie]) -> List[str]:
    """Return "genre: episodes" lines, sorted by genre."""
    totals: Counter[str] = Counter()
    for serie in grouped:
        totals[serie.genre] += serie.pending_episodes
    return [f"{genre}: {count}" for genre, count in sorted(totals.items())]


def marathon(
    series: List[Serie], available_time: int, criterion: Union[int, Strategy]
) -> MarathonResult:
    """Pick episodes greedily in strategy order while they fit in the time left.

    ``series`` is sorted in place by the chosen strategy.
    """
    sort_items(series, _comparator(criterion))

    remaining = available_time
    score = 0
    selected: List[Episode] = []
    for episode in _episodes(series):
        if remaining >= episode.duration:
            selected.append(episode)
            remaining -= episode.duration
            score += episode.rating

    grouped = group_by_series(selected, series)
    return MarathonResult(grouped, available_time - remaining, score, genre_counts(grouped))