"""Domain objects: tapas bars, TV series and single episodes."""

from __future__ import annotations

from dataclasses import dataclass

MIN_RATING = 1
MAX_RATING = 10


@dataclass
class Bar:
    """A bar on the tapas route.

    The rating is clamped to the range 1-10. Times are in minutes. The
    travel time is counted twice, for going there and coming back.
    """

    name: str
    rating: int
    consumption_time: int
    travel_time: int

    def __post_init__(self) -> None:
        self.rating = max(MIN_RATING, min(MAX_RATING, self.rating))

    @property
    def total_time(self) -> int:
        """Consumption time plus the round trip."""
        return self.consumption_time + 2 * self.travel_time

    @property
    def ratio(self) -> float:
        """Rating per minute of total time, or 0.0 when the total time is not positive."""
        total = self.total_time
        return self.rating / total if total > 0 else 0.0

    def __str__(self) -> str:
        return (
            f"{self.name} (Valoración: {self.rating}, "
            f"Tiempo total: {self.total_time} min, Ratio: {self.ratio:g})"
        )


@dataclass
class Serie:
    """A TV series with a number of episodes still to watch."""

    name: str
    rating: int
    pending_episodes: int
    episode_duration: int
    genre: str

    @property
    def ratio(self) -> float:
        """Rating per minute of one episode, or 0.0 when the duration is not positive."""
        if self.episode_duration > 0:
            return self.rating / self.episode_duration
        return 0.0

    def __str__(self) -> str:
        return (
            f"{self.name} (Valoración: {self.rating}, Genero: {self.genre}, "
            f"Episodios: {self.pending_episodes}, "
            f"Duración episodio: {self.episode_duration} min, Ratio: {self.ratio:g})"
        )


@dataclass(frozen=True)
class Episode:
    """One episode of a series, carrying the series' scoring data."""

    series: str
    number: int
    duration: int
    ratio: float
    rating: int