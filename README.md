# tapasmaraton

Greedy selection under a time budget, for two small planning problems:

- **Tapas route**: choose which bars to visit. Each bar (`Bar`) has a rating,
  clamped to 1–10, a time spent there, and a travel time that counts twice
  (there and back).
- **Series marathon**: choose which pending episodes to watch. Each series
  (`Serie`) has a rating, a number of pending episodes, an episode length and
  a genre.

Each problem has three strategies (`Strategy.RATING`, `Strategy.TOTAL_TIME`,
`Strategy.RATIO`): highest rating first, shortest time first, and best
rating-per-minute ratio first. Items are ordered with a merge sort
(`tapasmaraton.sorting.merge_sort`) driven by a "comes before" predicate. When
the predicate is false for two items, the item from the right half goes first.
Equal items can therefore change their relative order. The items are then
taken in that order while the remaining time allows it. A criterion that is
not 1, 2 or 3 issues a warning and falls back to rating order.

## Installation

```
pip install .
```

## Command line

```
tapasmaraton
```

This starts an interactive menu in Spanish on standard input and output. Each
problem uses a built-in data set. From the menu you can run one strategy,
compare all three, or, for the tapas route, show the bars in each sort order.
The screen is cleared and a pause is made only when the streams are a
terminal.

In the marathon menu:

- option 3 ("por ratio") runs the rating strategy;
- the "compare" option sorts the shared series list again for each strategy;
- only options 0–4 are accepted, so "5. Volver al menú principal" cannot be
  chosen;
- leaving the menu also ends the program.

## Library use

```python
from tapasmaraton.models import Bar, Serie
from tapasmaraton.tapas import Strategy, tapas_route
from tapasmaraton.series import marathon

bars = [Bar("Casa Manolo", 8, 25, 5), Bar("El Mirador", 10, 30, 12)]
route = tapas_route(bars, 60, Strategy.RATING)
print(route.bars, route.time_used, route.score)

shows = [Serie("The Office", 5, 22, 7, "comedia")]
result = marathon(shows, 120, Strategy.RATIO)
print(result.series, result.time_used, result.score, result.genres)
```

`tapas_route` leaves its input alone and returns a `RouteResult` with the
chosen bars, the time used and the summed rating. `sort_bars` sorts a list of
bars in place.

`marathon` sorts the list it is given in place. It returns a `MarathonResult`
holding:

- the chosen episodes, grouped as one `Serie` per series with the number of
  chosen episodes;
- the time used;
- the summed rating of all chosen episodes;
- one line per genre, sorted by genre, such as `"comedia: 5"`.

`group_by_series` and `genre_counts` build the last two and can be used on
their own.

## Limitations

The command line works only on its built-in bars and series. It does not read
data from files, and results are not saved.

## Running the tests

```
pip install .[test]
pytest
```