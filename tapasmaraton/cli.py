"""Interactive menus for the tapas route and the series marathon problems."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Sequence, TextIO

from .models import Bar, Serie
from .series import MarathonResult, marathon
from .tapas import RouteResult, Strategy, sort_bars, tapas_route

INT_MAX = 2**31 - 1
SEPARATOR = "\n-----------------\n"


def _out(stream_out: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream_out is None else stream_out


def _in(stream_in: Optional[TextIO]) -> TextIO:
    return sys.stdin if stream_in is None else stream_in


def _is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _clear(stream_out: TextIO) -> None:
    if _is_tty(stream_out):
        stream_out.write("\033[2J\033[H")
        stream_out.flush()


def _pause(stream_in: TextIO, stream_out: TextIO) -> None:
    if _is_tty(stream_in):
        stream_out.write("Presione Intro para continuar . . .")
        stream_out.flush()
        stream_in.readline()


def read_choice(
    low: int,
    high: int,
    stream_in: Optional[TextIO] = None,
    stream_out: Optional[TextIO] = None,
) -> int:
    """Prompt until a whole number between ``low`` and ``high`` is entered.

    Lines that are not numbers are ignored. Raises EOFError when the input ends.
    """
    stream_in, stream_out = _in(stream_in), _out(stream_out)
    while True:
        stream_out.write("Elección: ")
        stream_out.flush()
        line = stream_in.readline()
        if not line:
            raise EOFError("no more input")
        try:
            value = int(line.strip())
        except ValueError:
            continue
        if low <= value <= high:
            return value


def _numbered(items: Iterable[object]) -> str:
    return "".join(f"{number}. {item}\n" for number, item in enumerate(items, start=1))


def format_bars(bars: Iterable[Bar]) -> str:
    """One numbered line per bar."""
    return _numbered(bars)


def format_series(series: Iterable[Serie]) -> str:
    """One numbered line per series."""
    return _numbered(series)


def default_bars() -> List[Bar]:
    """The bars of the sample tapas route."""
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


def default_series() -> List[Serie]:
    """The series of the sample marathon."""
    return [
        Serie("Stranger Things", 3, 50, 8, "ciencia-ficcion"),
        Serie("Breaking Bad", 2, 45, 9, "drama"),
        Serie("The Office", 5, 22, 7, "comedia"),
        Serie("Game of Thrones", 2, 60, 9, "fantasía"),
        Serie("Brooklyn Nine-Nine", 4, 22, 6, "comedia"),
        Serie("The Mandalorian", 2, 40, 8, "ciencia-ficcion"),
        Serie("Peaky Blinders", 3, 55, 7, "drama"),
        Serie("The Witcher", 2, 60, 7, "fantasía"),
        Serie("Money Heist", 3, 45, 8, "acción"),
        Serie("The Boys", 2, 55, 8, "acción"),
    ]


def _ask_time(stream_in: TextIO, stream_out: TextIO) -> int:
    stream_out.write("Introduzca el tiempo disponible (en minutos): ")
    return read_choice(0, INT_MAX, stream_in, stream_out)


# ------------------------------- Tapas route -------------------------------

_TAPAS_MENU = (
    "Problema de la ruta de tapas\n"
    "---------------------------------------\n"
    "Elija una opción:\n"
    "1. Estrategia 1: por valoración\n"
    "2. Estrategia 2: tiempo total\n"
    "3. Estrategia 3: por ratio\n"
    "4. Comparar las 3 estrategias\n"
    "5. Probar ordenar por valoración\n"
    "6. Probar ordenar por tiempo total\n"
    "7. Probar ordenar por ratio\n"
    "8. Volver al menú principal\n"
    "0. Salir\n"
)

_ROUTE_TITLES = {
    Strategy.RATING: "Probando RUTATAPAS por valoración...",
    Strategy.TOTAL_TIME: "Probando RUTATAPAS por tiempo total...",
    Strategy.RATIO: "Probando RUTATAPAS por Ratio (valoración/tiempo total)...",
}

_SORT_TEXTS = {
    Strategy.RATING: (
        "Probando ordenar por valoración...",
        "Bares ordenados por valoración (descendente):",
    ),
    Strategy.TOTAL_TIME: (
        "Probando ordenar por tiempo total...",
        "Bares ordenados por tiempo total (ascendente):",
    ),
    Strategy.RATIO: (
        "Probando ordenar por Ratio...",
        "Bares ordenados por ratio (descendente):",
    ),
}

_COMPARE_LABELS = (
    (Strategy.RATING, "Por Valoración:"),
    (Strategy.TOTAL_TIME, "Por Tiempo total:"),
    (Strategy.RATIO, "Por Ratio:"),
)


def _single_route(
    bars: List[Bar], strategy: Strategy, stream_in: TextIO, stream_out: TextIO
) -> None:
    _clear(stream_out)
    stream_out.write(_ROUTE_TITLES[strategy] + "\n")
    time = _ask_time(stream_in, stream_out)
    stream_out.write("\n" + SEPARATOR + "Bares originales:\n" + format_bars(bars))
    stream_out.write("\n" + SEPARATOR + f"Con {time} minutos disponibles:\n")
    result = tapas_route(bars, time, strategy)
    stream_out.write(f"Tiempo total consumido: {result.time_used} minutos\n")
    stream_out.write(f"Puntuación total: {result.score}\n")
    stream_out.write(format_bars(result.bars))


def _write_route_summary(result: RouteResult, stream_out: TextIO) -> None:
    stream_out.write(f"Tiempo total consumido: {result.time_used} minutos\n")
    stream_out.write(f"Puntuación total: {result.score}\n\n")
    stream_out.write("Bares seleccionados:\n")
    stream_out.write(format_bars(result.bars))


def _compare_routes(bars: List[Bar], stream_in: TextIO, stream_out: TextIO) -> None:
    _clear(stream_out)
    stream_out.write("Probando RUTATAPAS con todas las estrategias...\n")
    time = _ask_time(stream_in, stream_out)
    stream_out.write(SEPARATOR + "Bares originales:\n" + format_bars(bars))
    stream_out.write(SEPARATOR + f"Con {time} minutos disponibles:\n")
    for strategy, label in _COMPARE_LABELS:
        stream_out.write(SEPARATOR + label + "\n")
        _write_route_summary(tapas_route(bars, time, strategy), stream_out)


def _sort_demo(bars: List[Bar], strategy: Strategy, stream_out: TextIO) -> None:
    title, heading = _SORT_TEXTS[strategy]
    stream_out.write("\n\n" + title + "\n")
    stream_out.write(SEPARATOR + "Orden Bares originales:\n" + format_bars(bars))
    ordered = list(bars)
    sort_bars(ordered, strategy)
    stream_out.write("\n" + heading + "\n" + format_bars(ordered))


def tapas_problem(
    stream_in: Optional[TextIO] = None, stream_out: Optional[TextIO] = None
) -> bool:
    """Run the tapas menu. Return True to leave the program, False to go back."""
    stream_in, stream_out = _in(stream_in), _out(stream_out)
    bars = default_bars()
    while True:
        _clear(stream_out)
        stream_out.write(_TAPAS_MENU)
        choice = read_choice(0, 8, stream_in, stream_out)
        if choice in (1, 2, 3):
            _single_route(bars, Strategy(choice), stream_in, stream_out)
        elif choice == 4:
            _compare_routes(bars, stream_in, stream_out)
        elif choice in (5, 6, 7):
            _sort_demo(bars, Strategy(choice - 4), stream_out)
        elif choice == 8:
            stream_out.write("Volviendo al menú principal...\n")
            _pause(stream_in, stream_out)
            return False
        else:
            stream_out.write("Saliendo del programa...\n")
            _pause(stream_in, stream_out)
            return True
        _pause(stream_in, stream_out)


# ----------------------------- Series marathon -----------------------------

_MARATHON_MENU = (
    "Problema Maratón de Series\n"
    "---------------------------------------\n"
    "Elija una opción:\n"
    "1. Estrategia 1: por valoración\n"
    "2. Estrategia 2: por duración\n"
    "3. Estrategia 3: por ratio\n"
    "4. Comparar las 3 estrategias\n"
    "5. Volver al menú principal\n"
    "0. Salir\n"
)

# Option 3 is labelled as ratio but runs the rating strategy.
_MARATHON_RUNS = {
    1: ("Probando Maratón de Series por valoración...", Strategy.RATING),
    2: ("Probando Maratón de Series por duracion...", Strategy.TOTAL_TIME),
    3: ("Probando Maratón de Series por Ratio(valoracion/duracion)...", Strategy.RATING),
}

_MARATHON_COMPARE = (
    (Strategy.RATING, "Por Valoración:"),
    (Strategy.TOTAL_TIME, "Por tiempo total:"),
    (Strategy.RATIO, "Por Ratio:"),
)


def _write_genres(genres: Sequence[str], stream_out: TextIO) -> None:
    stream_out.write("\nCategorías\n****\n")
    stream_out.write("".join(f"{genre}\n" for genre in genres))


def _single_marathon(
    series: List[Serie], choice: int, stream_in: TextIO, stream_out: TextIO
) -> None:
    title, strategy = _MARATHON_RUNS[choice]
    working = list(series)
    _clear(stream_out)
    stream_out.write(title + "\n")
    time = _ask_time(stream_in, stream_out)
    stream_out.write("\n" + SEPARATOR + "(vector) Series originales:\n")
    stream_out.write(format_series(series))
    stream_out.write("\n" + SEPARATOR + f"Con {time} minutos disponibles:\n")
    result = marathon(working, time, strategy)
    stream_out.write(f"Tiempo total consumido: {result.time_used} minutos\n")
    stream_out.write(f"Puntuación total: {result.score}\n")
    stream_out.write("Capítulos seleccionados: \n")
    stream_out.write(format_series(result.series))
    _write_genres(result.genres, stream_out)


def _write_marathon_summary(result: MarathonResult, stream_out: TextIO) -> None:
    stream_out.write(f"Tiempo total consumido: {result.time_used} minutos\n")
    stream_out.write(f"Puntuación total: {result.score}\n\n")
    stream_out.write("Capítulos seleccionados: \n")
    stream_out.write("".join(f"{serie}\n" for serie in result.series))
    _write_genres(result.genres, stream_out)


def _compare_marathons(
    series: List[Serie], stream_in: TextIO, stream_out: TextIO
) -> None:
    _clear(stream_out)
    stream_out.write("Probando Maratón de Series con todas las estrategias...\n")
    time = _ask_time(stream_in, stream_out)
    stream_out.write(SEPARATOR + f"Con {time} minutos disponibles:\n")
    for strategy, label in _MARATHON_COMPARE:
        stream_out.write(SEPARATOR + label + "\n")
        # The shared list is reordered by each run.
        _write_marathon_summary(marathon(series, time, strategy), stream_out)


def marathon_problem(
    stream_in: Optional[TextIO] = None, stream_out: Optional[TextIO] = None
) -> bool:
    """Run the marathon menu. Always returns True, which ends the program."""
    stream_in, stream_out = _in(stream_in), _out(stream_out)
    series = default_series()
    while True:
        _clear(stream_out)
        stream_out.write(_MARATHON_MENU)
        choice = read_choice(0, 4, stream_in, stream_out)
        if choice in _MARATHON_RUNS:
            _single_marathon(series, choice, stream_in, stream_out)
        elif choice == 4:
            _compare_marathons(series, stream_in, stream_out)
        else:
            stream_out.write("Saliendo del programa...\n")
            _pause(stream_in, stream_out)
            return True
        _pause(stream_in, stream_out)


# --------------------------------- Main menu --------------------------------

_MAIN_MENU = (
    "Practica 5: Algoritmos de ordenacion y seleccion\n"
    "1. Ruta de tapas\n"
    "2. Maratón de Series\n"
    "0. Salir\n"
)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the main menu on standard input and output."""
    stream_in, stream_out = sys.stdin, sys.stdout
    leave = False
    while not leave:
        _clear(stream_out)
        stream_out.write(_MAIN_MENU)
        choice = read_choice(0, 2, stream_in, stream_out)
        if choice == 1:
            leave = tapas_problem(stream_in, stream_out)
        elif choice == 2:
            leave = marathon_problem(stream_in, stream_out)
        else:
            leave = True
        _pause(stream_in, stream_out)
    return 0


if __name__ == "__main__":
    sys.exit(main())