"""Greedy selection of tapas bars and series episodes within a time budget, with an interactive menu."""

__version__ = "0.1.0"
__all__ = ["models", "sorting", "tapas", "series", "cli"]