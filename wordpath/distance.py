"""Distance metrics between equal-length words.

The graph builder takes the metric as a plain function, so strategies
are kept in a small registry and selected by name from configuration.
"""

from __future__ import annotations

from typing import Callable, Dict

from .domain.errors import ConfigurationError

DistanceMetric = Callable[[str, str], int]


def hamming_distance(a: str, b: str) -> int:
    """Number of positions at which ``a`` and ``b`` differ.

    Raises:
        ValueError: If the words have different lengths.
    """
    if len(a) != len(b):
        raise ValueError(
            f"Hamming distance needs equal lengths, got {len(a)} and {len(b)}"
        )
    return sum(1 for x, y in zip(a, b) if x != y)


def casefold_hamming_distance(a: str, b: str) -> int:
    """Hamming distance ignoring letter case.

    Letters are folded one position at a time, so folds that expand a
    character ("ß" to "ss") never change the word length. Words differing
    only in case are at distance 0 and are joined by a free edge.

    Raises:
        ValueError: If the words have different lengths.
    """
    if len(a) != len(b):
        raise ValueError(
            f"Hamming distance needs equal lengths, got {len(a)} and {len(b)}"
        )
    return sum(1 for x, y in zip(a, b) if x.casefold() != y.casefold())


DISTANCE_METRICS: Dict[str, DistanceMetric] = {
    "hamming": hamming_distance,
    "hamming_casefold": casefold_hamming_distance,
}


def get_distance_metric(name: str) -> DistanceMetric:
    """Look up a registered metric by name.

    Raises:
        ConfigurationError: If no metric is registered under ``name``.
    """
    try:
        return DISTANCE_METRICS[name]
    except KeyError as e:
        raise ConfigurationError(
            f"Unknown distance metric: {name!r} "
            f"(available: {', '.join(sorted(DISTANCE_METRICS))})",
            setting_name="distance_metric",
        ) from e
