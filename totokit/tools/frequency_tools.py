"""
Frequency-ranked tools.

Each tool counts main numbers across the window (additional numbers are
ignored), keeps numbers that appeared at least once and returns up to 10 of
them in rank order. An empty window gives an empty pick.
"""
from totokit.frequency import (
    ensure_unique_numbers,
    get_number_frequencies,
    get_sorted_numbers_by_frequency,
)

MAX_PICK = 10
SMALL_ZONE = range(1, 25)
LARGE_ZONE = range(25, 50)


def _ranked_appearing(results, order, keep=None):
    frequencies = get_number_frequencies(results, include_additional=False)
    ranked = get_sorted_numbers_by_frequency(frequencies, order)
    return [n for n in ranked if frequencies[n] > 0 and (keep is None or keep(n))]


def algo_hot_numbers(results):
    """Most frequent main numbers, highest count first."""
    if not results:
        return []
    return ensure_unique_numbers(_ranked_appearing(results, "desc"), 1, MAX_PICK)


def algo_cold_numbers(results):
    """Least frequent main numbers among those that appeared at all."""
    if not results:
        return []
    return ensure_unique_numbers(_ranked_appearing(results, "asc"), 1, MAX_PICK)


def algo_frequent_even(results):
    if not results:
        return []
    evens = _ranked_appearing(results, "desc", keep=lambda n: n % 2 == 0)
    return ensure_unique_numbers(evens, 1, MAX_PICK)


def algo_frequent_odd(results):
    if not results:
        return []
    odds = _ranked_appearing(results, "desc", keep=lambda n: n % 2 == 1)
    return ensure_unique_numbers(odds, 1, MAX_PICK)


def algo_frequent_small_zone(results):
    """Most frequent numbers from 1-24."""
    if not results:
        return []
    small = _ranked_appearing(results, "desc", keep=lambda n: n in SMALL_ZONE)
    return ensure_unique_numbers(small, 1, MAX_PICK)


def algo_frequent_large_zone(results):
    """Most frequent numbers from 25-49."""
    if not results:
        return []
    large = _ranked_appearing(results, "desc", keep=lambda n: n in LARGE_ZONE)
    return ensure_unique_numbers(large, 1, MAX_PICK)
