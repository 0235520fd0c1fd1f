"""
Shared helpers for the number-picking tools.

Frequency counting, frequency ordering, de-duplication and the seeded
sequence used when a window has too little history. Everything here is a
pure function of its arguments.
"""
from collections import Counter
from typing import Dict, Iterable, List, Sequence

from totokit.draws import ALL_NUMBERS, NUMBER_MAX, NUMBER_MIN, HistoricalResult


def get_number_frequencies(results: Sequence[HistoricalResult],
                           include_additional: bool = False) -> Dict[int, int]:
    """
    Count appearances of every number 1-49 across a window of draws.

    The map is total: numbers that never appeared have count 0.
    """
    counter = Counter()
    for result in results:
        counter.update(result.numbers)
        if include_additional and result.additional_number:
            counter[result.additional_number] += 1
    return {n: counter.get(n, 0) for n in ALL_NUMBERS}


def get_sorted_numbers_by_frequency(frequencies: Dict[int, int], order: str = "desc") -> List[int]:
    """
    All numbers ordered by frequency. Ties keep ascending numeric order.

    Zero-frequency numbers are kept; callers filter them.
    """
    if order not in ("asc", "desc"):
        raise ValueError(f"order must be 'asc' or 'desc', got {order!r}")
    numbers = sorted(frequencies)
    if order == "desc":
        return sorted(numbers, key=lambda n: -frequencies[n])
    return sorted(numbers, key=lambda n: frequencies[n])


def ensure_unique_numbers(numbers: Iterable[int], min_count: int = 1, max_count: int = 24) -> List[int]:
    """
    De-duplicate in first-occurrence order and cap at `max_count`.

    Out-of-range values are dropped. Nothing is padded up to `min_count`;
    tools that need a fixed size supply their own fallback.
    """
    unique = []
    seen = set()
    for n in numbers:
        n = int(n)
        if n in seen or not NUMBER_MIN <= n <= NUMBER_MAX:
            continue
        seen.add(n)
        unique.append(n)
    return unique[:max_count]


def get_deterministic_sequence(count: int, seed1: int, seed2: int) -> List[int]:
    """
    Seeded stand-in for a random pick: `count` distinct numbers, ascending.

    Starts at `seed1` and advances by `seed2 - 1` each step, wrapping past 49.
    A step landing on an already picked number probes forward to the next
    free one, so the result always has exactly `count` numbers.
    """
    count = max(0, min(int(count), NUMBER_MAX))
    step = seed2 or 7
    if step % NUMBER_MAX == 0:
        step = 1

    picked = []
    current = seed1
    while len(picked) < count:
        current = current + step - 1
        if current > NUMBER_MAX:
            current = current % NUMBER_MAX
            if current == 0:
                current = NUMBER_MAX
        if current < NUMBER_MIN:
            current = NUMBER_MIN
        while current in picked:
            current = current + 1 if current < NUMBER_MAX else NUMBER_MIN
        picked.append(current)
    return sorted(picked)
