"""
Draw records for Singapore TOTO

A draw produces 6 main numbers and 1 additional number from 1-49.
Windows of draws are ordered most-recent-first (index 0 = latest draw).

Tabular schema shared with the CSV dataset:
    draw_number, date, num1-num6, additional_number
"""
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import pandas as pd


NUMBER_MIN = 1
NUMBER_MAX = 49
COMBINATION_LENGTH = 6
ALL_NUMBERS = list(range(NUMBER_MIN, NUMBER_MAX + 1))
NUM_COLS = [f"num{i}" for i in range(1, COMBINATION_LENGTH + 1)]
COLUMNS = ["draw_number", "date"] + NUM_COLS + ["additional_number"]


@dataclass(frozen=True)
class HistoricalResult:
    """One official draw. Never mutated once recorded."""

    draw_number: int
    date: str
    numbers: Tuple[int, ...]
    additional_number: int

    def __post_init__(self):
        # Accept lists from callers, store an immutable tuple.
        object.__setattr__(self, "numbers", tuple(int(n) for n in self.numbers))


def validate_result(result: HistoricalResult) -> None:
    """Raise ValueError if a draw is not a well-formed TOTO result."""
    nums = result.numbers
    if len(nums) != COMBINATION_LENGTH:
        raise ValueError(
            f"Draw {result.draw_number}: expected {COMBINATION_LENGTH} main numbers, got {len(nums)}"
        )
    if len(set(nums)) != len(nums):
        raise ValueError(f"Draw {result.draw_number}: duplicate main numbers {list(nums)}")
    for n in list(nums) + [result.additional_number]:
        if not NUMBER_MIN <= n <= NUMBER_MAX:
            raise ValueError(
                f"Draw {result.draw_number}: number {n} outside {NUMBER_MIN}-{NUMBER_MAX}"
            )
    if result.additional_number in nums:
        raise ValueError(
            f"Draw {result.draw_number}: additional number {result.additional_number} "
            f"repeats a main number"
        )


def validate_results(results: Sequence[HistoricalResult]) -> None:
    """Validate every draw and check that draw numbers are unique."""
    seen = set()
    for result in results:
        validate_result(result)
        if result.draw_number in seen:
            raise ValueError(f"Duplicate draw number {result.draw_number}")
        seen.add(result.draw_number)


def sort_latest_first(results: Sequence[HistoricalResult]) -> List[HistoricalResult]:
    """Return a new list ordered by draw number, most recent first."""
    return sorted(results, key=lambda r: r.draw_number, reverse=True)


def results_from_dataframe(df: pd.DataFrame) -> List[HistoricalResult]:
    """Convert a DataFrame in the CSV schema to draws, most recent first."""
    results = []
    for _, row in df.iterrows():
        date = row["date"]
        if isinstance(date, pd.Timestamp):
            date = date.strftime("%Y-%m-%d")
        results.append(HistoricalResult(
            draw_number=int(row["draw_number"]),
            date=str(date),
            numbers=tuple(int(row[c]) for c in NUM_COLS),
            additional_number=int(row["additional_number"]),
        ))
    return sort_latest_first(results)


def results_to_dataframe(results: Sequence[HistoricalResult]) -> pd.DataFrame:
    """Flatten draws into the CSV schema, preserving the given order."""
    records = []
    for r in results:
        record = {"draw_number": r.draw_number, "date": r.date}
        for col, n in zip(NUM_COLS, r.numbers):
            record[col] = n
        record["additional_number"] = r.additional_number
        records.append(record)
    return pd.DataFrame(records, columns=COLUMNS)


# Sample data for development and tests. No main number repeats across
# these five draws.
MOCK_HISTORICAL_DATA = [
    HistoricalResult(3920, "2023-10-26", (1, 12, 19, 27, 38, 44), 7),
    HistoricalResult(3919, "2023-10-23", (2, 14, 21, 30, 41, 46), 3),
    HistoricalResult(3918, "2023-10-19", (5, 15, 22, 31, 39, 47), 9),
    HistoricalResult(3917, "2023-10-16", (6, 10, 17, 25, 34, 49), 13),
    HistoricalResult(3916, "2023-10-12", (8, 11, 18, 29, 36, 42), 4),
]

MOCK_LATEST_RESULT = MOCK_HISTORICAL_DATA[0]
