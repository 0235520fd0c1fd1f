"""
Hit evaluation: compare a predicted combination with an actual draw.
"""
from dataclasses import dataclass
from typing import Sequence, Tuple

from totokit.draws import HistoricalResult


@dataclass(frozen=True)
class AdditionalNumberMatch:
    number: int
    matched: bool


@dataclass(frozen=True)
class HitDetails:
    matched_main_numbers: Tuple[int, ...]
    matched_additional_number: AdditionalNumberMatch
    main_hit_count: int

    @property
    def has_any_hit(self) -> bool:
        return self.main_hit_count > 0 or self.matched_additional_number.matched


def calculate_hit_details(combination: Sequence[int], actual: HistoricalResult) -> HitDetails:
    """
    Main-number and additional-number hits of `combination` against `actual`.

    Each number is checked against the main set and the additional number
    independently. Matched main numbers are returned ascending.
    """
    winning = set(actual.numbers)
    matched = sorted({n for n in combination if n in winning})
    additional_matched = actual.additional_number in combination
    return HitDetails(
        matched_main_numbers=tuple(matched),
        matched_additional_number=AdditionalNumberMatch(actual.additional_number, additional_matched),
        main_hit_count=len(matched),
    )


def hit_rate(hit_details: HitDetails, predicted: Sequence[int], actual: HistoricalResult) -> float:
    """
    Main hits as a percentage of min(len(predicted), len(actual.numbers)).

    The denominator never exceeds the 6 official numbers, so a 10-number
    pick with 3 hits scores 50%. Returns 0 when either side is empty.
    """
    if not predicted or not actual.numbers:
        return 0.0
    return hit_details.main_hit_count / min(len(predicted), len(actual.numbers)) * 100
