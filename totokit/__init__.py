"""
totokit: deterministic Singapore TOTO number-picking tools and backtests.
"""

from totokit.draws import MOCK_HISTORICAL_DATA, HistoricalResult
from totokit.hits import HitDetails, calculate_hit_details, hit_rate

__all__ = [
    "HistoricalResult",
    "HitDetails",
    "MOCK_HISTORICAL_DATA",
    "calculate_hit_details",
    "hit_rate",
]
