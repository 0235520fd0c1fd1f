"""
Registry of the number-picking tools, keyed by tool id.

The registry is built once at import and is read-only afterwards; tools
are listed in display order.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, List, Sequence

from totokit.draws import HistoricalResult
from totokit.tools.deterministic_tools import (
    algo_lucky_dip_deterministic,
    algo_unique_pool_deterministic,
)
from totokit.tools.frequency_tools import (
    algo_cold_numbers,
    algo_frequent_even,
    algo_frequent_large_zone,
    algo_frequent_odd,
    algo_frequent_small_zone,
    algo_hot_numbers,
)
from totokit.tools.repeat_tools import algo_last_draw_repeat, algo_second_last_draw_repeat

Algorithm = Callable[[Sequence[HistoricalResult]], List[int]]


@dataclass(frozen=True)
class NumberPickingTool:
    id: str
    name: str
    description: str
    algorithm: Algorithm

    def predict(self, results: Sequence[HistoricalResult]) -> List[int]:
        return self.algorithm(results)


_TOOL_LIST = [
    NumberPickingTool(
        "dynamicHotNumbers",
        "Hot Number Tracker",
        "Up to 10 main numbers that appeared most often in the 10 draws before the target.",
        algo_hot_numbers,
    ),
    NumberPickingTool(
        "dynamicColdNumbers",
        "Cold Number Miner",
        "Up to 10 main numbers that appeared least often (but at least once) in the previous 10 draws.",
        algo_cold_numbers,
    ),
    NumberPickingTool(
        "dynamicLastDrawRepeat",
        "Last Draw Repeat (6)",
        "The 6 main numbers of the draw just before the target.",
        algo_last_draw_repeat,
    ),
    NumberPickingTool(
        "dynamicSecondLastDrawRepeat",
        "Second-Last Draw Repeat (6)",
        "The 6 main numbers of the second draw before the target.",
        algo_second_last_draw_repeat,
    ),
    NumberPickingTool(
        "dynamicFrequentEven",
        "Frequent Even Numbers",
        "Up to 10 of the most frequent even main numbers in the previous 10 draws.",
        algo_frequent_even,
    ),
    NumberPickingTool(
        "dynamicFrequentOdd",
        "Frequent Odd Numbers",
        "Up to 10 of the most frequent odd main numbers in the previous 10 draws.",
        algo_frequent_odd,
    ),
    NumberPickingTool(
        "dynamicFrequentSmallZone",
        "Small Zone Picks (1-24)",
        "Up to 10 of the most frequent numbers from 1-24 in the previous 10 draws.",
        algo_frequent_small_zone,
    ),
    NumberPickingTool(
        "dynamicFrequentLargeZone",
        "Large Zone Picks (25-49)",
        "Up to 10 of the most frequent numbers from 25-49 in the previous 10 draws.",
        algo_frequent_large_zone,
    ),
    NumberPickingTool(
        "dynamicUniquePoolDeterministic",
        "Combined Pool Picks",
        "The lower half (at most 15) of every number, additional included, seen in the previous 10 draws.",
        algo_unique_pool_deterministic,
    ),
    NumberPickingTool(
        "dynamicLuckyDipDeterministic",
        "Lucky Sequence",
        "A seeded sequence of 6-20 numbers derived from the previous 10 draws.",
        algo_lucky_dip_deterministic,
    ),
]

TOOLS = MappingProxyType({tool.id: tool for tool in _TOOL_LIST})


def get_tool(tool_id: str) -> NumberPickingTool:
    """Look up a tool by id. Raises KeyError for unknown ids."""
    try:
        return TOOLS[tool_id]
    except KeyError:
        raise KeyError(f"Unknown number-picking tool: {tool_id}") from None


def list_tools() -> List[NumberPickingTool]:
    return list(TOOLS.values())
