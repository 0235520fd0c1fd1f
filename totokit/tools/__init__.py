"""
Singapore TOTO Number-Picking Tools

Every tool maps a window of up to 10 past draws (most recent first) to a
combination of distinct numbers from 1-49. All tools are deterministic.

Available tools:
- frequency_tools: hot, cold, frequent even/odd, small/large zone
- repeat_tools: last draw and second-last draw repeat
- deterministic_tools: unique pool and lucky dip sequences
- registry: id -> tool lookup used by the backtester
"""

from .registry import TOOLS, NumberPickingTool, get_tool, list_tools

__all__ = [
    "TOOLS",
    "NumberPickingTool",
    "get_tool",
    "list_tools",
]
