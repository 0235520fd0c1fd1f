"""
Repeat tools: replay the main numbers of a recent draw.

When the window is too short, a fixed seeded sequence is returned instead
of a partial pick.
"""
from totokit.draws import COMBINATION_LENGTH
from totokit.frequency import ensure_unique_numbers, get_deterministic_sequence

LAST_DRAW_SEEDS = (1, 7)
SECOND_LAST_DRAW_SEEDS = (2, 5)


def algo_last_draw_repeat(results):
    """The 6 main numbers of the latest draw in the window."""
    if not results or not results[0].numbers:
        return get_deterministic_sequence(COMBINATION_LENGTH, *LAST_DRAW_SEEDS)
    return ensure_unique_numbers(results[0].numbers, COMBINATION_LENGTH, COMBINATION_LENGTH)


def algo_second_last_draw_repeat(results):
    """The 6 main numbers of the draw before the latest one."""
    if len(results) < 2 or not results[1].numbers:
        return get_deterministic_sequence(COMBINATION_LENGTH, *SECOND_LAST_DRAW_SEEDS)
    return ensure_unique_numbers(results[1].numbers, COMBINATION_LENGTH, COMBINATION_LENGTH)
