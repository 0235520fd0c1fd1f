"""
Seed-arithmetic tools.

These replace random picks with formulas over the window's own values, so
the same window always gives the same numbers.
"""
from datetime import date

from totokit.draws import NUMBER_MAX
from totokit.frequency import get_deterministic_sequence

POOL_PICK_CAP = 15
OVERALL_PICK_CAP = 24
LUCKY_DIP_STEP_MODULUS = 13
BOOTSTRAP_PICK = 10


def algo_unique_pool_deterministic(results):
    """
    Lower half of the pool of every number seen in the window.

    The pool holds main and additional numbers, ascending. The pick size is
    half the pool, kept within 1-15.
    """
    pool = set()
    for result in results:
        pool.update(result.numbers)
        if result.additional_number:
            pool.add(result.additional_number)
    if not pool:
        return []

    pool = sorted(pool)
    count = max(1, min(len(pool) // 2, POOL_PICK_CAP))
    count = min(count, len(pool), OVERALL_PICK_CAP)
    return pool[:count]


def algo_lucky_dip_deterministic(results, today=None):
    """
    Seeded sequence driven by draw numbers and additional numbers.

    seed1 = sum(draw numbers) % 49, seed2 = sum(additional numbers) % 13,
    each replaced by 1 when zero. Pick size is 6 + len(window) % 15.

    With an empty window the seeds come from `today` (defaults to the
    current date), so the pick changes from day to day.
    """
    if not results:
        today = today or date.today()
        return get_deterministic_sequence(
            BOOTSTRAP_PICK, today.day, today.month * (today.year % 100)
        )

    count = max(1, min(6 + len(results) % 15, OVERALL_PICK_CAP))
    seed1 = sum(r.draw_number for r in results) % NUMBER_MAX or 1
    seed2 = sum(r.additional_number for r in results) % LUCKY_DIP_STEP_MODULUS or 1
    return get_deterministic_sequence(count, seed1, seed2)
