"""
Results analytics for the dashboard

Frequency ranking, hot/cold numbers and odd/even balance over a set of
draws. Unlike the tools, these counts include the additional number.
"""
from collections import Counter

import pandas as pd

from totokit.draws import ALL_NUMBERS, NUM_COLS, results_to_dataframe

TOP_N = 10


def _main_numbers_flat(df: pd.DataFrame):
    """Every main number drawn, one entry per number."""
    return df[NUM_COLS].values.flatten()


def frequency_analysis(results) -> dict:
    """
    Count each number 1-49 as a main number and as the additional number.

    Returns
    -------
    dict with keys:
        main_counts       : dict {number: count}
        additional_counts : dict {number: count}
        total_counts      : dict {number: main + additional}
        ranked            : list of (number, total_count) sorted desc
        total_draws       : int
        dataframe         : pd.DataFrame summary
    """
    df = results_to_dataframe(results)

    main_counter = Counter(int(n) for n in _main_numbers_flat(df))
    add_counter = Counter(int(n) for n in df["additional_number"])
    main_counts = {n: main_counter.get(n, 0) for n in ALL_NUMBERS}
    additional_counts = {n: add_counter.get(n, 0) for n in ALL_NUMBERS}
    total_counts = {n: main_counts[n] + additional_counts[n] for n in ALL_NUMBERS}

    # Stable sort: ties stay in ascending number order
    ranked = sorted(total_counts.items(), key=lambda x: x[1], reverse=True)

    records = []
    for rank, (num, cnt) in enumerate(ranked, 1):
        records.append({
            "number": num,
            "main_count": main_counts[num],
            "additional_count": additional_counts[num],
            "total_appearances": cnt,
            "rank": rank,
        })

    return {
        "main_counts": main_counts,
        "additional_counts": additional_counts,
        "total_counts": total_counts,
        "ranked": ranked,
        "total_draws": len(df),
        "dataframe": pd.DataFrame(records),
    }


def hot_cold_numbers(results, top_n=TOP_N) -> dict:
    """
    Hot  : the `top_n` most frequent numbers.
    Cold : the `top_n` least frequent, coldest first.
    """
    ranked = frequency_analysis(results)["ranked"]
    return {
        "hot": ranked[:top_n],
        "cold": ranked[-top_n:][::-1],
    }


def odd_even_ratio(results) -> dict:
    """Odd/even split of all drawn numbers, additional numbers included."""
    odd = even = 0
    for r in results:
        for n in list(r.numbers) + [r.additional_number]:
            if n % 2:
                odd += 1
            else:
                even += 1
    total = odd + even
    return {
        "odd": odd,
        "even": even,
        "odd_pct": round(100.0 * odd / total, 2) if total else 0.0,
    }
