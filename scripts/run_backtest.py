#!/usr/bin/env python3
"""
Standalone backtest script.
Ranks every number-picking tool over the latest draws and prints the
current pick of each tool for the next draw.
"""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from totokit.analysis import hot_cold_numbers, odd_even_ratio
from totokit.backtester import last_draw_top_tools, rank_tools, save_backtest, summarize_backtest
from totokit.data import load_data
from totokit.tickets import system_bet_price


def main():
    print("Loading data...")
    results = load_data()
    print(f"Loaded {len(results)} draws")
    if results:
        print(f"Latest draw: {results[0].draw_number} ({results[0].date})")

    ranking = rank_tools(results, verbose=True)

    print(f"\n{'='*60}")
    print("CURRENT PREDICTIONS")
    print(f"{'='*60}")
    for r in ranking:
        pick = r["current_prediction"]
        price = system_bet_price(len(pick))
        price_str = f" | ${price}" if price is not None else ""
        print(f"\n{r['tool_name']} ({len(pick)} numbers{price_str}):")
        print(f"  {', '.join(str(n) for n in pick) if pick else 'Not enough data'}")

    if ranking:
        best = ranking[0]
        summarize_backtest(best["entries"], verbose=True)
        save_backtest([e for r in ranking for e in r["entries"]])

    print(f"\n{'='*60}")
    print("LAST DRAW TOP TOOLS")
    print(f"{'='*60}")
    for p in last_draw_top_tools(results):
        hits = p["hit_details"].matched_main_numbers
        print(f"  {p['tool_name']:<30s} {p['hit_rate']:5.1f}%  hits: {list(hits)}")

    hc = hot_cold_numbers(results)
    oe = odd_even_ratio(results)
    print(f"\nHot: {[n for n, _ in hc['hot']]}")
    print(f"Cold: {[n for n, _ in hc['cold']]}")
    print(f"Odd/Even: {oe['odd']}/{oe['even']} ({oe['odd_pct']}% odd)")

    print(f"\n{'='*60}")
    print("DISCLAIMER: TOTO is a random lottery. No tool guarantees wins.")
    print("Odds: 1 in 13,983,816. Play responsibly.")
    print(f"{'='*60}")


if __name__ == "__main__":
    main()
