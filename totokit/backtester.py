"""
Backtesting Engine for the TOTO number-picking tools

For each of the most recent draws, rebuilds the window of draws that
preceded it, runs a tool on that window only, and scores the pick against
the actual result. Never uses data from the target draw or later.

Draw lists are expected most-recent-first, as stored.
"""
import os
import warnings

import numpy as np
import pandas as pd
from scipy import stats

from totokit.data import DATA_DIR
from totokit.draws import COMBINATION_LENGTH, NUMBER_MAX
from totokit.hits import calculate_hit_details, hit_rate
from totokit.tickets import determine_prize_group, system_bet_price
from totokit.tools import NumberPickingTool, get_tool, list_tools

WINDOW_SIZE = 10
BACKTEST_TARGETS = 10
PENDING_DRAW = "PENDING_DRAW"


def _resolve_tool(tool):
    if isinstance(tool, NumberPickingTool):
        return tool
    return get_tool(tool)


def preceding_window(results, index, window_size=WINDOW_SIZE):
    """The `window_size` draws strictly older than results[index]."""
    return list(results[index + 1:index + 1 + window_size])


def _prediction_basis(window):
    if not window:
        return None
    first, last = window[0], window[-1]
    if len(window) == 1:
        return f"Based on draw {first.draw_number} (1 draw)"
    return f"Based on draws {first.draw_number} - {last.draw_number} ({len(window)} draws)"


def _window_note(window, window_size):
    if not window:
        return "No preceding data; no prediction"
    if len(window) < window_size:
        return f"Insufficient preceding data ({len(window)} of {window_size} draws)"
    return None


def evaluate_target(tool, results, index, window_size=WINDOW_SIZE):
    """Run one tool for the draw at results[index] and score it."""
    tool = _resolve_tool(tool)
    target = results[index]
    window = preceding_window(results, index, window_size)
    predicted = tool.predict(window) if window else []
    details = calculate_hit_details(predicted, target)
    prize = None
    if len(predicted) == COMBINATION_LENGTH:
        prize = determine_prize_group(details.main_hit_count, details.matched_additional_number.matched)

    return {
        "tool_id": tool.id,
        "target_draw_number": target.draw_number,
        "target_date": target.date,
        "actual": list(target.numbers),
        "actual_additional": target.additional_number,
        "predicted": predicted,
        "hit_details": details,
        "main_hits": details.main_hit_count,
        "additional_match": details.matched_additional_number.matched,
        "hit_rate": hit_rate(details, predicted, target),
        "has_any_hit": details.has_any_hit,
        "prize_group": prize,
        "basis_draw_count": len(window),
        "sufficient_data": len(window) >= window_size,
        "prediction_basis": _prediction_basis(window),
        "note": _window_note(window, window_size),
    }


def backtest_tool(tool, results, targets=BACKTEST_TARGETS, target_draw_numbers=None,
                  window_size=WINDOW_SIZE, verbose=False):
    """
    Backtest one tool over the most recent draws.

    Args:
        tool: NumberPickingTool or tool id
        results: All draws, most recent first
        targets: How many of the latest draws to score
        target_draw_numbers: Explicit draws to score instead of the latest
        window_size: Number of preceding draws handed to the tool
        verbose: Print progress

    Returns:
        List of per-draw entries, in the order of the targets
    """
    tool = _resolve_tool(tool)
    if target_draw_numbers is None:
        target_draw_numbers = [r.draw_number for r in results[:targets]]

    positions = {r.draw_number: i for i, r in enumerate(results)}
    entries = []
    for draw_number in target_draw_numbers:
        index = positions.get(draw_number)
        if index is None:
            warnings.warn(f"Draw {draw_number} not found in dataset; skipped in backtest of {tool.id}")
            continue
        entry = evaluate_target(tool, results, index, window_size)
        if verbose:
            print(f"  [Backtest] {tool.id} draw {draw_number}: "
                  f"{entry['main_hits']} hits, rate {entry['hit_rate']:.1f}%")
        entries.append(entry)
    return entries


def average_hit_rate(entries):
    if not entries:
        return 0.0
    return float(np.mean([e["hit_rate"] for e in entries]))


def current_prediction(tool, results, window_size=WINDOW_SIZE):
    """Pick for the next, not yet drawn, result. Needs a full window."""
    tool = _resolve_tool(tool)
    if len(results) < window_size:
        return []
    return tool.predict(list(results[:window_size]))


def rank_tools(results, tools=None, targets=BACKTEST_TARGETS, window_size=WINDOW_SIZE, verbose=True):
    """
    Rank tools by average hit rate over the latest `targets` draws.

    A tool that fails is reported and left out. Ties keep registry order.
    """
    tools = [_resolve_tool(t) for t in tools] if tools is not None else list_tools()

    if verbose:
        print(f"\n{'='*60}")
        print("TOOL BACKTEST")
        print(f"{'='*60}")
        print(f"Total draws: {len(results)}")
        print(f"Tools: {len(tools)} | Targets per tool: {min(targets, len(results))}")
        print(f"{'='*60}\n")

    ranking = []
    for tool in tools:
        try:
            entries = backtest_tool(tool, results, targets=targets, window_size=window_size)
            prediction = current_prediction(tool, results, window_size)
        except Exception as e:
            if verbose:
                print(f"    [Backtest] Error on tool {tool.id}: {e}")
            continue
        ranking.append({
            "tool_id": tool.id,
            "tool_name": tool.name,
            "average_hit_rate": average_hit_rate(entries),
            "current_prediction": prediction,
            "entries": entries,
        })

    ranking.sort(key=lambda r: r["average_hit_rate"], reverse=True)
    if verbose:
        for pos, r in enumerate(ranking, 1):
            print(f"  #{pos:2d}. {r['tool_name']:<30s} {r['average_hit_rate']:5.1f}%")
    return ranking


def last_draw_top_tools(results, tools=None, window_size=WINDOW_SIZE, verbose=True):
    """
    Score every tool on the latest draw only, best hit rate first.

    A tool that fails is reported and left out.
    """
    if not results:
        return []
    tools = [_resolve_tool(t) for t in tools] if tools is not None else list_tools()

    performances = []
    for tool in tools:
        try:
            entry = evaluate_target(tool, results, 0, window_size)
        except Exception as e:
            if verbose:
                print(f"    [Backtest] Error on tool {tool.id}: {e}")
            continue
        performances.append({
            "tool_id": tool.id,
            "tool_name": tool.name,
            "draw_number": entry["target_draw_number"],
            "prediction": entry["predicted"],
            "hit_rate": entry["hit_rate"],
            "hit_details": entry["hit_details"],
            "bet_price": system_bet_price(len(entry["predicted"])),
        })
    performances.sort(key=lambda p: p["hit_rate"], reverse=True)
    return performances


# ── Summary ─────────────────────────────────────────────────────────────

def summarize_backtest(entries, verbose=False):
    """Aggregate metrics for one tool's backtest entries."""
    if not entries:
        return {"average_hit_rate": 0.0, "total_draws": 0, "distribution": {}}

    rates = [e["hit_rate"] for e in entries]
    hits = [e["main_hits"] for e in entries]
    dist = {}
    for m in range(COMBINATION_LENGTH + 1):
        count = hits.count(m)
        dist[m] = {"count": count, "pct": 100 * count / len(hits)}

    summary = {
        "tool_id": entries[0]["tool_id"],
        "average_hit_rate": float(np.mean(rates)),
        "std_hit_rate": float(np.std(rates)),
        "avg_main_hits": float(np.mean(hits)),
        "distribution": dist,
        "best_single": max(hits),
        "draws_with_any_hit": sum(1 for e in entries if e["has_any_hit"]),
        "prizes_won": sum(1 for e in entries if e["prize_group"]),
        "insufficient_data_draws": sum(1 for e in entries if not e["sufficient_data"]),
        "total_draws": len(entries),
    }

    # Main hits against the random expectation: k picks hit 6/49 each on average
    excess = [e["main_hits"] - len(e["predicted"]) * COMBINATION_LENGTH / NUMBER_MAX for e in entries]
    if len(excess) > 1 and np.std(excess) > 0:
        t_stat, p_value = stats.ttest_1samp(excess, 0.0)
        summary["significance"] = {
            "mean_excess_hits": round(float(np.mean(excess)), 4),
            "t_statistic": round(float(t_stat), 4),
            "p_value": round(float(p_value), 6),
            "significant_at_005": bool(p_value < 0.05),
        }

    if verbose:
        _print_summary(summary)
    return summary


def _print_summary(summary):
    """Print a formatted backtest report."""
    print(f"\n{'='*60}")
    print(f"BACKTEST SUMMARY: {summary.get('tool_id', 'N/A')}")
    print(f"{'='*60}")
    print(f"  Average hit rate: {summary['average_hit_rate']:.1f}%")
    print(f"  Average main hits: {summary.get('avg_main_hits', 0):.2f}")
    print(f"  Best single draw: {summary.get('best_single', 0)} hits")
    print(f"  Draws with any hit: {summary.get('draws_with_any_hit', 0)} / {summary['total_draws']}")
    if summary.get("insufficient_data_draws"):
        print(f"  Draws with partial history: {summary['insufficient_data_draws']}")
    for m, d in summary.get("distribution", {}).items():
        print(f"    {m} hits: {d['count']} ({d['pct']:.1f}%)")

    sig = summary.get("significance")
    if sig:
        print(f"  t-statistic vs random: {sig['t_statistic']} (p={sig['p_value']})")
        if sig["significant_at_005"]:
            print("  ✓ Significant at p < 0.05")
        else:
            print("  ✗ Not statistically significant")


# ── Export ──────────────────────────────────────────────────────────────

def prediction_records(tool, entries, user_id):
    """Records for saving a tool's backtest picks, one per target draw."""
    tool = _resolve_tool(tool)
    return [{
        "tool_id": tool.id,
        "tool_name": tool.name,
        "target_draw_number": e["target_draw_number"],
        "target_draw_date": e["target_date"],
        "predicted_numbers": list(e["predicted"]),
        "submitting_user_id": user_id,
    } for e in entries]


def pending_prediction_record(tool, results, user_id, next_draw_number=None):
    """Record for the upcoming draw, dated PENDING_DRAW until it is drawn."""
    tool = _resolve_tool(tool)
    if next_draw_number is None:
        next_draw_number = results[0].draw_number + 1 if results else 1
    return {
        "tool_id": tool.id,
        "tool_name": tool.name,
        "target_draw_number": next_draw_number,
        "target_draw_date": PENDING_DRAW,
        "predicted_numbers": current_prediction(tool, results),
        "submitting_user_id": user_id,
    }


def entries_to_dataframe(entries):
    rows = []
    for e in entries:
        rows.append({
            "tool_id": e["tool_id"],
            "draw_number": e["target_draw_number"],
            "date": e["target_date"],
            "predicted": str(e["predicted"]),
            "actual": str(e["actual"]),
            "main_hits": e["main_hits"],
            "additional_match": e["additional_match"],
            "hit_rate": round(e["hit_rate"], 1),
            "basis": e["prediction_basis"],
            "note": e["note"],
        })
    return pd.DataFrame(rows)


def save_backtest(entries, path=None):
    """Save backtest entries to CSV. Returns the path written, or None."""
    if not entries:
        return None
    if path is None:
        path = os.path.join(DATA_DIR, "backtest_results.csv")
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    entries_to_dataframe(entries).to_csv(path, index=False)
    print(f"\n[Backtest] Results saved to {path}")
    return path
