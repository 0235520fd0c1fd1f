import pandas as pd
import pytest

from totokit.backtester import (
    PENDING_DRAW,
    average_hit_rate,
    backtest_tool,
    current_prediction,
    last_draw_top_tools,
    pending_prediction_record,
    preceding_window,
    prediction_records,
    rank_tools,
    save_backtest,
    summarize_backtest,
)
from totokit.hits import calculate_hit_details, hit_rate
from totokit.tools import NumberPickingTool, list_tools
from totokit.tools.frequency_tools import algo_hot_numbers


def test_preceding_window_is_the_next_ten_older_draws(history):
    assert len(history) == 16
    window = preceding_window(history, 5)
    assert window == history[6:16]
    assert window[-1] is history[15]


def test_backtest_targets_latest_draws_in_order(history):
    entries = backtest_tool("dynamicHotNumbers", history)
    assert [e["target_draw_number"] for e in entries] == [r.draw_number for r in history[:10]]


def test_backtest_feeds_only_preceding_draws(history):
    entries = backtest_tool("dynamicHotNumbers", history)
    for i, entry in enumerate(entries):
        window = history[i + 1:i + 11]
        assert entry["predicted"] == algo_hot_numbers(window)
        details = calculate_hit_details(entry["predicted"], history[i])
        assert entry["hit_details"] == details
        assert entry["hit_rate"] == hit_rate(details, entry["predicted"], history[i])


def test_backtest_flags_partial_history(history):
    entries = backtest_tool("dynamicHotNumbers", history)
    assert [e["sufficient_data"] for e in entries] == [True] * 6 + [False] * 4
    assert entries[5]["note"] is None
    assert entries[9]["basis_draw_count"] == 6
    assert entries[9]["note"] == "Insufficient preceding data (6 of 10 draws)"
    assert entries[0]["prediction_basis"] == (
        f"Based on draws {history[1].draw_number} - {history[10].draw_number} (10 draws)"
    )


def test_backtest_oldest_draw_has_no_prediction(history):
    oldest = history[-1].draw_number
    (entry,) = backtest_tool("dynamicLastDrawRepeat", history, target_draw_numbers=[oldest])
    assert entry["predicted"] == []
    assert entry["hit_rate"] == 0.0
    assert entry["prediction_basis"] is None
    assert entry["note"] == "No preceding data; no prediction"


def test_backtest_skips_unknown_target(history):
    with pytest.warns(UserWarning, match="not found"):
        entries = backtest_tool(
            "dynamicHotNumbers", history,
            target_draw_numbers=[history[0].draw_number, 1],
        )
    assert len(entries) == 1


def test_backtest_is_deterministic(history):
    for tool in list_tools():
        assert backtest_tool(tool, history) == backtest_tool(tool, history)


def test_average_hit_rate():
    assert average_hit_rate([]) == 0.0
    assert average_hit_rate([{"hit_rate": 50.0}, {"hit_rate": 0.0}]) == 25.0


def test_current_prediction_uses_latest_window(history):
    assert current_prediction("dynamicHotNumbers", history) == algo_hot_numbers(history[:10])
    assert current_prediction("dynamicHotNumbers", history[:9]) == []


def test_rank_tools_orders_by_average_hit_rate(history):
    ranking = rank_tools(history, verbose=False)
    assert {r["tool_id"] for r in ranking} == {t.id for t in list_tools()}
    rates = [r["average_hit_rate"] for r in ranking]
    assert rates == sorted(rates, reverse=True)
    for r in ranking:
        assert len(r["entries"]) == 10


def test_rank_tools_leaves_out_failing_tool(history):
    def broken(results):
        raise RuntimeError("boom")

    tools = [NumberPickingTool("broken", "Broken", "", broken), "dynamicHotNumbers"]
    ranking = rank_tools(history, tools=tools, verbose=False)
    assert [r["tool_id"] for r in ranking] == ["dynamicHotNumbers"]


def test_rank_tools_unknown_id(history):
    with pytest.raises(KeyError):
        rank_tools(history, tools=["dynamicMagic"], verbose=False)


def test_last_draw_top_tools(history):
    performances = last_draw_top_tools(history)
    assert len(performances) == 10
    rates = [p["hit_rate"] for p in performances]
    assert rates == sorted(rates, reverse=True)
    assert all(p["draw_number"] == history[0].draw_number for p in performances)
    assert last_draw_top_tools([]) == []


def test_last_draw_top_tools_leaves_out_failing_tool(history):
    def broken(results):
        raise RuntimeError("boom")

    tools = [NumberPickingTool("broken", "Broken", "", broken), "dynamicHotNumbers"]
    performances = last_draw_top_tools(history, tools=tools, verbose=False)
    assert [p["tool_id"] for p in performances] == ["dynamicHotNumbers"]


def test_prediction_records(history):
    entries = backtest_tool("dynamicFrequentOdd", history, targets=2)
    records = prediction_records("dynamicFrequentOdd", entries, "admin-1")
    assert records[0] == {
        "tool_id": "dynamicFrequentOdd",
        "tool_name": "Frequent Odd Numbers",
        "target_draw_number": history[0].draw_number,
        "target_draw_date": history[0].date,
        "predicted_numbers": entries[0]["predicted"],
        "submitting_user_id": "admin-1",
    }


def test_pending_prediction_record(history):
    record = pending_prediction_record("dynamicHotNumbers", history, "admin-1")
    assert record["target_draw_number"] == history[0].draw_number + 1
    assert record["target_draw_date"] == PENDING_DRAW
    assert record["predicted_numbers"] == algo_hot_numbers(history[:10])


def test_summarize_backtest(history):
    entries = backtest_tool("dynamicUniquePoolDeterministic", history)
    summary = summarize_backtest(entries)
    assert summary["total_draws"] == 10
    assert summary["average_hit_rate"] == pytest.approx(average_hit_rate(entries))
    assert sum(d["count"] for d in summary["distribution"].values()) == 10
    assert summary["insufficient_data_draws"] == 4
    assert summarize_backtest([])["total_draws"] == 0


def test_save_backtest(tmp_path, history):
    entries = backtest_tool("dynamicHotNumbers", history)
    path = save_backtest(entries, path=str(tmp_path / "bt.csv"))
    df = pd.read_csv(path)
    assert len(df) == 10
    assert list(df["draw_number"]) == [r.draw_number for r in history[:10]]
    assert save_backtest([]) is None
