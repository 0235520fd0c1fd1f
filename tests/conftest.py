import pytest

from totokit.draws import MOCK_HISTORICAL_DATA, HistoricalResult


def make_draw(draw_number, numbers, additional, date="2024-01-01"):
    return HistoricalResult(draw_number, date, tuple(numbers), additional)


def synthetic_history(count=16, latest=4100):
    """Valid draws, most recent first. Main numbers step by 7 from a per-draw base."""
    draws = []
    for draw_number in range(latest, latest - count, -1):
        base = draw_number % 49
        numbers = sorted((base + 7 * k) % 49 + 1 for k in range(6))
        additional = (base + 45) % 49 + 1
        draws.append(make_draw(draw_number, numbers, additional, f"2024-01-{draw_number % 28 + 1:02d}"))
    return draws


@pytest.fixture
def mock_window():
    return list(MOCK_HISTORICAL_DATA)


@pytest.fixture
def history():
    return synthetic_history()


@pytest.fixture
def twin_window():
    """5 and 7 appear in both draws, every other main number once."""
    return [
        make_draw(2, [5, 7, 20, 30, 40, 45], 1),
        make_draw(1, [5, 7, 21, 31, 41, 46], 2),
    ]
