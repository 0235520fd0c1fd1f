"""
Historical TOTO results: loading and ingestion

Reads the CSV dataset, or parses results pasted in the Singapore Pools
plain-text layout. Draws are validated before they reach the tools.
"""
import os
import re
import warnings

import pandas as pd

from totokit.draws import (
    COLUMNS,
    NUM_COLS,
    MOCK_HISTORICAL_DATA,
    HistoricalResult,
    results_from_dataframe,
    results_to_dataframe,
    sort_latest_first,
    validate_result,
    validate_results,
)

DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data")
CSV_PATH = os.path.join(DATA_DIR, "toto_results.csv")

MONTHS = {
    "Jan": 1, "Feb": 2, "Mar": 3, "Apr": 4, "May": 5, "Jun": 6,
    "Jul": 7, "Aug": 8, "Sep": 9, "Oct": 10, "Nov": 11, "Dec": 12,
}
BLOCK_SEPARATOR = re.compile(r"\n\s*\n")


def parse_draw_date(text):
    """
    Parse "Thu, 22 May 2025" into "2025-05-22".

    Returns an empty string when the text does not have that shape.
    """
    parts = text.split()
    if len(parts) < 4:
        return ""
    day, month, year = parts[1].rstrip(","), MONTHS.get(parts[2]), parts[3]
    if month is None or not day.isdigit() or not year.isdigit():
        return ""
    return f"{int(year):04d}-{month:02d}-{int(day):02d}"


def _parse_block(block):
    lines = [line.strip() for line in block.strip().split("\n")]
    if len(lines) < 5:
        raise ValueError("incomplete record, at least 5 lines are needed")

    header = lines[0].split("\t")
    if len(header) < 2:
        raise ValueError("first line must hold the date and draw number separated by a tab")
    date = parse_draw_date(header[0])
    if not date:
        raise ValueError(f'cannot parse date "{header[0]}" (expected e.g. Thu, 22 May 2025)')
    draw_text = header[1].replace("Draw No.", "").strip()
    try:
        draw_number = int(draw_text)
    except ValueError:
        raise ValueError(f'cannot parse draw number "{draw_text}"') from None

    numbers = [int(t) for t in lines[2].split() if t.lstrip("-").isdigit()]
    if len(numbers) != 6:
        raise ValueError(f"winning numbers must be 6 numbers, found {numbers}")
    try:
        additional = int(lines[4])
    except ValueError:
        raise ValueError(f'cannot parse additional number "{lines[4]}"') from None

    result = HistoricalResult(draw_number, date, tuple(numbers), additional)
    validate_result(result)
    return result


def parse_results_text(text):
    """
    Parse results pasted in the Singapore Pools text layout:

        Thu, 22 May 2025<TAB>Draw No. 4080
        Winning Numbers
        3 10 32 34 44 48
        Additional Number
        29

    Records are separated by blank lines. All problems are collected and
    raised together as one ValueError; otherwise draws are returned most
    recent first.
    """
    blocks = [b for b in BLOCK_SEPARATOR.split(text.strip()) if b.strip()]
    results, errors = [], []
    for i, block in enumerate(blocks, 1):
        try:
            results.append(_parse_block(block))
        except ValueError as e:
            errors.append(f"Record {i}: {e}")
    if errors:
        raise ValueError("Text parsing failed:\n- " + "\n- ".join(errors))

    results = sort_latest_first(results)
    validate_results(results)
    return results


def clean_dataframe(df):
    """Drop malformed rows and duplicate draw numbers, with a warning."""
    missing = [c for c in COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Dataset is missing columns: {missing}")

    df = df.dropna(subset=COLUMNS)
    keep, seen = [], set()
    for idx, row in df.iterrows():
        try:
            result = HistoricalResult(
                int(row["draw_number"]), str(row["date"]),
                tuple(int(row[c]) for c in NUM_COLS), int(row["additional_number"]),
            )
            validate_result(result)
        except (ValueError, TypeError) as e:
            warnings.warn(f"[Data] Dropping invalid row {idx}: {e}")
            continue
        # first valid copy of a draw number wins
        if result.draw_number in seen:
            continue
        seen.add(result.draw_number)
        keep.append(idx)
    return df.loc[keep]


def load_data(path=CSV_PATH):
    """
    Load the TOTO dataset as draws, most recent first.

    Falls back to the bundled sample draws if no dataset has been saved yet.
    """
    if not os.path.exists(path):
        warnings.warn(
            f"No dataset at {path}. Using sample data; results are for demonstration only."
        )
        return list(MOCK_HISTORICAL_DATA)

    df = pd.read_csv(path)
    df["date"] = pd.to_datetime(df["date"], errors="coerce")
    results = results_from_dataframe(clean_dataframe(df))
    print(f"[Data] Loaded {len(results)} draws from {path}")
    return results


def save_data(results, path=CSV_PATH):
    """Write draws to CSV, most recent first."""
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    results_to_dataframe(sort_latest_first(results)).to_csv(path, index=False)
    print(f"[Data] Saved {len(results)} draws to {path}")
    return path


def merge_results(existing, new):
    """Combine two draw lists; a draw number in `new` replaces the old one."""
    by_number = {r.draw_number: r for r in existing}
    for r in new:
        by_number[r.draw_number] = r
    return sort_latest_first(by_number.values())
