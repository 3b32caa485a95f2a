"""Tabular export of combination sequences."""

from __future__ import annotations

from itertools import islice
from pathlib import Path

import numpy as np
import pandas as pd

from chasecomb.combination import ChaseGenerator, CombinationSet

from .metrics import resolve_row_count

EXPORT_COLUMNS = ["step", "members", "entered", "left"]


def combinations_frame(combination_set: CombinationSet, limit: int | None = None) -> pd.DataFrame:
    """Return one row per combination with the element that entered and left."""
    rows = resolve_row_count(combination_set, limit)
    elements = combination_set.elements
    generator = ChaseGenerator(range(combination_set.n), combination_set.k)

    members: list[tuple] = []
    entered_column: list[object] = []
    left_column: list[object] = []
    previous: frozenset[int] | None = None
    for positions in islice(generator, rows):
        entered = left = None
        if previous is not None:
            entered = _single_element(elements, positions - previous)
            left = _single_element(elements, previous - positions)
        members.append(tuple(elements[index] for index in sorted(positions)))
        entered_column.append(entered)
        left_column.append(left)
        previous = positions

    return pd.DataFrame(
        {
            "step": pd.Series(np.arange(len(members), dtype=np.int64)),
            "members": pd.Series(_object_column(members), dtype=object),
            "entered": pd.Series(_object_column(entered_column), dtype=object),
            "left": pd.Series(_object_column(left_column), dtype=object),
        },
        columns=EXPORT_COLUMNS,
    )


def format_csv(frame: pd.DataFrame) -> str:
    """Render an export frame as CSV text."""
    return _flatten_members(frame).to_csv(index=False)


def write_csv(frame: pd.DataFrame, path: str | Path) -> Path:
    """Write an export frame to CSV, members joined by spaces."""
    csv_path = Path(path)
    _flatten_members(frame).to_csv(csv_path, index=False, encoding="utf-8")
    return csv_path


def _flatten_members(frame: pd.DataFrame) -> pd.DataFrame:
    output = frame.copy()
    output["members"] = output["members"].map(lambda members: " ".join(str(value) for value in members))
    return output


def _object_column(values: list) -> np.ndarray:
    # element-wise so tuples stay scalar cells instead of becoming a 2-D array
    column = np.empty(len(values), dtype=object)
    for index, value in enumerate(values):
        column[index] = value
    return column


def _single_element(elements: tuple, positions: frozenset[int]) -> object:
    if len(positions) != 1:
        return None
    (index,) = positions
    return elements[index]
