"""
hoover.regions

Caller-side helpers that turn region tables into the vectors the curve
computation expects.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Tuple

import numpy as np
import pandas as pd

from hoover.errors import InvalidInputError
from hoover.inputs import to_numeric

log = logging.getLogger(__name__)


def aggregate_output(matrix: Any, categories: Optional[Iterable] = None) -> np.ndarray:
    """
    Row sums of a region x category matrix (regions in rows).
    Missing cells are skipped; a row with every selected cell missing stays missing.
    """
    df = matrix if isinstance(matrix, pd.DataFrame) else pd.DataFrame(np.asarray(matrix, dtype=object))
    if categories is not None:
        cats = list(categories)
        unknown = [c for c in cats if c not in df.columns]
        if unknown:
            raise InvalidInputError(f"unknown categories: {unknown}")
        df = df[cats]
    if df.shape[1] == 0:
        raise InvalidInputError("no category columns to aggregate")
    numeric = df.apply(lambda col: to_numeric(col, f"category {col.name!r}"))
    return numeric.sum(axis=1, min_count=1).to_numpy(dtype=float)


def load_region_table(
    path: str,
    output_columns: Iterable[str],
    population_column: str,
) -> Tuple[np.ndarray, np.ndarray]:
    try:
        df = pd.read_csv(path)
    except (OSError, pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise InvalidInputError(f"cannot read region table {path}: {e}") from e
    cols = list(output_columns)
    missing = [c for c in [*cols, population_column] if c not in df.columns]
    if missing:
        raise InvalidInputError(f"{path} lacks column(s): {missing}")
    log.info("loaded %d region(s) from %s", len(df), path)
    output = aggregate_output(df, cols)
    population = to_numeric(df[population_column], population_column).to_numpy(dtype=float)
    return output, population


__all__ = ["aggregate_output", "load_region_table"]
