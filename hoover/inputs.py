from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd

from hoover.errors import InvalidInputError


def first_column(values: Any) -> pd.Series:
    """
    Accepts a plain sequence, numpy array, pandas Series, 2-D array or DataFrame.
    Matrix-like inputs contribute their first column only; summing across
    columns is left to the caller (see hoover.regions.aggregate_output).
    Missing markers (None, NaN, pd.NA) are kept as missing.
    """
    if isinstance(values, pd.DataFrame):
        if values.shape[1] == 0:
            raise InvalidInputError("matrix input has no columns")
        col = values.iloc[:, 0]
    elif isinstance(values, pd.Series):
        col = values
    else:
        arr = np.asarray(values, dtype=object)
        if arr.ndim == 0:
            arr = arr.reshape(1)
        elif arr.ndim == 2:
            if arr.shape[1] == 0:
                raise InvalidInputError("matrix input has no columns")
            arr = arr[:, 0]
        elif arr.ndim > 2:
            raise InvalidInputError(f"expected a vector or matrix, got {arr.ndim} dimensions")
        col = pd.Series(arr, dtype=object)
    return col.reset_index(drop=True)


def to_numeric(col: pd.Series, name: str) -> pd.Series:
    # None and pd.NA become NaN; anything non-numeric is rejected
    try:
        return pd.to_numeric(col, errors="raise").astype("float64")
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{name} contains non-numeric values: {e}") from e


def as_column(values: Any, name: str) -> pd.Series:
    return to_numeric(first_column(values), name)


__all__ = ["first_column", "to_numeric", "as_column"]
