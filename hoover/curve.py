"""
hoover.curve

Coordinates of a Hoover concentration curve: cumulative population share
against cumulative output share, regions visited from lowest to highest
output per capita.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List

import numpy as np
import pandas as pd

from hoover.errors import InvalidInputError, ShapeMismatchError
from hoover.inputs import as_column

log = logging.getLogger(__name__)

ANCHOR = {"output": 0.0, "population": 0.0}


@dataclass(frozen=True)
class HooverCurve:
    cumulative_population_share: np.ndarray
    cumulative_output_share: np.ndarray

    def __post_init__(self):
        for arr in (self.cumulative_population_share, self.cumulative_output_share):
            arr.flags.writeable = False

    def __len__(self) -> int:
        return int(self.cumulative_population_share.size)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({
            "cum_pop": self.cumulative_population_share,
            "cum_out": self.cumulative_output_share,
        })

    def to_dict(self) -> Dict[str, List[float]]:
        return {
            "cumulative_population_share": self.cumulative_population_share.tolist(),
            "cumulative_output_share": self.cumulative_output_share.tolist(),
        }


def prepend_anchor(frame: pd.DataFrame) -> pd.DataFrame:
    """Put the synthetic (0, 0) region first so the curve starts at the origin."""
    anchor = pd.DataFrame([ANCHOR], columns=["output", "population"])
    return pd.concat([anchor, frame[["output", "population"]]], ignore_index=True)


def drop_incomplete(frame: pd.DataFrame) -> pd.DataFrame:
    """
    Joint complete-case filter: a region missing either value is removed
    from both columns at once.
    """
    kept = frame.dropna(subset=["output", "population"]).reset_index(drop=True)
    dropped = len(frame) - len(kept)
    if dropped:
        log.debug("dropped %d region(s) with missing output or population", dropped)
    return kept


def with_ratio(frame: pd.DataFrame) -> pd.DataFrame:
    out = frame["output"].to_numpy(dtype=float)
    pop = frame["population"].to_numpy(dtype=float)
    ratio = np.zeros_like(out)
    # zero population gives ratio 0, never NaN or inf
    nonzero = pop != 0
    ratio[nonzero] = out[nonzero] / pop[nonzero]
    return frame.assign(ratio=ratio)


def order_by_ratio(frame: pd.DataFrame) -> pd.DataFrame:
    """Ascending output per capita; ties keep their input order."""
    return frame.sort_values("ratio", kind="stable").reset_index(drop=True)


def cumulative_shares(values: np.ndarray, name: str = "values") -> np.ndarray:
    cum = np.cumsum(np.asarray(values, dtype=float))
    total = cum[-1] if cum.size else 0.0
    if total == 0:
        raise InvalidInputError(f"grand total of {name} is zero, cannot normalise")
    return cum / total


def _validate(output: pd.Series, population: pd.Series) -> None:
    if len(output) != len(population):
        raise ShapeMismatchError(
            f"output has {len(output)} regions but population has {len(population)}"
        )
    if (output < 0).any() or (population < 0).any():
        raise InvalidInputError("output and population must be non-negative")
    if np.isinf(output).any() or np.isinf(population).any():
        raise InvalidInputError("output and population must be finite")


def region_frame(output: Any, population: Any) -> pd.DataFrame:
    """
    Ordered region collection: one row per complete input region plus the
    anchor, with columns output, population and ratio, sorted by ratio.
    """
    out = as_column(output, "output")
    pop = as_column(population, "population")
    _validate(out, pop)

    frame = pd.DataFrame({"output": out, "population": pop})
    frame = drop_incomplete(prepend_anchor(frame))
    if len(frame) < 2:
        raise InvalidInputError("no region has both output and population")
    log.debug("ordering %d region(s) including anchor", len(frame))
    return order_by_ratio(with_ratio(frame))


def compute_curve_coordinates(output: Any, population: Any) -> HooverCurve:
    """
    Compute the coordinates used to plot a Hoover curve.

    Args:
        output: per-region output counts. A matrix or DataFrame contributes
            its first column only.
        population: per-region population counts, in the same region order.

    Returns:
        HooverCurve with index-aligned cumulative population and output
        shares, each non-decreasing and ending at 1.0. Length is the number
        of complete regions plus one for the anchor.

    Raises:
        ShapeMismatchError: the two vectors differ in length.
        InvalidInputError: non-numeric, negative or infinite values, no complete
            region, or a zero grand total of output or population.
    """
    frame = region_frame(output, population)
    cum_out = cumulative_shares(frame["output"].to_numpy(), "output")
    cum_pop = cumulative_shares(frame["population"].to_numpy(), "population")
    return HooverCurve(
        cumulative_population_share=cum_pop,
        cumulative_output_share=cum_out,
    )


__all__ = [
    "HooverCurve",
    "prepend_anchor",
    "drop_incomplete",
    "with_ratio",
    "order_by_ratio",
    "cumulative_shares",
    "region_frame",
    "compute_curve_coordinates",
]
