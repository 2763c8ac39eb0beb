import argparse
import logging
import sys

from common.logging_setup import setup_logging
from common.settings import load_settings
from hoover.curve import compute_curve_coordinates
from hoover.errors import HooverError
from hoover.regions import load_region_table

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Hoover curve coordinates from a region table (CSV)")
    p.add_argument("--config", default="config.yaml", help="Path to YAML config")
    p.add_argument("--csv", default=None, help="Region table, overrides input.path")
    p.add_argument("--output-col", dest="output_cols", action="append", default=None,
                   help="Output column; repeat to sum several categories")
    p.add_argument("--population-col", dest="population_col", default=None)
    p.add_argument("--out", default=None, help="Write coordinates to this CSV instead of stdout")
    p.add_argument("--log-level", dest="log_level", default=None, type=str.upper,
                   choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    st = load_settings(args.config)
    setup_logging(args.log_level or st.logging.level)

    path = args.csv or st.input.path
    output_cols = args.output_cols or st.input.output_columns
    pop_col = args.population_col or st.input.population_column
    out_path = args.out or st.output.path

    try:
        output, population = load_region_table(path, output_cols, pop_col)
        curve = compute_curve_coordinates(output, population)
    except HooverError as e:
        log.error("cannot draw a Hoover curve from %s: %s", path, e)
        return 2

    frame = curve.to_frame()
    if out_path:
        frame.to_csv(out_path, index=False)
        log.info("wrote %d coordinate pair(s) to %s", len(curve), out_path)
        return 0

    prec = st.output.precision
    print("cum_pop  cum_out")
    for cp, co in zip(frame["cum_pop"], frame["cum_out"]):
        print(f"{cp:.{prec}f}  {co:.{prec}f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
