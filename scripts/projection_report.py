#!/usr/bin/env python3
"""Rent vs Buy projection report.

Runs the 30-year projection for one set of inputs, then the standard
sensitivity sweep and the risk scores at years 0/3/5/10, and logs a summary.
Optionally writes the annual schedule and the tornado table as CSV.

Usage:
    python scripts/projection_report.py [--inputs scenario.json] [--out-dir reports]

The JSON file holds a ScenarioInputs document (profile, rent, buy, sentiment,
optional stress). Without one, the built-in defaults are used.
"""
import argparse
import json
import logging
import sys
import time
from pathlib import Path

import pandas as pd

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from rentbuy.config import settings  # noqa: E402
from rentbuy.defaults import DEFAULT_INPUTS  # noqa: E402
from rentbuy.models.inputs import ScenarioInputs  # noqa: E402
from rentbuy.models.risk import ANALYSIS_YEARS, RiskPath  # noqa: E402
from rentbuy.services.risk_service import assess_risk  # noqa: E402
from rentbuy.services.sensitivity_service import run_standard_sensitivity  # noqa: E402
from rentbuy.services.summary_service import summarize  # noqa: E402
from rentbuy.simulation.engine import project_inputs  # noqa: E402

logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s  %(message)s", datefmt="%H:%M:%S")
logger = logging.getLogger(__name__)


def load_inputs(path: Path | None) -> ScenarioInputs:
    if path is None:
        return DEFAULT_INPUTS
    return ScenarioInputs.model_validate(json.loads(path.read_text(encoding="utf-8")))


def schedule_frame(summary) -> pd.DataFrame:
    return pd.DataFrame([row.model_dump() for row in summary.schedule])


def tornado_frame(report) -> pd.DataFrame:
    rows = []
    for r in report.tornado():
        rows.append({
            "id": r.id,
            "name": r.name,
            "variable": r.variable.value,
            "magnitude": r.magnitude,
            "delta_buy": r.delta_buy_abs,
            "delta_rent": r.delta_rent_abs,
            "delta_spread": r.delta_spread,
            "elasticity": r.elasticity,
            "flipped": r.flipped,
        })
    return pd.DataFrame(rows)


def main():
    parser = argparse.ArgumentParser(description="Rent vs Buy projection and stress-test report")
    parser.add_argument("--inputs", help="Path to a ScenarioInputs JSON file (default: built-in defaults)")
    parser.add_argument("--month", type=int, default=360, help="Month to summarize (default: 360)")
    parser.add_argument("--out-dir", help="Write schedule.csv and tornado.csv to this directory")
    args = parser.parse_args()

    inputs_path = Path(args.inputs) if args.inputs else None
    if inputs_path is not None and not inputs_path.exists():
        logger.error("Inputs not found: %s", inputs_path)
        sys.exit(1)

    t0 = time.time()
    inputs = load_inputs(inputs_path)
    options = settings.engine_options()

    projections = project_inputs(inputs, options)
    summary = summarize(inputs, args.month, projections=projections, options=options)
    logger.info(
        "Month %d: rent %.0f, buy %.0f, leader %s, break-even month %s",
        summary.selected_month, summary.net_worth_rent, summary.net_worth_buy,
        summary.winner or "tie", summary.break_even_month or "never",
    )
    for warning in summary.warnings:
        logger.warning("%s (shortfall %.0f)", warning.message, warning.shortfall)

    report = run_standard_sensitivity(inputs, options)
    for r in report.tornado():
        logger.info(
            "  %-28s spread %+12.0f  elasticity %6.2f%%%s",
            r.name, r.delta_spread, r.elasticity, "  FLIPS" if r.flipped else "",
        )

    for year in ANALYSIS_YEARS:
        for path in RiskPath:
            assessment = assess_risk(
                projections, inputs.profile, year, path,
                default_living_expenses=settings.DEFAULT_LIVING_EXPENSES,
            )
            logger.info(
                "Risk year %2d %-4s  score %5.1f  %s",
                year, path.value, assessment.total_score, assessment.tier,
            )

    if args.out_dir:
        out_dir = Path(args.out_dir)
        out_dir.mkdir(parents=True, exist_ok=True)
        schedule_frame(summary).to_csv(out_dir / "schedule.csv", index=False)
        tornado_frame(report).to_csv(out_dir / "tornado.csv", index=False)
        logger.info("Wrote CSVs to %s", out_dir)

    logger.info("Done in %.2fs", time.time() - t0)


if __name__ == "__main__":
    main()
