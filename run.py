import argparse
import sys
from pathlib import Path
import pandas as pd

from config.paths import SAMPLE_BATCH_PATH
from core.config import SchedulerConfig
from exceptions.custom_errors import CUSTOM_ERRORS
from scheduler.builder import build_lab_schedule
from scheduler.extractor import schedule_to_frame, unscheduled_to_frame, utilisation_summary
from utils.loader import load_lab_data
from utils.logger import logger


def export_output(path: Path, schedule_df: pd.DataFrame, summary_df: pd.DataFrame, dropped_df: pd.DataFrame):
    """Write the schedule to CSV, or to a workbook with schedule / utilisation / unscheduled sheets."""
    if path.suffix.lower() == ".xlsx":
        with pd.ExcelWriter(path) as writer:
            schedule_df.to_excel(writer, sheet_name="schedule", index=False)
            summary_df.to_excel(writer, sheet_name="utilisation", index=False)
            dropped_df.to_excel(writer, sheet_name="unscheduled", index=False)
    else:
        schedule_df.to_csv(path, index=False)


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="Lab sample scheduler – batch runner")
    p.add_argument("batch", nargs="?", default=str(SAMPLE_BATCH_PATH), help="Lab batch (.json or .xlsx)")
    p.add_argument("--lenient", action="store_true", help="Skip samples with unmapped analysis types instead of failing")
    p.add_argument("--out", type=str, default=None, help="Optional output file (.csv or .xlsx)")
    args = p.parse_args(argv)

    try:
        data = load_lab_data(args.batch)
        config = SchedulerConfig.from_constants(strict=False if args.lenient else None)
        output = build_lab_schedule(data, config)
    except tuple(CUSTOM_ERRORS) as e:
        logger.error(f"❌ {type(e).__name__}: {e}")
        return 1

    schedule_df = schedule_to_frame(output)
    summary_df = utilisation_summary(output)
    dropped_df = unscheduled_to_frame(output)

    logger.info("📊 Lab schedule:\n" + (schedule_df.to_string(index=False) if not schedule_df.empty else "(empty)"))
    logger.info("📈 Metrics: " + ", ".join(f"{k}={v}" for k, v in output.metrics.model_dump().items()))
    if not summary_df.empty:
        logger.info("🔧 Utilisation:\n" + summary_df.to_string(index=False))
    if not dropped_df.empty:
        logger.warning("⚠️ Unscheduled samples:\n" + dropped_df.to_string(index=False))

    if args.out:
        export_output(Path(args.out), schedule_df, summary_df, dropped_df)
        logger.info(f"📁 Saved: {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
