from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure project root on sys.path for direct script execution
root = Path(__file__).resolve().parents[1]
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from campus_timetable.cli.main import run_pipeline
from campus_timetable.config import load_config


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Build the weekly timetable and write its outputs")
    ap.add_argument("--data", type=Path, help="JSON file with reference data and lesson requests")
    ap.add_argument("--outputs", type=Path, help="Directory for validation.json, timetable.csv, audit.txt")
    ap.add_argument("--logs", type=Path, help="Directory for the log file")
    ap.add_argument("--log-level", help="DEBUG, INFO, WARNING")
    ap.add_argument("--quiet", action="store_true", help="Print only the validation report")
    args = ap.parse_args(argv)

    cfg = load_config(
        root,
        {
            "data_file": args.data,
            "outputs_dir": args.outputs,
            "logs_dir": args.logs,
            "log_level": args.log_level,
        },
    )
    csv, validation, audit = run_pipeline(root, cfg)
    if not args.quiet:
        print(csv)
    print(validation)
    if not args.quiet:
        print(audit)
    # Non-zero exit when the stored timetable holds any clash
    return 0 if "clash_count: 0" in validation.splitlines() else 1


if __name__ == "__main__":
    raise SystemExit(main())
