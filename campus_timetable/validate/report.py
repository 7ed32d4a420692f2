from __future__ import annotations

import json
from pathlib import Path
from typing import Dict


def write_validation_report(report: Dict[str, object], outputs_dir: Path) -> Path:
    outputs_dir.mkdir(parents=True, exist_ok=True)
    path = outputs_dir / "validation.json"
    with path.open("w", encoding="utf-8") as f:
        json.dump(report, f, indent=2)
    return path


def format_validation_report(report: Dict[str, object]) -> str:
    lines: list[str] = []
    lines.append(f"lesson_count: {report.get('lesson_count')}")
    lines.append(f"clash_count: {report.get('clash_count')}")
    for key in ("professor_clashes", "classroom_clashes"):
        clashes = report.get(key, [])
        lines.append(f"{key}: {len(clashes)}")
        for c in clashes:
            lines.append(f"  - {c}")
    dup = report.get("duplicate_lesson_ids", [])
    lines.append(f"duplicate_lesson_ids: {len(dup)}")
    dangling = report.get("dangling_references", [])
    lines.append(f"dangling_references: {len(dangling)}")
    for d in dangling:
        lines.append(f"  - {d}")
    lines.append("utilization_by_classroom:")
    util = report.get("utilization_by_classroom", {})
    if isinstance(util, dict):
        for room, pct in util.items():
            lines.append(f"  - {room}: {pct:.2f}%")
    return "\n".join(lines)
