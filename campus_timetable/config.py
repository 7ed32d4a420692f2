from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict

ENV_LOG_LEVEL = "CAMPUS_TIMETABLE_LOG_LEVEL"
ENV_DATA = "CAMPUS_TIMETABLE_DATA"


@dataclass
class EngineConfig:
    logs_dir: Path
    outputs_dir: Path
    data_file: Path
    log_level: str = "INFO"


def load_config(project_root: Path, overrides: Dict[str, Any] | None = None) -> EngineConfig:
    # Precedence: explicit overrides, then environment, then defaults under project_root
    cfg = EngineConfig(
        logs_dir=project_root / "logs",
        outputs_dir=project_root / "outputs",
        data_file=project_root / "data" / "sample_week.json",
    )
    if os.environ.get(ENV_LOG_LEVEL):
        cfg.log_level = os.environ[ENV_LOG_LEVEL].upper()
    if os.environ.get(ENV_DATA):
        cfg.data_file = Path(os.environ[ENV_DATA])
    clean = {k: v for k, v in (overrides or {}).items() if v is not None}
    for key in ("logs_dir", "outputs_dir", "data_file"):
        if key in clean:
            clean[key] = Path(clean[key])
    if "log_level" in clean:
        clean["log_level"] = str(clean["log_level"]).upper()
    unknown = set(clean) - {"logs_dir", "outputs_dir", "data_file", "log_level"}
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")
    return replace(cfg, **clean)
