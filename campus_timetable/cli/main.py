from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Tuple

import typer

from ..analytics.queries import (
    find_available_classrooms,
    get_classroom_utilization,
    get_professor_schedule,
)
from ..config import EngineConfig, load_config
from ..data.loader import load_data, populate_store
from ..data.store import EntityStore
from ..models.lesson import Lesson
from ..models.period import Day, TimeSlot
from ..render.csv_out import csv_blocks, write_csv_blocks
from ..render.summary import summary_lines
from ..scheduler.mutator import ScheduleMutator
from ..validate.checks import audit_store
from ..validate.report import format_validation_report, write_validation_report

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _setup_logging(config: EngineConfig) -> None:
    config.logs_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(config.logs_dir / "campus_timetable.log", encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )
    logging.getLogger().setLevel(getattr(logging, config.log_level, logging.INFO))


def build_timetable(config: EngineConfig) -> Tuple[EntityStore, ScheduleMutator, List[str]]:
    store = EntityStore()
    mutator = ScheduleMutator(store)
    audit = populate_store(store, mutator, load_data(config.data_file))
    return store, mutator, audit


def run_pipeline(project_root: Path, config: EngineConfig | None = None) -> tuple[str, str, str]:
    config = config or load_config(project_root)
    _setup_logging(config)
    store, _, load_audit = build_timetable(config)

    report = audit_store(store)
    outputs_dir = config.outputs_dir
    write_validation_report(report, outputs_dir)
    csv = csv_blocks(store)
    write_csv_blocks(csv, outputs_dir)
    # Persist the lesson list as JSON
    json_dir = outputs_dir / "json"
    json_dir.mkdir(parents=True, exist_ok=True)
    with (json_dir / "schedule.json").open("w", encoding="utf-8") as f:
        json.dump([x.to_dict() for x in store.iter_lessons()], f, indent=2)

    audit_text = "\n".join(["Lesson requests:"] + load_audit + [""] + ["Summary:"] + summary_lines(store))
    with (outputs_dir / "audit.txt").open("w", encoding="utf-8") as f:
        f.write(audit_text)

    return csv, format_validation_report(report), audit_text


def run_demo(config: EngineConfig) -> List[str]:
    """Replay the scripted walkthrough: a clashing add, a room move and a cancellation."""
    store, mutator, _ = build_timetable(config)
    out: List[str] = []
    res = mutator.add_lesson(Lesson(5, 1, "201", Day.MONDAY, TimeSlot.FIRST))
    verdict = "added" if res else f"rejected ({res.failure.value})"
    out.append(f"Add course 5 for professor 1 on Monday {TimeSlot.FIRST.value}: {verdict}")
    res = mutator.reassign_classroom(0, "202")
    out.append(f"Move lesson 0 to room 202: {'ok' if res else res.failure.value}")
    if res:
        out.append(f"  now: {json.dumps(res.lesson.to_dict())}")
    res = mutator.cancel_lesson(1)
    out.append(f"Cancel lesson 1: {'ok' if res else res.failure.value}")
    out.append(f"Lessons after cancellation: {store.lesson_count}")
    return out


app = typer.Typer(add_completion=False, help="Weekly campus timetable")


def _config(data: Path | None, log_level: str | None) -> EngineConfig:
    cfg = load_config(PROJECT_ROOT, {"data_file": data, "log_level": log_level})
    _setup_logging(cfg)
    return cfg


@app.command("generate")
def cli_generate(
    data: Path | None = typer.Option(None, help="JSON file with reference data and lesson requests"),
    log_level: str | None = typer.Option(None, help="Log level"),
) -> None:
    cfg = load_config(PROJECT_ROOT, {"data_file": data, "log_level": log_level})
    csv, validation, audit = run_pipeline(PROJECT_ROOT, cfg)
    typer.echo(csv)
    typer.echo(validation)
    typer.echo(audit)


@app.command("validate")
def cli_validate(data: Path | None = typer.Option(None, help="JSON data file")) -> None:
    cfg = load_config(PROJECT_ROOT, {"data_file": data})
    _, validation, _ = run_pipeline(PROJECT_ROOT, cfg)
    typer.echo(validation)


@app.command("export-csv")
def cli_export_csv(data: Path | None = typer.Option(None, help="JSON data file")) -> None:
    cfg = load_config(PROJECT_ROOT, {"data_file": data})
    csv, _, _ = run_pipeline(PROJECT_ROOT, cfg)
    typer.echo(csv)


@app.command("free-rooms")
def cli_free_rooms(
    day: str = typer.Argument(..., help="Weekday, e.g. Monday"),
    slot: str = typer.Argument(..., help="Time slot label, e.g. 8:30-10:00"),
    data: Path | None = typer.Option(None, help="JSON data file"),
) -> None:
    store, _, _ = build_timetable(_config(data, None))
    try:
        rooms = find_available_classrooms(store, slot, day)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    typer.echo("\n".join(rooms))


@app.command("agenda")
def cli_agenda(professor_id: int, data: Path | None = typer.Option(None, help="JSON data file")) -> None:
    store, _, _ = build_timetable(_config(data, None))
    for x in get_professor_schedule(store, professor_id):
        typer.echo(f"{x.id}\t{x.day.value}\t{x.time_slot.value}\troom {x.classroom_number}\tcourse {x.course_id}")


@app.command("utilization")
def cli_utilization(room: str, data: Path | None = typer.Option(None, help="JSON data file")) -> None:
    store, _, _ = build_timetable(_config(data, None))
    typer.echo(f"{get_classroom_utilization(store, room):.2f}%")


@app.command("demo")
def cli_demo(data: Path | None = typer.Option(None, help="JSON data file")) -> None:
    for line in run_demo(_config(data, None)):
        typer.echo(line)


if __name__ == "__main__":  # pragma: no cover
    app()
