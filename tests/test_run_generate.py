from __future__ import annotations

import json
from pathlib import Path

from scripts.run_generate import main


def test_script_writes_to_overridden_outputs(tmp_path: Path, capsys) -> None:
    out = tmp_path / "outputs"
    code = main(["--outputs", str(out), "--logs", str(tmp_path / "logs"), "--quiet"])
    assert code == 0
    assert "clash_count: 0" in capsys.readouterr().out
    assert (out / "timetable.csv").exists()
    assert json.loads((out / "validation.json").read_text(encoding="utf-8"))["lesson_count"] == 5


def test_script_reads_alternate_data_file(tmp_path: Path) -> None:
    doc = {
        "classrooms": [{"number": "A1", "capacity": 10}],
        "courses": [{"id": 1, "name": "Logic", "type": "Seminar"}],
        "lessons": [
            {"courseId": 1, "professorId": 1, "classroomNumber": "A1", "dayOfWeek": "Friday", "timeSlot": "8:30-10:00"}
        ],
    }
    data = tmp_path / "week.json"
    data.write_text(json.dumps(doc), encoding="utf-8")
    out = tmp_path / "outputs"
    assert main(["--data", str(data), "--outputs", str(out), "--logs", str(tmp_path / "logs"), "--quiet"]) == 0
    schedule = json.loads((out / "json" / "schedule.json").read_text(encoding="utf-8"))
    assert schedule == [
        {
            "id": 0,
            "courseId": 1,
            "professorId": 1,
            "classroomNumber": "A1",
            "dayOfWeek": "Friday",
            "timeSlot": "8:30-10:00",
        }
    ]
