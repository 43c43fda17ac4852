import json

import pytest

from core.data_loader import DataLoader
from core.reports import ReportGenerator, ReportKind
from core.sample_data import generate_sample_data
from utils.error_handler import DataLoadError


def test_load_all_builds_dataset(data_dir):
    dataset = DataLoader(str(data_dir)).load_all()
    assert [s.id for s in dataset.students] == ["student1", "student2", "student3"]
    assert dataset.find_student("student1").full_name == "Tony Stark"
    assert dataset.find_assessment("assessment1").name == "Numeracy"
    assert len(dataset.questions) == 5
    assert len(dataset.responses) == 4


def test_incomplete_response_has_empty_completed(data_dir):
    dataset = DataLoader(str(data_dir)).load_all()
    unfinished = [r for r in dataset.responses if r.id == "studentResponse3"][0]
    assert unfinished.completed == ""
    assert not unfinished.is_completed


def test_extra_fields_are_ignored(data_dir):
    students = json.loads((data_dir / "students.json").read_text())
    students[0]["nickname"] = "Iron Man"
    (data_dir / "students.json").write_text(json.dumps(students))
    dataset = DataLoader(str(data_dir)).load_all()
    assert dataset.find_student("student1").first_name == "Tony"


def test_missing_file(data_dir):
    (data_dir / "questions.json").unlink()
    with pytest.raises(DataLoadError, match="Data file not found"):
        DataLoader(str(data_dir)).load_all()


def test_invalid_json(data_dir):
    (data_dir / "assessments.json").write_text("[{not json")
    with pytest.raises(DataLoadError, match="Invalid JSON in file assessments.json"):
        DataLoader(str(data_dir)).load_all()


def test_record_without_id(data_dir):
    (data_dir / "students.json").write_text(json.dumps([{"firstName": "Nobody"}]))
    with pytest.raises(DataLoadError, match="Malformed record"):
        DataLoader(str(data_dir)).load_all()


def test_sample_data_round_trip(tmp_path):
    target = tmp_path / "sample"
    written = generate_sample_data(str(target))
    assert len(written) == 4

    dataset = DataLoader(str(target)).load_all()
    report = ReportGenerator().generate("student1", ReportKind.FEEDBACK, dataset)
    assert report.startswith("Tony Stark recently completed Numeracy assessment on 16th December 2019 10:46 AM\n")
    assert "Your answer: option1 with value A - 10\n" in report
    assert "Hint: Work out the multiplication sign BEFORE the addition sign\n" in report
