import os

import main


def run(capsys, *args):
    code = main.main(list(args))
    return code, capsys.readouterr().out


def test_generate_sample_data(tmp_path, capsys):
    target = tmp_path / "data"
    code, _ = run(capsys, "--generate-sample-data", "--data-dir", str(target))
    assert code == 0
    assert sorted(os.listdir(target)) == [
        "assessments.json", "questions.json", "student-responses.json", "students.json",
    ]


def test_prints_report(data_dir, capsys):
    code, out = run(capsys, "--data-dir", str(data_dir), "--student-id", "student1", "--report", "2")
    assert code == 0
    assert "REPORT OUTPUT" in out
    assert "Date: 16th December 2019, Raw Score: 2 out of 5" in out
    assert "Tony Stark got 2 more correct in the recent completed assessment than the oldest" in out


def test_unknown_student_exits_non_zero(data_dir, capsys):
    code, out = run(capsys, "--data-dir", str(data_dir), "--student-id", "nobody", "--report", "1")
    assert code == 1
    assert "Student ID 'nobody' not found" in out


def test_invalid_report_type_exits_non_zero(data_dir, capsys):
    code, out = run(capsys, "--data-dir", str(data_dir), "--student-id", "student1", "--report", "7")
    assert code == 1
    assert "REPORT OUTPUT" not in out


def test_missing_data_exits_non_zero(tmp_path, capsys):
    code, out = run(capsys, "--data-dir", str(tmp_path / "empty"), "--student-id", "student1", "--report", "1")
    assert code == 1
    assert "Data file not found" in out


def test_invalid_report_type_checked_before_loading(tmp_path, capsys):
    code, out = run(capsys, "--data-dir", str(tmp_path / "empty"), "--student-id", "student1", "--report", "9")
    assert code == 1
    assert "Invalid report type: 9" in out
    assert "Data file not found" not in out


def test_non_ascii_digit_report_type_exits_non_zero(data_dir, capsys):
    code, out = run(capsys, "--data-dir", str(data_dir), "--student-id", "student1", "--report", "²")
    assert code == 1
    assert "Invalid report type: ²" in out
