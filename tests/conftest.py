"""Shared fixtures: a small numeracy dataset with three students."""

import json
import os
import tempfile

# Keep test runs from writing log files into the working directory
os.environ.setdefault(
    "ASSESSMENT_LOG_FILE", os.path.join(tempfile.gettempdir(), "assessment_reports_tests.log")
)

import pytest

from core.models import Dataset


def _options(*values):
    labels = "ABCD"
    return [
        {"id": f"option{i + 1}", "label": labels[i], "value": value}
        for i, value in enumerate(values)
    ]


def _question(question_id, stem, strand, values, key, hint):
    return {
        "id": question_id,
        "stem": stem,
        "type": "multiple-choice",
        "strand": strand,
        "config": {"options": _options(*values), "key": key, "hint": hint},
    }


def _response(response_id, student_id, completed, answers):
    return {
        "id": response_id,
        "assessmentId": "assessment1",
        "assigned": "14/12/2019 10:31:00",
        "started": "16/12/2019 10:00:00",
        "completed": completed,
        "student": {"id": student_id, "yearLevel": 3},
        "responses": [{"questionId": q, "response": r} for q, r in answers],
        "results": {"rawScore": 0},
    }


STUDENTS = [
    {"id": "student1", "firstName": "Tony", "lastName": "Stark", "yearLevel": 6},
    {"id": "student2", "firstName": "Steve", "lastName": "Rogers", "yearLevel": 6},
    {"id": "student3", "firstName": "Bruce", "lastName": "Banner", "yearLevel": 6},
]

ASSESSMENTS = [
    {
        "id": "assessment1",
        "name": "Numeracy",
        "questions": [{"questionId": f"numeracy{n}", "position": n} for n in range(1, 6)],
    }
]

QUESTIONS = [
    _question("numeracy1", "What is the value of 2 + 3 x 5?", "Number and Algebra",
              ["10", "15", "17", "25"], "option3",
              "Work out the multiplication sign BEFORE the addition sign"),
    _question("numeracy2", "How many sides does a hexagon have?", "Measurement and Geometry",
              ["6", "5", "8", "7"], "option1", "Hex means six"),
    _question("numeracy3", "What is 12 divided by 4?", "Number and Algebra",
              ["4", "3", "8", "16"], "option2", "How many groups of 4 make 12?"),
    _question("numeracy4", "A coin is tossed. What is the chance of heads?", "Statistics and Probability",
              ["0", "1", "1 in 4", "1 in 2"], "option4", "A coin has two sides"),
    _question("numeracy5", "What is the perimeter of a 5 cm square?", "Measurement and Geometry",
              ["20 cm", "25 cm", "10 cm", "15 cm"], "option1", "Add the length of all four sides"),
]

RESPONSES = [
    # Listed newest first so ordering is exercised
    _response("studentResponse2", "student1", "16/12/2021 10:46:00", [
        ("numeracy1", "option3"), ("numeracy2", "option1"), ("numeracy3", "option2"),
        ("numeracy4", "option4"), ("numeracy5", "option2"),
    ]),
    _response("studentResponse1", "student1", "16/12/2019 10:46:00", [
        ("numeracy1", "option1"), ("numeracy2", "option1"), ("numeracy3", "option2"),
        ("numeracy4", "option1"), ("numeracy5", "option2"),
    ]),
    _response("studentResponse3", "student1", "", [
        ("numeracy1", "option3"),
    ]),
    _response("studentResponse4", "student2", "14/12/2020 15:05:00", [
        ("numeracy1", "option3"), ("numeracy2", "option1"), ("numeracy3", "option2"),
        ("numeracy4", "option4"), ("numeracy5", "option1"),
    ]),
]


@pytest.fixture
def raw_data():
    return {
        "students": [dict(s) for s in STUDENTS],
        "assessments": json.loads(json.dumps(ASSESSMENTS)),
        "questions": json.loads(json.dumps(QUESTIONS)),
        "responses": json.loads(json.dumps(RESPONSES)),
    }


@pytest.fixture
def dataset(raw_data):
    return Dataset.from_json(**raw_data)


@pytest.fixture
def data_dir(tmp_path, raw_data):
    files = {
        "students.json": raw_data["students"],
        "assessments.json": raw_data["assessments"],
        "questions.json": raw_data["questions"],
        "student-responses.json": raw_data["responses"],
    }
    for name, records in files.items():
        (tmp_path / name).write_text(json.dumps(records), encoding="utf-8")
    return tmp_path
