"""Writes a small sample dataset for trying the reports out."""

import json
import os
from typing import Any, Dict, List, Optional

import config
from utils.logger import get_logger

logger = get_logger()

SAMPLE_STUDENTS: List[Dict[str, Any]] = [
    {"id": "student1", "firstName": "Tony", "lastName": "Stark", "yearLevel": 6},
    {"id": "student2", "firstName": "Steve", "lastName": "Rogers", "yearLevel": 6},
]

SAMPLE_ASSESSMENTS: List[Dict[str, Any]] = [
    {
        "id": "assessment1",
        "name": "Numeracy",
        "questions": [{"questionId": "numeracy1", "position": 1}],
    }
]

SAMPLE_QUESTIONS: List[Dict[str, Any]] = [
    {
        "id": "numeracy1",
        "stem": "What is the value of 2 + 3 x 5?",
        "type": "multiple-choice",
        "strand": "Number and Algebra",
        "config": {
            "options": [
                {"id": "option1", "label": "A", "value": "10"},
                {"id": "option2", "label": "B", "value": "15"},
                {"id": "option3", "label": "C", "value": "17"},
                {"id": "option4", "label": "D", "value": "25"},
            ],
            "key": "option3",
            "hint": "Work out the multiplication sign BEFORE the addition sign",
        },
    }
]

SAMPLE_RESPONSES: List[Dict[str, Any]] = [
    {
        "id": "studentResponse1",
        "assessmentId": "assessment1",
        "assigned": "14/12/2019 10:31:00",
        "started": "16/12/2019 10:00:00",
        "completed": "16/12/2019 10:46:00",
        "student": {"id": "student1", "yearLevel": 3},
        "responses": [{"questionId": "numeracy1", "response": "option1"}],
        "results": {"rawScore": 0},
    }
]


def generate_sample_data(data_dir: Optional[str] = None) -> List[str]:
    """Writes the sample JSON files into `data_dir`, creating it if needed.

    Returns:
        The paths of the files written.
    """
    data_dir = data_dir if data_dir is not None else config.DATA_DIR
    os.makedirs(data_dir, exist_ok=True)

    files = {
        config.STUDENTS_FILE: SAMPLE_STUDENTS,
        config.ASSESSMENTS_FILE: SAMPLE_ASSESSMENTS,
        config.QUESTIONS_FILE: SAMPLE_QUESTIONS,
        config.RESPONSES_FILE: SAMPLE_RESPONSES,
    }
    written = []
    for filename, records in files.items():
        path = os.path.join(data_dir, filename)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(records, f, indent=4)
        written.append(path)
        logger.debug(f"Wrote {len(records)} sample records to {path}")

    logger.info(f"Sample data generated in {data_dir}")
    return written
