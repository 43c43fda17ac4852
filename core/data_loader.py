"""Loads the JSON dataset files into a Dataset snapshot."""

import json
import os
from typing import Any, List, Optional

import config
from core.models import Dataset
from utils.error_handler import DataLoadError
from utils.logger import get_logger

logger = get_logger()


class DataLoader:
    """Reads students, assessments, questions and responses from a data directory."""

    def __init__(self, data_dir: Optional[str] = None):
        self.data_dir = data_dir if data_dir is not None else config.DATA_DIR

    def load_all(self) -> Dataset:
        """Loads all four data files.

        Raises:
            DataLoadError: If a file is missing, unreadable or not valid JSON.
        """
        students = self._load_json_file(config.STUDENTS_FILE)
        assessments = self._load_json_file(config.ASSESSMENTS_FILE)
        questions = self._load_json_file(config.QUESTIONS_FILE)
        responses = self._load_json_file(config.RESPONSES_FILE)

        try:
            dataset = Dataset.from_json(students, assessments, questions, responses)
        except (KeyError, TypeError, AttributeError) as e:
            raise DataLoadError(f"Malformed record in {self.data_dir}: {e!r}") from e

        logger.info(
            f"Loaded {len(dataset.students)} students, {len(dataset.assessments)} assessments, "
            f"{len(dataset.questions)} questions and {len(dataset.responses)} responses from {self.data_dir}"
        )
        return dataset

    def _load_json_file(self, filename: str) -> List[Any]:
        filepath = os.path.join(self.data_dir, filename)

        if not os.path.exists(filepath):
            raise DataLoadError(f"Data file not found: {filepath}")

        try:
            with open(filepath, "r", encoding="utf-8") as f:
                content = f.read()
        except OSError as e:
            raise DataLoadError(f"Could not read file: {filepath}") from e

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise DataLoadError(f"Invalid JSON in file {filename}: {e.msg}") from e

        if not isinstance(data, list):
            raise DataLoadError(f"Expected a list of records in file {filename}")

        logger.debug(f"Read {len(data)} records from {filepath}")
        return data
