"""Validation of the student id and report selector entered by the user."""

from typing import Union

from core.models import Dataset
from core.reports import ReportKind
from utils.error_handler import ValidationError


class InputValidator:
    """Checks user input against the loaded dataset before a report is generated."""

    def validate(self, student_id: str, report_type: Union[ReportKind, int, str], dataset: Dataset) -> ReportKind:
        """Validates both inputs and returns the resolved report kind.

        The report type is checked first since it does not depend on the data.

        Raises:
            InvalidReportTypeError: If the report type is not 1, 2 or 3.
            ValidationError: If the student id is empty or unknown.
        """
        report_kind = ReportKind.parse(report_type)
        self.validate_student_id(student_id, dataset)
        return report_kind

    def validate_student_id(self, student_id: str, dataset: Dataset) -> None:
        if not student_id:
            raise ValidationError("Student ID cannot be empty")
        if not dataset.has_student(student_id):
            raise ValidationError(f"Student ID '{student_id}' not found")
