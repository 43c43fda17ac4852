"""Builds the diagnostic, progress and feedback reports for a student."""

from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from core.dates import format_date, format_date_short
from core.models import Dataset, Student, StudentResponse
from core.scoring import strand_scores, total_score, wrong_answers
from core.selection import chronological, completed_responses, most_recent
from utils.error_handler import InvalidReportTypeError
from utils.logger import get_logger

logger = get_logger()


class ReportKind(Enum):
    DIAGNOSTIC = 1
    PROGRESS = 2
    FEEDBACK = 3

    @classmethod
    def parse(cls, value: Union["ReportKind", int, str]) -> "ReportKind":
        """Resolves a report selector given as the enum, its number or its name.

        Raises:
            InvalidReportTypeError: If the value names none of the three reports.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            if text.isdecimal():
                try:
                    value = int(text)
                except ValueError:
                    raise InvalidReportTypeError(value) from None
            else:
                try:
                    return cls[text.upper()]
                except KeyError:
                    raise InvalidReportTypeError(value) from None
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        raise InvalidReportTypeError(value)


def _text(value: Optional[str]) -> str:
    return "" if value is None else value


class ReportGenerator:
    """Generates one of the three text reports from a dataset snapshot."""

    def __init__(self):
        self._handlers: Dict[ReportKind, Callable[[Student, List[StudentResponse], Dataset], str]] = {
            ReportKind.DIAGNOSTIC: self._diagnostic_report,
            ReportKind.PROGRESS: self._progress_report,
            ReportKind.FEEDBACK: self._feedback_report,
        }

    def generate(self, student_id: str, kind: Union[ReportKind, int, str], dataset: Dataset) -> str:
        """Generates the requested report for a student.

        Args:
            student_id: Id of the student the report is about.
            kind: The report to build, see ReportKind.parse for accepted values.
            dataset: The loaded data snapshot.

        Returns:
            The report text, or a short notice if the student has no completed attempts.

        Raises:
            InvalidReportTypeError: If `kind` is not a known report.
            RecordNotFoundError: If the student or any referenced record is missing.
        """
        report_kind = ReportKind.parse(kind)
        student = dataset.find_student(student_id)
        logger.info(f"Generating {report_kind.name.lower()} report for student {student_id}")

        completed = completed_responses(student_id, dataset.responses)
        if not completed:
            logger.info(f"No completed assessments for student {student_id}")
            return f"No completed assessments found for {student.full_name}"

        return self._handlers[report_kind](student, completed, dataset)

    def _diagnostic_report(self, student: Student, completed: List[StudentResponse], dataset: Dataset) -> str:
        recent = most_recent(completed)
        assessment = dataset.find_assessment(recent.assessment_id)

        scores = strand_scores(recent, dataset.question_index)
        logger.debug(f"Strand scores for response {recent.id}: {scores}")
        total_correct = sum(s.correct for s in scores.values())
        total_questions = sum(s.total for s in scores.values())

        completed_date = format_date(recent.completed)

        report = f"{student.full_name} recently completed {assessment.name} assessment on {completed_date}\n"
        report += f"He got {total_correct} questions right out of {total_questions}. Details by strand given below:\n\n"
        for strand, score in scores.items():
            report += f"{strand}: {score.correct} out of {score.total} correct\n"
        return report

    def _progress_report(self, student: Student, completed: List[StudentResponse], dataset: Dataset) -> str:
        attempts = chronological(completed)
        assessment = dataset.find_assessment(attempts[0].assessment_id)

        report = (f"{student.full_name} has completed {assessment.name} assessment "
                  f"{len(attempts)} times in total. Date and raw score given below:\n\n")

        correct_counts = []
        for response in attempts:
            score = total_score(response, dataset.question_index)
            correct_counts.append(score.correct)
            report += f"Date: {format_date_short(response.completed)}, Raw Score: {score.correct} out of {score.total}\n"

        if len(correct_counts) > 1:
            improvement = correct_counts[-1] - correct_counts[0]
            report += (f"\n{student.full_name} got {improvement} more correct in the recent "
                       f"completed assessment than the oldest")
        return report

    def _feedback_report(self, student: Student, completed: List[StudentResponse], dataset: Dataset) -> str:
        recent = most_recent(completed)
        assessment = dataset.find_assessment(recent.assessment_id)

        score = total_score(recent, dataset.question_index)
        completed_date = format_date(recent.completed)

        report = f"{student.full_name} recently completed {assessment.name} assessment on {completed_date}\n"
        report += f"He got {score.correct} questions right out of {score.total}. Feedback for wrong answers given below\n\n"

        wrong = wrong_answers(recent, dataset.question_index)
        if not wrong:
            report += "Perfect score! No wrong answers to show feedback for."
            return report

        for answer in wrong:
            report += f"Question: {answer.question.stem}\n"
            report += f"Your answer: {_text(answer.user_answer.key)} with value {_text(answer.user_answer.value)}\n"
            report += f"Right answer: {_text(answer.correct_answer.key)} with value {_text(answer.correct_answer.value)}\n"
            report += f"Hint: {answer.question.config.hint}\n\n"
        return report
