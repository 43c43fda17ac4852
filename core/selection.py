"""Selection and ordering of a student's assessment attempts."""

from datetime import datetime
from typing import Iterable, List, Sequence

from core.dates import parse_date
from core.models import StudentResponse


def _completed_at(response: StudentResponse) -> datetime:
    # Unreadable completion dates sort before every real one
    return parse_date(response.completed) or datetime.min


def completed_responses(student_id: str, responses: Iterable[StudentResponse]) -> List[StudentResponse]:
    """Returns the student's finished attempts in their original order."""
    return [r for r in responses if r.student_id == student_id and r.is_completed]


def most_recent(responses: Sequence[StudentResponse]) -> StudentResponse:
    """Returns the attempt completed last; the earliest listed wins a tie.

    Raises:
        ValueError: If `responses` is empty.
    """
    if not responses:
        raise ValueError("most_recent() requires at least one response")
    # sorted() is stable, also with reverse=True
    return sorted(responses, key=_completed_at, reverse=True)[0]


def chronological(responses: Iterable[StudentResponse]) -> List[StudentResponse]:
    """Returns the attempts ordered oldest first, keeping input order for equal times."""
    return sorted(responses, key=_completed_at)
