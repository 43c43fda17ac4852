"""Typed records for the assessment dataset and the read-only snapshot that holds them."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from utils.error_handler import RecordNotFoundError


@dataclass(frozen=True)
class Student:
    """A student from students.json."""
    id: str
    first_name: str
    last_name: str
    year_level: Any = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Student":
        return cls(
            id=data["id"],
            first_name=data.get("firstName", ""),
            last_name=data.get("lastName", ""),
            year_level=data.get("yearLevel"),
        )


@dataclass(frozen=True)
class Option:
    """One selectable answer of a multiple-choice question."""
    id: str
    label: str
    value: Any

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Option":
        return cls(id=data["id"], label=data.get("label", ""), value=data.get("value", ""))


@dataclass(frozen=True)
class QuestionConfig:
    options: Tuple[Option, ...]
    key: str
    hint: str = ""

    def find_option(self, option_id: str) -> Optional[Option]:
        """Returns the option with the given id, or None if there is none."""
        for option in self.options:
            if option.id == option_id:
                return option
        return None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuestionConfig":
        return cls(
            options=tuple(Option.from_dict(o) for o in data.get("options", [])),
            key=data.get("key", ""),
            hint=data.get("hint", ""),
        )


@dataclass(frozen=True)
class Question:
    """A question from questions.json; `config.key` is the id of the correct option."""
    id: str
    stem: str
    strand: str
    type: str
    config: QuestionConfig

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Question":
        return cls(
            id=data["id"],
            stem=data.get("stem", ""),
            strand=data.get("strand", ""),
            type=data.get("type", ""),
            config=QuestionConfig.from_dict(data.get("config", {})),
        )


@dataclass(frozen=True)
class AssessmentQuestion:
    question_id: str
    position: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AssessmentQuestion":
        return cls(question_id=data["questionId"], position=data.get("position", 0))


@dataclass(frozen=True)
class Assessment:
    """An assessment from assessments.json."""
    id: str
    name: str
    questions: Tuple[AssessmentQuestion, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Assessment":
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            questions=tuple(AssessmentQuestion.from_dict(q) for q in data.get("questions", [])),
        )


@dataclass(frozen=True)
class QuestionResponse:
    """The option a student picked for one question."""
    question_id: str
    response: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuestionResponse":
        return cls(question_id=data["questionId"], response=data.get("response", ""))


@dataclass(frozen=True)
class StudentResponse:
    """One attempt at an assessment. An empty `completed` means it was not finished."""
    id: str
    assessment_id: str
    student_id: str
    assigned: str = ""
    started: str = ""
    completed: str = ""
    year_level: Any = None
    responses: Tuple[QuestionResponse, ...] = ()
    raw_score: Any = None

    @property
    def is_completed(self) -> bool:
        return bool(self.completed)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StudentResponse":
        student = data.get("student") or {}
        return cls(
            id=data.get("id", ""),
            assessment_id=data["assessmentId"],
            student_id=student.get("id", ""),
            assigned=data.get("assigned") or "",
            started=data.get("started") or "",
            completed=data.get("completed") or "",
            year_level=student.get("yearLevel"),
            responses=tuple(QuestionResponse.from_dict(r) for r in data.get("responses", [])),
            raw_score=(data.get("results") or {}).get("rawScore"),
        )


def _index_by_id(records) -> Dict[str, Any]:
    index: Dict[str, Any] = {}
    for record in records:
        # First record wins, same as a front-to-back search
        index.setdefault(record.id, record)
    return index


@dataclass(frozen=True)
class Dataset:
    """Read-only snapshot of the four data collections used for one report request."""
    students: Tuple[Student, ...] = ()
    assessments: Tuple[Assessment, ...] = ()
    questions: Tuple[Question, ...] = ()
    responses: Tuple[StudentResponse, ...] = ()
    _students_by_id: Dict[str, Student] = field(init=False, repr=False, compare=False)
    _assessments_by_id: Dict[str, Assessment] = field(init=False, repr=False, compare=False)
    _questions_by_id: Dict[str, Question] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_students_by_id", _index_by_id(self.students))
        object.__setattr__(self, "_assessments_by_id", _index_by_id(self.assessments))
        object.__setattr__(self, "_questions_by_id", _index_by_id(self.questions))

    @property
    def question_index(self) -> Mapping[str, Question]:
        return self._questions_by_id

    def has_student(self, student_id: str) -> bool:
        return student_id in self._students_by_id

    def find_student(self, student_id: str) -> Student:
        try:
            return self._students_by_id[student_id]
        except KeyError:
            raise RecordNotFoundError("Student", student_id) from None

    def find_assessment(self, assessment_id: str) -> Assessment:
        try:
            return self._assessments_by_id[assessment_id]
        except KeyError:
            raise RecordNotFoundError("Assessment", assessment_id) from None

    def find_question(self, question_id: str) -> Question:
        return find_question(question_id, self._questions_by_id)

    @classmethod
    def from_json(
        cls,
        students: List[Dict[str, Any]],
        assessments: List[Dict[str, Any]],
        questions: List[Dict[str, Any]],
        responses: List[Dict[str, Any]],
    ) -> "Dataset":
        """Builds a snapshot from the decoded contents of the four JSON files."""
        return cls(
            students=tuple(Student.from_dict(s) for s in students),
            assessments=tuple(Assessment.from_dict(a) for a in assessments),
            questions=tuple(Question.from_dict(q) for q in questions),
            responses=tuple(StudentResponse.from_dict(r) for r in responses),
        )


def find_question(question_id: str, questions: Mapping[str, Question]) -> Question:
    """Looks up a question by id, raising RecordNotFoundError when it is absent."""
    try:
        return questions[question_id]
    except KeyError:
        raise RecordNotFoundError("Question", question_id) from None
