"""Scoring of a student's attempt against the question answer keys."""

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from core.models import Option, Question, QuestionResponse, StudentResponse, find_question
from utils.error_handler import RecordNotFoundError


@dataclass
class Score:
    correct: int = 0
    total: int = 0


@dataclass(frozen=True)
class AnswerDetail:
    """An option as shown in feedback. Both fields are None if the option id is unknown."""
    key: Optional[str]
    value: Optional[str]

    @classmethod
    def from_option(cls, option: Optional[Option]) -> "AnswerDetail":
        if option is None:
            return cls(key=None, value=None)
        return cls(key=option.id, value=f"{option.label} - {option.value}")


@dataclass(frozen=True)
class WrongAnswer:
    question: Question
    user_answer: AnswerDetail
    correct_answer: AnswerDetail


def is_correct(question_response: QuestionResponse, question: Question) -> bool:
    """True when the chosen option id is exactly the question's key."""
    return question_response.response == question.config.key


def total_score(response: StudentResponse, questions: Mapping[str, Question]) -> Score:
    """Counts correct answers in an attempt.

    Every answer counts toward the total. An answer to a question that is not
    in `questions` is never counted as correct.
    """
    score = Score(total=len(response.responses))
    for question_response in response.responses:
        try:
            question = find_question(question_response.question_id, questions)
        except RecordNotFoundError:
            continue
        if is_correct(question_response, question):
            score.correct += 1
    return score


def strand_scores(response: StudentResponse, questions: Mapping[str, Question]) -> Dict[str, Score]:
    """Groups an attempt's answers by question strand, in the order strands first appear.

    Raises:
        RecordNotFoundError: If an answer refers to an unknown question.
    """
    scores: Dict[str, Score] = {}
    for question_response in response.responses:
        question = find_question(question_response.question_id, questions)
        score = scores.setdefault(question.strand, Score())
        score.total += 1
        if is_correct(question_response, question):
            score.correct += 1
    return scores


def wrong_answers(response: StudentResponse, questions: Mapping[str, Question]) -> List[WrongAnswer]:
    """Lists the incorrectly answered questions with the chosen and the correct option.

    Raises:
        RecordNotFoundError: If an answer refers to an unknown question.
    """
    wrong = []
    for question_response in response.responses:
        question = find_question(question_response.question_id, questions)
        if is_correct(question_response, question):
            continue
        wrong.append(WrongAnswer(
            question=question,
            user_answer=AnswerDetail.from_option(question.config.find_option(question_response.response)),
            correct_answer=AnswerDetail.from_option(question.config.find_option(question.config.key)),
        ))
    return wrong
