# assessments/services.py
import logging

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.utils import timezone
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from cores.exceptions import Conflict
from cores.models import AuditLog
from exams.models import Question
from .models import Answer
from . import scoring

User = get_user_model()
logger = logging.getLogger(__name__)


def _get_student(student_id):
    try:
        return User.objects.get(id=student_id, role=User.Role.STUDENT)
    except User.DoesNotExist:
        raise NotFound("Student not found")


def submit_answer(student, question_id, content):
    """Save a student's answer, auto-scoring it when the question has keywords."""
    if not student.is_student:
        raise PermissionDenied("Only students can submit answers")

    try:
        question = Question.objects.get(id=question_id)
    except Question.DoesNotExist:
        raise NotFound("Question not found")

    if Answer.objects.filter(question=question, student=student).exists():
        raise Conflict("You have already answered this question")

    auto_score, status = scoring.keyword_auto_score(content, question.keywords, question.max_score)

    try:
        with transaction.atomic():
            answer = Answer.objects.create(
                question=question,
                student=student,
                content=content,
                auto_score=auto_score,
                final_score=auto_score,
                status=status,
                scored_at=timezone.now() if auto_score is not None else None,
            )
    except IntegrityError:
        # Another request for the same pair got in first
        raise Conflict("You have already answered this question")

    logger.info(
        "Answer %s submitted by student %s for question %s (status=%s, score=%s)",
        answer.id, student.id, question.id, answer.status, answer.final_score,
    )
    return answer


def manual_score_answer(answer_id, manual_score, scorer, feedback=None):
    """Lecturer grading. Always overrides the auto score, re-grading included."""
    if not scorer.is_lecturer:
        raise PermissionDenied("Only lecturers can manually score answers")

    try:
        answer = Answer.objects.select_related('question').get(id=answer_id)
    except Answer.DoesNotExist:
        raise NotFound("Answer not found")

    max_score = answer.question.max_score
    if manual_score < 0 or manual_score > max_score:
        raise ValidationError({"manual_score": [f"Score must be between 0 and {max_score}."]})

    answer.manual_score = manual_score
    answer.final_score = manual_score
    answer.status = Answer.Status.MANUALLY_SCORED
    answer.feedback = feedback or None
    answer.scored_at = timezone.now()
    answer.scored_by = scorer
    answer.save()

    AuditLog.objects.create(
        actor=scorer,
        action=AuditLog.Action.GRADE,
        target_model='Answer',
        target_object_id=str(answer.id),
        details=f"Scored {manual_score}/{max_score} for {answer.student}",
    )
    logger.info("Answer %s manually scored %s by lecturer %s", answer.id, manual_score, scorer.id)
    return answer


def get_score_summary(student_id):
    student = _get_student(student_id)
    answers = Answer.objects.filter(student=student).only('id', 'question', 'student', 'final_score')
    return scoring.build_score_summary(student, Question.objects.all(), answers)


def get_progress_report(student_id):
    student = _get_student(student_id)
    answers = Answer.objects.filter(student=student).select_related('question')
    return scoring.build_progress_report(student.id, answers)


def get_all_students_summary():
    students = User.objects.filter(role=User.Role.STUDENT).order_by('id')
    answers = Answer.objects.filter(student__role=User.Role.STUDENT).only('id', 'question', 'student', 'final_score')
    return scoring.summarize_roster(students, Question.objects.all(), answers)


def get_student_answers(student_id):
    student = _get_student(student_id)
    return Answer.objects.filter(student=student).select_related('question').order_by('-submitted_at', '-id')


def get_question_answers(question_id):
    if not Question.objects.filter(id=question_id).exists():
        raise NotFound("Question not found")
    return Answer.objects.filter(question_id=question_id).select_related('student').order_by('-submitted_at', '-id')
