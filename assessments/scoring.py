"""
Scoring and reporting for submitted answers.

Everything here works on rows that were already fetched (model instances or
any object with the same attributes) and touches neither the database nor
the clock. Persisting the results is left to `assessments.services`.
"""
from collections import defaultdict
from decimal import Decimal, ROUND_HALF_UP

from exams.models import Question
from .models import Answer

CATEGORIES = list(Question.Category.values)

_ONE = Decimal("1")
_CENT = Decimal("0.01")


def keyword_auto_score(content, keywords, max_score):
    """
    Score an answer by the share of keywords it mentions.

    Each entry of `keywords` is checked once for a case-insensitive substring
    match, so duplicates in the list weigh double on both sides of the ratio.
    The score is rounded half up (66.67 -> 67, 2.5 -> 3).

    Returns (score, status). Without keywords the answer waits for a lecturer:
    (None, "pending").
    """
    if not keywords:
        return None, Answer.Status.PENDING

    text = (content or "").lower()
    matched = sum(1 for keyword in keywords if keyword.lower() in text)
    raw = Decimal(matched) * Decimal(max_score) / Decimal(len(keywords))
    return int(raw.quantize(_ONE, rounding=ROUND_HALF_UP)), Answer.Status.AUTO_SCORED


def percentage(score, max_score):
    if not max_score:
        return 0.0
    ratio = Decimal(score) * 100 / Decimal(max_score)
    return float(ratio.quantize(_CENT, rounding=ROUND_HALF_UP))


def build_score_summary(student, questions, answers):
    """
    Overall and per-category totals for one student.

    `questions` is the whole catalog and `answers` are that student's rows.
    Every category shows up in the breakdown, even with no questions in it.
    """
    questions = list(questions)
    answers = list(answers)
    category_of = {q.id: q.category for q in questions}

    category_totals = {category: {"score": 0, "max_score": 0} for category in CATEGORIES}
    for question in questions:
        category_totals[question.category]["max_score"] += question.max_score

    total_score = 0
    for answer in answers:
        score = answer.final_score or 0
        total_score += score
        category = category_of.get(answer.question_id)
        if category is not None:
            category_totals[category]["score"] += score

    max_possible_score = sum(q.max_score for q in questions)

    return {
        "student_id": student.id,
        "student_name": student.name,
        "nim": student.nim or "",
        "total_questions": len(questions),
        "answered_questions": len(answers),
        "total_score": total_score,
        "max_possible_score": max_possible_score,
        "percentage": percentage(total_score, max_possible_score),
        "category_scores": [
            {
                "category": category,
                "score": totals["score"],
                "max_score": totals["max_score"],
                "percentage": percentage(totals["score"], totals["max_score"]),
            }
            for category, totals in category_totals.items()
        ],
    }


def build_progress_report(student_id, answers):
    """One entry per submitted answer, newest submission first."""
    ordered = sorted(answers, key=lambda a: (a.submitted_at, a.id), reverse=True)
    return {
        "student_id": student_id,
        "answers": [
            {
                "question_id": answer.question_id,
                "question_title": answer.question.title,
                "category": answer.question.category,
                "final_score": answer.final_score,
                "max_score": answer.question.max_score,
                "status": answer.status,
                "submitted_at": answer.submitted_at,
            }
            for answer in ordered
        ],
    }


def summarize_roster(students, questions, answers):
    """Score summary for every student. Non-students are skipped."""
    questions = list(questions)
    answers_by_student = defaultdict(list)
    for answer in answers:
        answers_by_student[answer.student_id].append(answer)

    return [
        build_score_summary(student, questions, answers_by_student[student.id])
        for student in students
        if student.role == "student"
    ]
