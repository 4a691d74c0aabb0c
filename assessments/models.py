# assessments/models.py
from django.db import models
from django.conf import settings
from exams.models import Question


class Answer(models.Model):
    """One student's submission for one question."""

    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        AUTO_SCORED = "auto_scored", "Auto Scored"
        MANUALLY_SCORED = "manually_scored", "Manually Scored"

    question = models.ForeignKey(Question, related_name='answers', on_delete=models.CASCADE)
    student = models.ForeignKey(settings.AUTH_USER_MODEL, related_name='answers', on_delete=models.CASCADE)
    content = models.TextField()

    # Grading. final_score is the one every report reads.
    auto_score = models.IntegerField(null=True, blank=True)
    manual_score = models.IntegerField(null=True, blank=True)
    final_score = models.IntegerField(null=True, blank=True)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING)
    feedback = models.TextField(null=True, blank=True)  # From the lecturer

    submitted_at = models.DateTimeField(auto_now_add=True)
    scored_at = models.DateTimeField(null=True, blank=True)
    scored_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        related_name='scored_answers',
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
    )

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['question', 'student'], name='answer_one_per_student_question'),
        ]

    def __str__(self):
        return f"{self.student} - {self.question}"
