# exams/models.py
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


class Question(models.Model):
    class Category(models.TextChoices):
        # Stored values are kept exactly as the course uses them, casing included
        PERTEMUAN_1 = "Pertemuan 1-Pemikiran Sistem", "Pertemuan 1-Pemikiran Sistem"
        PERTEMUAN_2 = "PERTEMUAN 2- ANALISIS JARINGAN", "PERTEMUAN 2- ANALISIS JARINGAN"
        PERTEMUAN_3 = "Pertemuan 3-Parameter Analisis Jaringan", "Pertemuan 3-Parameter Analisis Jaringan"
        PERTEMUAN_4 = "Pertemuan 4-Analisis Jaringan Pada Manajemen Proyek", "Pertemuan 4-Analisis Jaringan Pada Manajemen Proyek"
        PERTEMUAN_5 = "Pertemuan 5- Simulasi Monte Carlo", "Pertemuan 5- Simulasi Monte Carlo"
        GAME_THEORY_2XN = "Game Theory 2xN", "Game Theory 2xN"
        GAME_THEORY_MXN = "Game Theory MxN", "Game Theory MxN"

    title = models.CharField(max_length=255)
    content = models.TextField()
    category = models.CharField(max_length=100, choices=Category.choices)
    max_score = models.PositiveIntegerField(validators=[MinValueValidator(1)])

    # Auto-scoring: a list of keywords, and a free-text hint for graders
    keywords = models.JSONField(null=True, blank=True)
    answer_pattern = models.TextField(null=True, blank=True)

    created_by = models.ForeignKey(settings.AUTH_USER_MODEL, related_name='questions', on_delete=models.PROTECT)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.CheckConstraint(condition=models.Q(max_score__gt=0), name="question_max_score_positive"),
        ]

    def __str__(self):
        return f"{self.title[:50]}"
