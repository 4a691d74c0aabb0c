# users/models.py
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    class Role(models.TextChoices):
        STUDENT = "student", "Student"
        LECTURER = "lecturer", "Lecturer"

    # Login identifier: the NIM for students, the name for lecturers
    username = models.CharField(max_length=150, unique=True)

    role = models.CharField(max_length=20, choices=Role.choices, default=Role.LECTURER)
    name = models.CharField(max_length=255)

    # Student-only identity
    nim = models.CharField(max_length=50, unique=True, null=True, blank=True)
    attendance_number = models.PositiveIntegerField(null=True, blank=True)

    REQUIRED_FIELDS = ["name"]

    class Meta:
        constraints = [
            models.CheckConstraint(
                condition=(
                    models.Q(role="student", nim__isnull=False, attendance_number__isnull=False)
                    | models.Q(role="lecturer", nim__isnull=True, attendance_number__isnull=True)
                ),
                name="user_student_identity_matches_role",
            ),
        ]

    @property
    def is_student(self):
        return self.role == self.Role.STUDENT

    @property
    def is_lecturer(self):
        return self.role == self.Role.LECTURER

    def __str__(self):
        if self.is_student:
            return f"{self.name} ({self.nim})"
        return self.name
