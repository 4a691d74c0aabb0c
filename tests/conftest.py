import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from exams.models import Question

User = get_user_model()

CATEGORY_1 = Question.Category.PERTEMUAN_1
CATEGORY_2 = Question.Category.PERTEMUAN_2


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_student(db):
    def _make(name="Siti Aminah", nim="2101001", attendance_number=1, password="rahasia123"):
        return User.objects.create_user(
            username=nim,
            password=password,
            role=User.Role.STUDENT,
            name=name,
            nim=nim,
            attendance_number=attendance_number,
        )
    return _make


@pytest.fixture
def make_lecturer(db):
    def _make(name="Dr. Budi Santoso", password="dosen123"):
        return User.objects.create_user(
            username=name,
            password=password,
            role=User.Role.LECTURER,
            name=name,
        )
    return _make


@pytest.fixture
def student(make_student):
    return make_student()


@pytest.fixture
def lecturer(make_lecturer):
    return make_lecturer()


@pytest.fixture
def make_question(db, lecturer):
    def _make(title="Sistem", category=CATEGORY_1, max_score=100, keywords=None,
              content="Jelaskan konsep berikut.", created_by=None):
        return Question.objects.create(
            title=title,
            content=content,
            category=category,
            max_score=max_score,
            keywords=keywords,
            created_by=created_by or lecturer,
        )
    return _make


@pytest.fixture
def student_client(api_client, student):
    api_client.force_authenticate(user=student)
    return api_client


@pytest.fixture
def lecturer_client(api_client, lecturer):
    api_client.force_authenticate(user=lecturer)
    return api_client
