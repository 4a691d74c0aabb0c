import pytest
from rest_framework.test import APIClient

from assessments import services
from assessments.models import Answer
from cores.models import AuditLog
from tests.conftest import CATEGORY_1, CATEGORY_2

pytestmark = pytest.mark.django_db


def client_for(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


# --- Submitting ---

def test_submit_auto_scored(student_client, student, make_question):
    q = make_question(keywords=["network", "analysis", "system"], max_score=100)

    resp = student_client.post('/api/answers/', {"question_id": q.id, "content": "network and analysis"}, format='json')

    assert resp.status_code == 201
    assert resp.data["student_id"] == student.id
    assert resp.data["question_id"] == q.id
    assert resp.data["status"] == "auto_scored"
    assert resp.data["auto_score"] == 67
    assert resp.data["final_score"] == 67
    assert resp.data["scored_at"] is not None


def test_submit_pending(student_client, make_question):
    q = make_question(keywords=None)

    resp = student_client.post('/api/answers/', {"question_id": q.id, "content": "jawaban"}, format='json')

    assert resp.status_code == 201
    assert resp.data["status"] == "pending"
    assert resp.data["final_score"] is None


def test_submit_twice_conflicts(student_client, make_question):
    q = make_question()
    payload = {"question_id": q.id, "content": "jawaban"}

    assert student_client.post('/api/answers/', payload, format='json').status_code == 201
    assert student_client.post('/api/answers/', payload, format='json').status_code == 409


def test_submit_unknown_question(student_client):
    resp = student_client.post('/api/answers/', {"question_id": 999, "content": "x"}, format='json')
    assert resp.status_code == 404


def test_submit_empty_content(student_client, make_question):
    q = make_question()
    resp = student_client.post('/api/answers/', {"question_id": q.id, "content": ""}, format='json')
    assert resp.status_code == 400


def test_lecturer_cannot_submit(lecturer_client, make_question):
    q = make_question()
    resp = lecturer_client.post('/api/answers/', {"question_id": q.id, "content": "x"}, format='json')
    assert resp.status_code == 403


# --- Manual scoring ---

def test_manual_score(lecturer_client, lecturer, student, make_question):
    q = make_question(keywords=["graph"], max_score=100)
    answer = services.submit_answer(student, q.id, "graph")

    resp = lecturer_client.post(f'/api/answers/{answer.id}/score/', {"manual_score": 85, "feedback": "Bagus"}, format='json')

    assert resp.status_code == 200
    assert resp.data["final_score"] == 85
    assert resp.data["manual_score"] == 85
    assert resp.data["auto_score"] == 100
    assert resp.data["status"] == "manually_scored"
    assert resp.data["feedback"] == "Bagus"
    assert resp.data["scored_by"] == lecturer.id


@pytest.mark.parametrize("score", [-1, 11])
def test_manual_score_out_of_range(lecturer_client, student, make_question, score):
    answer = services.submit_answer(student, make_question(max_score=10).id, "x")

    resp = lecturer_client.post(f'/api/answers/{answer.id}/score/', {"manual_score": score}, format='json')

    assert resp.status_code == 400
    answer.refresh_from_db()
    assert answer.manual_score is None


def test_manual_score_unknown_answer(lecturer_client):
    resp = lecturer_client.post('/api/answers/999/score/', {"manual_score": 1}, format='json')
    assert resp.status_code == 404


def test_student_cannot_score(student_client, student, make_question):
    answer = services.submit_answer(student, make_question().id, "x")
    resp = student_client.post(f'/api/answers/{answer.id}/score/', {"manual_score": 100}, format='json')
    assert resp.status_code == 403


def test_pending_grading_queue(lecturer_client, student, make_question):
    pending = services.submit_answer(student, make_question(title="Essay").id, "x")
    services.submit_answer(student, make_question(title="Auto", keywords=["x"]).id, "x")

    resp = lecturer_client.get('/api/grading/pending/')

    assert resp.status_code == 200
    assert [a["id"] for a in resp.data] == [pending.id]
    assert resp.data[0]["question_title"] == "Essay"


def test_lecturer_stats(lecturer_client, lecturer, student, make_question):
    answer = services.submit_answer(student, make_question().id, "x")
    services.submit_answer(student, make_question().id, "y")
    services.manual_score_answer(answer.id, 5, scorer=lecturer)

    resp = lecturer_client.get('/api/stats/')

    assert resp.data == {
        "total_questions": 2,
        "total_students": 1,
        "pending_grading": 1,
        "manually_scored": 1,
    }


def test_audit_log_filter(lecturer_client, lecturer, student, make_question):
    answer = services.submit_answer(student, make_question().id, "x")
    services.manual_score_answer(answer.id, 5, scorer=lecturer)
    AuditLog.objects.create(actor=lecturer, action=AuditLog.Action.CREATE, target_model='Question')

    resp = lecturer_client.get('/api/audit-logs/', {"action": "grade"})

    assert resp.status_code == 200
    assert [entry["action"] for entry in resp.data] == ["GRADE"]
    assert resp.data[0]["actor_name"] == lecturer.name


# --- Reports ---

def test_summary_endpoint_scenario(lecturer, student, make_question):
    q1 = make_question(category=CATEGORY_1, max_score=10)
    make_question(category=CATEGORY_2, max_score=15)
    answer = services.submit_answer(student, q1.id, "x")
    services.manual_score_answer(answer.id, 8, scorer=lecturer)

    resp = client_for(student).get(f'/api/students/{student.id}/summary/')

    assert resp.status_code == 200
    assert resp.data["total_questions"] == 2
    assert resp.data["answered_questions"] == 1
    assert resp.data["total_score"] == 8
    assert resp.data["max_possible_score"] == 25
    assert resp.data["percentage"] == 32.0
    assert len(resp.data["category_scores"]) == 7


def test_student_cannot_see_other_students(student, make_student):
    other = make_student(nim="2101999", name="Andi")

    for suffix in ("summary", "progress", "answers"):
        resp = client_for(student).get(f'/api/students/{other.id}/{suffix}/')
        assert resp.status_code == 403


def test_lecturer_sees_any_student(lecturer, student):
    for suffix in ("summary", "progress", "answers"):
        resp = client_for(lecturer).get(f'/api/students/{student.id}/{suffix}/')
        assert resp.status_code == 200


@pytest.mark.parametrize("suffix", ["summary", "progress", "answers"])
def test_unknown_student_not_found(lecturer, suffix):
    resp = client_for(lecturer).get(f'/api/students/9999/{suffix}/')
    assert resp.status_code == 404


def test_progress_report_endpoint(student, make_question):
    q = make_question(title="Monte Carlo", max_score=20, keywords=["acak"])
    services.submit_answer(student, q.id, "bilangan acak")

    resp = client_for(student).get(f'/api/students/{student.id}/progress/')

    assert resp.status_code == 200
    assert resp.data["student_id"] == student.id
    [entry] = resp.data["answers"]
    assert entry["question_title"] == "Monte Carlo"
    assert entry["final_score"] == 20
    assert entry["max_score"] == 20
    assert entry["status"] == "auto_scored"


def test_answer_history_newest_first(student, make_question):
    first = services.submit_answer(student, make_question(title="One").id, "x")
    second = services.submit_answer(student, make_question(title="Two").id, "y")

    resp = client_for(student).get(f'/api/students/{student.id}/answers/')

    assert [a["id"] for a in resp.data] == [second.id, first.id]


def test_roster_summary(lecturer, student, make_student, make_question):
    make_student(nim="2101002", name="Andi")
    make_question()

    resp = client_for(lecturer).get('/api/students/summary/')

    assert resp.status_code == 200
    assert len(resp.data) == 2
    assert all(len(s["category_scores"]) == 7 for s in resp.data)


def test_roster_is_lecturer_only(student):
    assert client_for(student).get('/api/students/summary/').status_code == 403


def test_summary_is_stable_between_calls(student, make_question):
    services.submit_answer(student, make_question(keywords=["a"]).id, "a")
    client = client_for(student)

    first = client.get(f'/api/students/{student.id}/summary/')
    second = client.get(f'/api/students/{student.id}/summary/')

    assert first.data == second.data


def test_health_is_public(api_client):
    resp = api_client.get('/api/health/')
    assert resp.status_code == 200
    assert resp.data["status"] == "ok"
