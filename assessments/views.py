from rest_framework import generics, permissions, status, views
from rest_framework.response import Response
from django.contrib.auth import get_user_model

from exams.models import Question
from .models import Answer
from .permissions import IsLecturer, IsStudent, IsLecturerOrSelf
from .serializers import (
    AnswerSerializer, GradingAnswerSerializer,
    AnswerSubmitSerializer, ManualScoreSerializer,
)
from . import services

User = get_user_model()


class LecturerStatsView(views.APIView):
    """
    Returns aggregated statistics for the Lecturer Dashboard.
    """
    permission_classes = [IsLecturer]

    def get(self, request):
        return Response({
            "total_questions": Question.objects.count(),
            "total_students": User.objects.filter(role=User.Role.STUDENT).count(),
            "pending_grading": Answer.objects.filter(status=Answer.Status.PENDING).count(),
            "manually_scored": Answer.objects.filter(status=Answer.Status.MANUALLY_SCORED).count(),
        })


# --- LECTURER VIEWS ---

class PendingGradingListView(generics.ListAPIView):
    """List all answers still waiting for a lecturer."""
    permission_classes = [IsLecturer]
    serializer_class = GradingAnswerSerializer

    def get_queryset(self):
        return (
            Answer.objects.filter(status=Answer.Status.PENDING)
            .select_related('student', 'question')
            .order_by('submitted_at', 'id')
        )


class ManualScoreView(views.APIView):
    """Lecturer submits a score (and optional feedback) for one answer."""
    permission_classes = [IsLecturer]

    def post(self, request, answer_id):
        serializer = ManualScoreSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        answer = services.manual_score_answer(
            answer_id,
            serializer.validated_data['manual_score'],
            scorer=request.user,
            feedback=serializer.validated_data.get('feedback'),
        )
        return Response(AnswerSerializer(answer).data)


class AllStudentsSummaryView(views.APIView):
    permission_classes = [IsLecturer]

    def get(self, request):
        return Response(services.get_all_students_summary())


# --- STUDENT VIEWS ---

class SubmitAnswerView(views.APIView):
    """
    Student submits an answer.
    Scores it immediately when the question has keywords.
    """
    permission_classes = [IsStudent]

    def post(self, request):
        serializer = AnswerSubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        answer = services.submit_answer(
            request.user,
            serializer.validated_data['question_id'],
            serializer.validated_data['content'],
        )
        return Response(AnswerSerializer(answer).data, status=status.HTTP_201_CREATED)


# --- SHARED (lecturer, or the student themselves) ---

class StudentAnswersView(generics.ListAPIView):
    """Answer history of one student, newest first."""
    permission_classes = [IsLecturerOrSelf]
    serializer_class = AnswerSerializer
    pagination_class = None

    def get_queryset(self):
        return services.get_student_answers(self.kwargs['student_id'])


class ScoreSummaryView(views.APIView):
    permission_classes = [IsLecturerOrSelf]

    def get(self, request, student_id):
        return Response(services.get_score_summary(student_id))


class ProgressReportView(views.APIView):
    permission_classes = [IsLecturerOrSelf]

    def get(self, request, student_id):
        return Response(services.get_progress_report(student_id))
