import logging

from rest_framework import viewsets, mixins, permissions, filters
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.pagination import LimitOffsetPagination
from rest_framework.response import Response

from assessments.permissions import IsLecturer
from assessments.serializers import GradingAnswerSerializer
from assessments import services
from cores.models import AuditLog
from .models import Question
from .serializers import QuestionSerializer

logger = logging.getLogger(__name__)


class QuestionPagination(LimitOffsetPagination):
    default_limit = 50
    max_limit = 200


class QuestionViewSet(mixins.CreateModelMixin,
                      mixins.RetrieveModelMixin,
                      mixins.UpdateModelMixin,
                      mixins.ListModelMixin,
                      viewsets.GenericViewSet):
    """
    Question bank. Everyone signed in can read it; only lecturers write.
    Questions are never deleted.
    """
    queryset = Question.objects.select_related('created_by').order_by('-id')
    serializer_class = QuestionSerializer
    pagination_class = QuestionPagination
    lookup_value_regex = r'\d+'

    # Enable Search for the Question Bank
    filter_backends = [filters.SearchFilter]
    search_fields = ['title', 'content']

    def get_permissions(self):
        if self.action in ['list', 'retrieve']:
            return [permissions.IsAuthenticated()]
        return [IsLecturer()]

    def get_queryset(self):
        queryset = super().get_queryset()
        # Filter by category if provided ?category=Game Theory 2xN
        category = self.request.query_params.get('category')
        if category:
            if category not in Question.Category.values:
                raise ValidationError({"category": [f'"{category}" is not a valid category.']})
            queryset = queryset.filter(category=category)
        return queryset

    def perform_create(self, serializer):
        question = serializer.save(created_by=self.request.user)
        AuditLog.objects.create(
            actor=self.request.user,
            action=AuditLog.Action.CREATE,
            target_model='Question',
            target_object_id=str(question.id),
            details=f"Created question: {question.title} ({question.category})",
        )
        logger.info("Question %s created by lecturer %s", question.id, self.request.user.id)

    def perform_update(self, serializer):
        question = serializer.save()
        AuditLog.objects.create(
            actor=self.request.user,
            action=AuditLog.Action.UPDATE,
            target_model='Question',
            target_object_id=str(question.id),
            details=f"Updated fields: {', '.join(sorted(serializer.validated_data)) or 'none'}",
        )
        logger.info("Question %s updated by lecturer %s", question.id, self.request.user.id)

    @action(detail=True, methods=['get'], url_path='answers')
    def answers(self, request, pk=None):
        """All answers submitted for this question."""
        answers = services.get_question_answers(pk)
        return Response(GradingAnswerSerializer(answers, many=True).data)
