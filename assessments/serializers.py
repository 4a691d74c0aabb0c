from rest_framework import serializers
from .models import Answer


class AnswerSerializer(serializers.ModelSerializer):
    question_id = serializers.IntegerField(read_only=True)
    student_id = serializers.IntegerField(read_only=True)
    scored_by = serializers.PrimaryKeyRelatedField(read_only=True)

    class Meta:
        model = Answer
        fields = [
            'id', 'question_id', 'student_id', 'content',
            'auto_score', 'manual_score', 'final_score', 'status', 'feedback',
            'submitted_at', 'scored_at', 'scored_by',
        ]
        read_only_fields = fields


class GradingAnswerSerializer(AnswerSerializer):
    """Answer plus who wrote it and which question it belongs to, for lecturers."""
    student_name = serializers.CharField(source='student.name', read_only=True)
    student_nim = serializers.CharField(source='student.nim', read_only=True)
    question_title = serializers.CharField(source='question.title', read_only=True)
    max_score = serializers.IntegerField(source='question.max_score', read_only=True)

    class Meta(AnswerSerializer.Meta):
        fields = AnswerSerializer.Meta.fields + ['student_name', 'student_nim', 'question_title', 'max_score']
        read_only_fields = fields


class AnswerSubmitSerializer(serializers.Serializer):
    question_id = serializers.IntegerField()
    content = serializers.CharField(min_length=1)


class ManualScoreSerializer(serializers.Serializer):
    manual_score = serializers.IntegerField(min_value=0)
    feedback = serializers.CharField(required=False, allow_blank=True, allow_null=True)
