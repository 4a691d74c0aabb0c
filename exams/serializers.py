# exams/serializers.py
from django.db.models import Max
from rest_framework import serializers
from .models import Question


class QuestionSerializer(serializers.ModelSerializer):
    title = serializers.CharField(min_length=1)
    content = serializers.CharField(min_length=1)
    max_score = serializers.IntegerField(min_value=1)
    keywords = serializers.ListField(child=serializers.CharField(allow_blank=True), required=False, allow_null=True)
    answer_pattern = serializers.CharField(required=False, allow_null=True, allow_blank=True)

    # Read-only field to show who wrote the question
    created_by_name = serializers.CharField(source='created_by.name', read_only=True)

    class Meta:
        model = Question
        fields = [
            'id', 'title', 'content', 'category', 'max_score',
            'keywords', 'answer_pattern',
            'created_by', 'created_by_name', 'created_at', 'updated_at',
        ]
        read_only_fields = ['created_by', 'created_at', 'updated_at']

    def validate_keywords(self, value):
        if value is None:
            return None
        # Blank keywords would match every answer
        cleaned = [kw for kw in value if kw.strip()]
        return cleaned or None

    def validate_answer_pattern(self, value):
        return value or None

    def validate_max_score(self, value):
        if self.instance is None:
            return value
        # Existing answers must still fit under the new maximum
        highest = self.instance.answers.aggregate(highest=Max('final_score'))['highest']
        if highest is not None and value < highest:
            raise serializers.ValidationError(
                f"An answer already holds {highest} points; max_score cannot go below that."
            )
        return value
