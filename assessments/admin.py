from django.contrib import admin

from .models import Answer


@admin.register(Answer)
class AnswerAdmin(admin.ModelAdmin):
    list_display = ('id', 'student', 'question', 'status', 'final_score', 'submitted_at')
    list_filter = ('status', 'question__category')
    raw_id_fields = ('question', 'student', 'scored_by')
