from django.contrib import admin

from .models import Question


@admin.register(Question)
class QuestionAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'category', 'max_score', 'created_by', 'updated_at')
    list_filter = ('category',)
    search_fields = ('title', 'content')
