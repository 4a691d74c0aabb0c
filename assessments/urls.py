from django.urls import path
from .views import (
    LecturerStatsView, PendingGradingListView, ManualScoreView, AllStudentsSummaryView,
    SubmitAnswerView, StudentAnswersView, ScoreSummaryView, ProgressReportView,
)

urlpatterns = [
    # --- Grading Module (Lecturer) ---
    path('stats/', LecturerStatsView.as_view(), name='lecturer-stats'),
    path('grading/pending/', PendingGradingListView.as_view(), name='grading-pending'),
    path('answers/<int:answer_id>/score/', ManualScoreView.as_view(), name='answer-score'),
    path('students/summary/', AllStudentsSummaryView.as_view(), name='students-summary'),

    # --- Student Answer Flow ---
    path('answers/', SubmitAnswerView.as_view(), name='answer-submit'),

    # --- Reports ---
    path('students/<int:student_id>/answers/', StudentAnswersView.as_view(), name='student-answers'),
    path('students/<int:student_id>/summary/', ScoreSummaryView.as_view(), name='student-summary'),
    path('students/<int:student_id>/progress/', ProgressReportView.as_view(), name='student-progress'),
]
