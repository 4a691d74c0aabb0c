from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),

    # --- Authentication & Profile ---
    path('api/', include('users.urls')),

    # --- Question Bank ---
    path('api/', include('exams.urls')),

    # --- Answers, Grading & Reports ---
    path('api/', include('assessments.urls')),

    # --- Health & Audit Log ---
    path('api/', include('cores.urls')),
]
