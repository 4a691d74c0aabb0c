from django.urls import path
from .views import HealthCheckView, AuditLogListView

urlpatterns = [
    path('health/', HealthCheckView.as_view(), name='health'),
    path('audit-logs/', AuditLogListView.as_view(), name='audit-logs'),
]
