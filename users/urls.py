from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from .views import (
    StudentRegisterView,
    LecturerRegisterView,
    LoginView,
    UserProfileView,
)

urlpatterns = [
    # --- Authentication ---
    path('auth/register/student/', StudentRegisterView.as_view(), name='register-student'),
    path('auth/register/lecturer/', LecturerRegisterView.as_view(), name='register-lecturer'),
    path('auth/login/', LoginView.as_view(), name='login'),
    path('auth/refresh/', TokenRefreshView.as_view(), name='token-refresh'),

    path('profile/', UserProfileView.as_view(), name='user-profile'),
]
