from rest_framework import generics, permissions
from rest_framework_simplejwt.views import TokenObtainPairView

from .serializers import (
    StudentRegisterSerializer,
    LecturerRegisterSerializer,
    LoginSerializer,
    UserSerializer,
)


# --- Authentication Views ---
class StudentRegisterView(generics.CreateAPIView):
    serializer_class = StudentRegisterSerializer
    permission_classes = [permissions.AllowAny]
    authentication_classes = []


class LecturerRegisterView(generics.CreateAPIView):
    serializer_class = LecturerRegisterSerializer
    permission_classes = [permissions.AllowAny]
    authentication_classes = []


class LoginView(TokenObtainPairView):
    serializer_class = LoginSerializer


# --- Profile ---
class UserProfileView(generics.RetrieveAPIView):
    serializer_class = UserSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_object(self):
        return self.request.user
