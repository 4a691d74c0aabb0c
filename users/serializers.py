import logging

from rest_framework import serializers
from django.contrib.auth import get_user_model
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from cores.exceptions import Conflict
from cores.models import AuditLog

User = get_user_model()
logger = logging.getLogger(__name__)


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ['id', 'role', 'name', 'nim', 'attendance_number', 'date_joined']
        read_only_fields = fields


class StudentRegisterSerializer(serializers.ModelSerializer):
    name = serializers.CharField(min_length=1)
    nim = serializers.CharField(min_length=1)
    attendance_number = serializers.IntegerField(min_value=1)
    password = serializers.CharField(write_only=True, min_length=6)

    class Meta:
        model = User
        fields = ['id', 'name', 'nim', 'attendance_number', 'password', 'role']
        read_only_fields = ['role']

    def validate_nim(self, value):
        value = value.strip()
        if User.objects.filter(nim=value).exists() or User.objects.filter(username=value).exists():
            raise Conflict("NIM already exists")
        return value

    def create(self, validated_data):
        user = User.objects.create_user(
            username=validated_data['nim'],
            password=validated_data['password'],
            role=User.Role.STUDENT,
            name=validated_data['name'],
            nim=validated_data['nim'],
            attendance_number=validated_data['attendance_number'],
        )
        logger.info("Registered student %s (nim=%s)", user.id, user.nim)
        return user


class LecturerRegisterSerializer(serializers.ModelSerializer):
    name = serializers.CharField(min_length=1)
    password = serializers.CharField(write_only=True, min_length=6)

    class Meta:
        model = User
        fields = ['id', 'name', 'password', 'role']
        read_only_fields = ['role']

    def validate_name(self, value):
        value = value.strip()
        if User.objects.filter(username=value).exists():
            raise Conflict("Lecturer with this name already exists")
        return value

    def create(self, validated_data):
        user = User.objects.create_user(
            username=validated_data['name'],
            password=validated_data['password'],
            role=User.Role.LECTURER,
            name=validated_data['name'],
        )
        logger.info("Registered lecturer %s (%s)", user.id, user.name)
        return user


class LoginSerializer(TokenObtainPairSerializer):
    """Accepts {identifier, password}; identifier is a NIM or a lecturer name."""
    username_field = 'identifier'

    def validate(self, attrs):
        data = super().validate(attrs)
        data['user'] = UserSerializer(self.user).data
        if self.user.is_lecturer:
            AuditLog.objects.create(
                actor=self.user,
                action=AuditLog.Action.LOGIN,
                target_model='User',
                target_object_id=str(self.user.id),
                details=f"Lecturer logged in: {self.user.name}",
            )
        return data
