from rest_framework import permissions


class IsLecturer(permissions.BasePermission):
    """
    Allows access to lecturers only.
    Strictly blocks students.
    """
    message = "Only lecturers can perform this action."

    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return False
        return getattr(request.user, 'role', '') == 'lecturer'


class IsStudent(permissions.BasePermission):
    message = "Only students can perform this action."

    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return False
        return getattr(request.user, 'role', '') == 'student'


class IsLecturerOrSelf(permissions.BasePermission):
    """Lecturers see every student; a student sees only their own records."""
    message = "You can only view your own results."

    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return False
        if getattr(request.user, 'role', '') == 'lecturer':
            return True
        return str(view.kwargs.get('student_id')) == str(request.user.id)
