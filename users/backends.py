# users/backends.py
from django.contrib.auth.backends import ModelBackend
from django.contrib.auth import get_user_model
from django.db.models import Q

User = get_user_model()


class IdentifierBackend(ModelBackend):
    """
    Students log in with their NIM, lecturers with the name they registered
    with. Both are stored in `username`, which never changes afterwards.
    """

    def authenticate(self, request, identifier=None, password=None, **kwargs):
        identifier = identifier or kwargs.get("username")
        if not identifier or password is None:
            return None
        try:
            user = User.objects.get(
                Q(nim=identifier) | Q(role=User.Role.LECTURER, username=identifier)
            )
        except User.DoesNotExist:
            # Same hashing cost as a real password check
            User().set_password(password)
            return None
        except User.MultipleObjectsReturned:
            user = User.objects.filter(nim=identifier).order_by("id").first()
            if user is None:
                return None

        if user.check_password(password) and self.user_can_authenticate(user):
            return user
        return None
