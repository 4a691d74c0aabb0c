from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ('id', 'username', 'name', 'role', 'nim', 'attendance_number', 'is_staff')
    list_filter = ('role', 'is_staff')
    search_fields = ('username', 'name', 'nim')
    fieldsets = BaseUserAdmin.fieldsets + (
        ('Exam identity', {'fields': ('role', 'name', 'nim', 'attendance_number')}),
    )
    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ('Exam identity', {'fields': ('role', 'name', 'nim', 'attendance_number')}),
    )
