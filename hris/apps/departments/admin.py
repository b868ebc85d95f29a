from django.contrib import admin

from .models import Department, SupervisorDepartment


class SupervisorDepartmentInline(admin.TabularInline):
    model = SupervisorDepartment
    extra = 0


@admin.register(Department)
class DepartmentAdmin(admin.ModelAdmin):
    list_display = ('name', 'created_at')
    search_fields = ('name',)
    inlines = [SupervisorDepartmentInline]


@admin.register(SupervisorDepartment)
class SupervisorDepartmentAdmin(admin.ModelAdmin):
    list_display = ('user', 'department', 'can_evaluate', 'created_at')
    list_filter = ('can_evaluate', 'department')
