from django.contrib import admin

from .models import Employee


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ('employee_id_number', 'employee_name', 'department', 'position', 'work_status')
    list_filter = ('department', 'work_status')
    search_fields = ('employee_id_number', 'employee_name')
