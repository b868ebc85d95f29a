from django.contrib import admin

from .models import ResumeToWork


@admin.register(ResumeToWork)
class ResumeToWorkAdmin(admin.ModelAdmin):
    list_display = ('employee', 'return_date', 'status', 'processed_by', 'supervisor_notified')
    list_filter = ('status', 'supervisor_notified')
    search_fields = ('employee__employee_name', 'employee__employee_id_number')
    readonly_fields = ('processed_at', 'supervisor_notified_at')
