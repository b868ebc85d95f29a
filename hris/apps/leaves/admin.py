from django.contrib import admin

from .models import Leave, LeaveCredit


@admin.register(Leave)
class LeaveAdmin(admin.ModelAdmin):
    list_display = ('employee', 'leave_type', 'leave_start_date', 'leave_end_date', 'leave_days', 'leave_status')
    list_filter = ('leave_status', 'leave_type')
    search_fields = ('employee__employee_name', 'employee__employee_id_number')


@admin.register(LeaveCredit)
class LeaveCreditAdmin(admin.ModelAdmin):
    list_display = ('employee', 'total_credits', 'used_credits')
