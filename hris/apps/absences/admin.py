from django.contrib import admin

from .models import Absence, AbsenceCredit


@admin.register(Absence)
class AbsenceAdmin(admin.ModelAdmin):
    list_display = ('full_name', 'department', 'absence_type', 'from_date', 'to_date', 'status')
    list_filter = ('status', 'absence_type', 'department')
    search_fields = ('full_name', 'employee_id_number')
    readonly_fields = ('submitted_at', 'approved_at')


@admin.register(AbsenceCredit)
class AbsenceCreditAdmin(admin.ModelAdmin):
    list_display = ('employee', 'total_credits', 'used_credits')
