from django.contrib import admin

from .models import Notification


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ('notification_type', 'recipient', 'subject_kind', 'subject_id', 'created_at', 'read_at')
    list_filter = ('notification_type', 'read_at')
    readonly_fields = ('data', 'created_at')
