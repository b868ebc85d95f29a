from rest_framework import serializers

from hris.apps.notifications.models import Notification


class NotificationSerializer(serializers.ModelSerializer):
    recipient_user_id = serializers.IntegerField(source='recipient_id', read_only=True)
    type = serializers.CharField(source='notification_type', read_only=True)
    is_read = serializers.BooleanField(read_only=True)

    class Meta:
        model = Notification
        fields = [
            'id', 'type', 'recipient_user_id', 'data',
            'subject_kind', 'subject_id',
            'is_read', 'read_at', 'created_at',
        ]
        read_only_fields = fields
